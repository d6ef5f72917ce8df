import io
from pathlib import PurePath

import pdfplumber

SUPPORTED_EXTENSIONS = frozenset({".pdf", ".docx", ".txt"})


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    from docx import Document

    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_upload_text(filename: str, content: bytes) -> str:
    """Extract text from an uploaded resume, dispatching on file extension.

    NUL bytes are stripped so the text can be stored as-is.
    Raises ValueError for unsupported file types.
    """
    suffix = PurePath(filename or "").suffix.lower()
    if suffix == ".pdf":
        text = extract_text(content)
    elif suffix == ".docx":
        text = extract_text_docx(content)
    elif suffix == ".txt":
        text = content.decode("utf-8", errors="replace").strip()
    else:
        raise ValueError(f"Unsupported file type: {suffix or filename!r}")
    return text.replace("\0", "")
