"""Job posting as consumed by skill matching."""

from pydantic import BaseModel, Field


class JobPosting(BaseModel):
    """A single active posting from the job catalog.

    Only ``title`` and ``skills`` drive matching; the rest is passed through.
    """
    id: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    type: str = ""
    salary: str | None = None
    description: str | None = None
    skills: list[str] = Field(default=[], max_length=200)
    apply_url: str = ""
    posted_at: str = ""
