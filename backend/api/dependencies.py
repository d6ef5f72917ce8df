"""Shared dependencies for API routes."""

from services.profile_store import ProfileStore, get_profile_store


def get_store() -> ProfileStore:
    return get_profile_store()
