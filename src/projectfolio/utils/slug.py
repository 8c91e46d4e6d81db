"""Slug helper for project documents."""

from __future__ import annotations

_DOCUMENT_SUFFIX = ".md"


def slug_from_filename(filename: str) -> str:
    return filename.replace(_DOCUMENT_SUFFIX, "", 1)
