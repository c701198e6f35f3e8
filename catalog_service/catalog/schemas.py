"""
Pydantic schema definitions for the catalog module.

``Book`` is both the stored record and the response shape: the
catalogue is small enough that there is no separate persistence
model. Review payloads keep every field optional, and the routes
also accept a request with no body, so a missing ``username`` falls through to
the session check (401) rather than failing body validation.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A single catalogue entry.

    ``reviews`` maps a username to that user's review text. A user has
    at most one review per book; writing again replaces it.
    """

    isbn: str
    title: str
    author: str
    reviews: Dict[str, Optional[str]] = Field(default_factory=dict)


class ReviewUpdate(BaseModel):
    username: Optional[str] = None
    # Stored as sent, null included.
    review: Optional[str] = ""


class ReviewDelete(BaseModel):
    username: Optional[str] = None


class ReviewsResponse(BaseModel):
    """Body returned after a review is written or removed."""

    message: str
    reviews: Dict[str, Optional[str]]
