"""
Route definitions for the catalogue API.

Endpoints:
- GET    /books                  : every book, keyed by ISBN
- GET    /books/isbn/{isbn}      : one book
- GET    /books/author/{author}  : books by author (case-insensitive, exact)
- GET    /books/title/{title}    : books whose title contains the text
- GET    /books/review/{isbn}    : reviews of one book
- PUT    /books/review/{isbn}    : add or replace the caller's review
- DELETE /books/review/{isbn}    : remove the caller's review

Review mutations need the ``username`` in the body to have logged in
through ``/login``. Failures are raised as ``CatalogError`` subclasses
by ``CatalogState`` and rendered by the handler in ``main``.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from ..storage import CatalogState, get_state
from .schemas import Book, ReviewDelete, ReviewsResponse, ReviewUpdate


router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=Dict[str, Book])
def list_books(state: CatalogState = Depends(get_state)) -> Dict[str, Book]:
    return state.list_books()


@router.get("/isbn/{isbn}", response_model=Book)
def get_book(isbn: str, state: CatalogState = Depends(get_state)) -> Book:
    return state.get_book(isbn)


@router.get("/author/{author}", response_model=List[Book])
def books_by_author(author: str, state: CatalogState = Depends(get_state)) -> List[Book]:
    return state.find_by_author(author)


@router.get("/title/{title}", response_model=List[Book])
def books_by_title(title: str, state: CatalogState = Depends(get_state)) -> List[Book]:
    return state.find_by_title(title)


@router.get("/review/{isbn}", response_model=Dict[str, Optional[str]])
def get_reviews(isbn: str, state: CatalogState = Depends(get_state)) -> Dict[str, Optional[str]]:
    return state.get_reviews(isbn)


@router.put("/review/{isbn}", response_model=ReviewsResponse)
def put_review(
    isbn: str,
    req: Optional[ReviewUpdate] = Body(None),
    state: CatalogState = Depends(get_state),
) -> ReviewsResponse:
    """Add or modify a review.

    The username comes from the request body and is trusted as-is;
    the only check is that this username has logged in before.
    """
    req = req or ReviewUpdate()
    reviews = state.put_review(isbn, req.username, req.review)
    return ReviewsResponse(message="Review added/updated", reviews=reviews)


@router.delete("/review/{isbn}", response_model=ReviewsResponse)
def delete_review(
    isbn: str,
    req: Optional[ReviewDelete] = Body(None),
    state: CatalogState = Depends(get_state),
) -> ReviewsResponse:
    req = req or ReviewDelete()
    reviews = state.delete_review(isbn, req.username)
    return ReviewsResponse(message="Review deleted", reviews=reviews)
