"""
Seed data and lookup helpers for the catalogue.

The ``SEED_BOOKS`` entries are loaded into every new ``CatalogState``
at construction time. Nothing in the API creates or deletes books, so
this list is the whole catalogue for the lifetime of the process.
The filter helpers work on any ``isbn -> Book`` mapping and never
mutate it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .schemas import Book


SEED_BOOKS: List[dict] = [
    {
        "isbn": "9780143127741",
        "title": "The Martian",
        "author": "Andy Weir",
        "reviews": {"alice": "Amazing!"},
    },
    {
        "isbn": "9780439064873",
        "title": "Harry Potter and the Chamber of Secrets",
        "author": "J.K. Rowling",
        "reviews": {},
    },
]


def load_seed_books(entries: Optional[Iterable[dict]] = None) -> Dict[str, Book]:
    """Build a fresh ``isbn -> Book`` mapping from seed entries.

    Each call returns new ``Book`` instances with their own review
    dicts, so two states built from the same seed never share data.

    Parameters
    ----------
    entries : Optional[Iterable[dict]]
        Raw book entries. Defaults to ``SEED_BOOKS``.

    Returns
    -------
    Dict[str, Book]
        Books keyed by ISBN. A later entry with a duplicate ISBN
        replaces the earlier one.
    """
    books: Dict[str, Book] = {}
    for entry in SEED_BOOKS if entries is None else entries:
        book = Book(
            isbn=str(entry["isbn"]),
            title=str(entry.get("title") or ""),
            author=str(entry.get("author") or ""),
            reviews=dict(entry.get("reviews") or {}),
        )
        books[book.isbn] = book
    return books


def _norm(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison.

    Whitespace is kept as-is: ``" andy weir"`` does not match
    ``"Andy Weir"``.
    """
    return (s or "").lower()


def filter_by_author(books: Dict[str, Book], author: str) -> List[Book]:
    """Return books whose author equals ``author``, ignoring case."""
    na = _norm(author)
    return [b for b in books.values() if _norm(b.author) == na]


def filter_by_title(books: Dict[str, Book], title: str) -> List[Book]:
    """Return books whose title contains ``title``, ignoring case.

    An empty query matches every book.
    """
    nt = _norm(title)
    return [b for b in books.values() if nt in _norm(b.title)]
