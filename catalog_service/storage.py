# catalog_service/storage.py
"""
In-memory state for the catalog service.

``CatalogState`` owns the three tables the service works on: books
(with their reviews), registered users and the login-flag session
table. One instance is built per application in ``create_app`` and
handed to routes through the ``get_state`` dependency. Nothing is
persisted; a restart starts again from the seed.

FastAPI runs the synchronous routes on a thread pool, so each table
has its own lock. Locks are held only around the lookup or mutation
itself. Reads return copies so that a response being serialised is
never mutated underneath.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from fastapi import Request

from .catalog.schemas import Book
from .catalog.store import filter_by_author, filter_by_title, load_seed_books
from .errors import BadRequestError, NotFoundError, UnauthorizedError
from .models import User


logger = logging.getLogger(__name__)


def _snapshot(book: Book) -> Book:
    return Book(
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        reviews=dict(book.reviews),
    )


class CatalogState:
    def __init__(self, seed: Optional[Iterable[dict]] = None):
        self._books: Dict[str, Book] = load_seed_books(seed)
        self._users: List[User] = []
        self._sessions: Dict[str, bool] = {}

        self._books_lock = threading.Lock()
        self._users_lock = threading.Lock()
        self._sessions_lock = threading.Lock()

    # -- books ------------------------------------------------------------

    def list_books(self) -> Dict[str, Book]:
        with self._books_lock:
            return {isbn: _snapshot(b) for isbn, b in self._books.items()}

    def get_book(self, isbn: str) -> Book:
        with self._books_lock:
            book = self._books.get(isbn)
            if book is None:
                raise NotFoundError("Book not found")
            return _snapshot(book)

    def find_by_author(self, author: str) -> List[Book]:
        with self._books_lock:
            return [_snapshot(b) for b in filter_by_author(self._books, author)]

    def find_by_title(self, title: str) -> List[Book]:
        with self._books_lock:
            return [_snapshot(b) for b in filter_by_title(self._books, title)]

    def get_reviews(self, isbn: str) -> Dict[str, Optional[str]]:
        with self._books_lock:
            book = self._books.get(isbn)
            if book is None:
                raise NotFoundError("Book not found")
            return dict(book.reviews)

    # -- accounts ---------------------------------------------------------

    def register(self, username: Optional[str], password: Optional[str]) -> None:
        """Add a user record.

        Raises ``BadRequestError`` when either field is missing or empty,
        or when the username is already taken.
        """
        if not username or not password:
            raise BadRequestError("Missing username or password")
        with self._users_lock:
            if any(u.username == username for u in self._users):
                raise BadRequestError("User already exists")
            self._users.append(User(username=username, password=password))
        logger.info("Registered user %s", username)

    def login(self, username: Optional[str], password: Optional[str]) -> None:
        """Set the session flag for ``username`` if the pair matches a user.

        The comparison is exact on both fields. Raises
        ``UnauthorizedError`` otherwise.
        """
        with self._users_lock:
            matched = any(
                u.username == username and u.password == password
                for u in self._users
            )
        if not matched:
            logger.warning("Failed login for %r", username)
            raise UnauthorizedError("Invalid credentials")
        with self._sessions_lock:
            self._sessions[username] = True
        logger.info("User %s logged in", username)

    def is_logged_in(self, username: Optional[str]) -> bool:
        if not username:
            return False
        with self._sessions_lock:
            return self._sessions.get(username, False)

    def user_count(self) -> int:
        with self._users_lock:
            return len(self._users)

    # -- reviews ----------------------------------------------------------

    def _require_session(self, username: Optional[str]) -> str:
        if not self.is_logged_in(username):
            logger.warning("Review change rejected for %r: not logged in", username)
            raise UnauthorizedError("Login required")
        return username

    def put_review(
        self, isbn: str, username: Optional[str], review: Optional[str]
    ) -> Dict[str, Optional[str]]:
        """Add or replace ``username``'s review of a book.

        The session check comes before the book lookup, so an anonymous
        caller gets 401 even for an unknown ISBN.
        """
        username = self._require_session(username)
        with self._books_lock:
            book = self._books.get(isbn)
            if book is None:
                raise NotFoundError("Book not found")
            book.reviews[username] = review
            reviews = dict(book.reviews)
        logger.info("Review by %s stored for %s", username, isbn)
        return reviews

    def delete_review(self, isbn: str, username: Optional[str]) -> Dict[str, Optional[str]]:
        username = self._require_session(username)
        with self._books_lock:
            book = self._books.get(isbn)
            if book is None or username not in book.reviews:
                raise NotFoundError("Review not found")
            del book.reviews[username]
            reviews = dict(book.reviews)
        logger.info("Review by %s deleted from %s", username, isbn)
        return reviews


def get_state(request: Request) -> CatalogState:
    """FastAPI dependency returning the app's ``CatalogState``."""
    return request.app.state.catalog
