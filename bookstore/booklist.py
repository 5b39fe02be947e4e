"""In-memory, thread-safe store of books."""

from __future__ import annotations

import threading

from .models import Book


class NotFoundError(LookupError):
    """Raised when a book does not exist or has been deleted."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Not found")


class MissingFieldsError(ValueError):
    """Raised when a book lacks a title, an author or a price."""

    def __init__(self, message: str = "some field data missing") -> None:
        super().__init__(message)


def _check_fields(data: Book) -> None:
    if not data.title or not data.author or data.price == 0.0:
        raise MissingFieldsError()


class BookList:
    """Books keyed by id; deleting a book only marks it inactive."""

    def __init__(self) -> None:
        self.books: dict[int, Book] = {}
        self.count = 0
        self._lock = threading.Lock()

    def add(self, data: Book) -> Book:
        """Store a new book, giving it the next id, and return it."""
        _check_fields(data)
        with self._lock:
            self.count += 1
            data.id = self.count
            data.active = True
            self.books[self.count] = data
        return data

    def get_one(self, book_id: int) -> Book:
        """Return the active book with this id."""
        book = self.books.get(book_id)
        if book is None or not book.active:
            raise NotFoundError(f"{book_id} not found")
        return book

    def get_all(self) -> list[Book]:
        """Return every active book."""
        return [book for book in self.books.values() if book.active]

    def update(self, book_id: int, data: Book) -> Book:
        """Replace title, author, price and ISBN of an active book."""
        book = self.get_one(book_id)
        _check_fields(data)
        with self._lock:
            book.title = data.title
            book.author = data.author
            book.price = data.price
            book.isbn = data.isbn
        return book

    def delete(self, book_id: int) -> None:
        """Mark an active book as deleted."""
        book = self.get_one(book_id)
        with self._lock:
            book.active = False