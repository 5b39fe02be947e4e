"""Book record and its JSON representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class Book:
    """A single book in the catalogue."""

    id: int = 0
    title: str = ""
    author: str = ""
    price: float = 0.0
    isbn: str = ""
    active: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form of the book."""
        return {
            "ID": self.id,
            "Title": self.title,
            "Author": self.author,
            "Price": self.price,
            "ISBN": self.isbn,
            "Active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Book":
        """Build a book from its wire form.

        Keys match case-insensitively, unknown keys are ignored and null
        values leave the field at its default. A value of the wrong type
        raises ValueError.
        """
        if not isinstance(data, Mapping):
            raise ValueError(
                f"cannot unmarshal {type(data).__name__} into a book object"
            )

        book = cls()
        for key, value in data.items():
            handler = _FIELDS.get(str(key).lower())
            if handler is None or value is None:
                continue
            attr, convert = handler
            setattr(book, attr, convert(key, value))
        return book


def _as_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _as_int32(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"field {key!r} is out of range")
    return value


_FIELDS = {
    "id": ("id", _as_int32),
    "title": ("title", _as_str),
    "author": ("author", _as_str),
    "price": ("price", _as_number),
    "isbn": ("isbn", _as_str),
    "active": ("active", _as_bool),
}