"""HTTP API over a book list."""

from __future__ import annotations

import argparse
import json
import os
import re
from dataclasses import dataclass

from flask import Flask, jsonify, request

from .booklist import BookList, NotFoundError
from .models import Book

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class Config:
    """Server settings; zero values are replaced by defaults."""

    port: int = 0
    root: str = ""


def _parse_id(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def _parse_book() -> Book:
    raw = request.get_data(as_text=True)
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(str(exc)) from exc
    return Book.from_dict(payload)


class Server:
    """Flask application serving CRUD routes for books."""

    def __init__(self, config: Config, data: BookList | None = None) -> None:
        if config.port == 0:
            config.port = 8000
        if not config.root:
            config.root = "/books"
        self.config = config
        self.data = data if data is not None else BookList()
        self.app = Flask(__name__)
        self._register_routes()

    def _register_routes(self) -> None:
        root = self.config.root
        item = root + "/<book_id>"
        app = self.app
        app.add_url_rule("/ping", "ping", self._ping, methods=["GET"])
        app.add_url_rule(root, "create", self._create, methods=["POST"])
        app.add_url_rule(root, "retrieve_all", self._retrieve_all, methods=["GET"])
        app.add_url_rule(item, "retrieve_one", self._retrieve_one, methods=["GET"])
        app.add_url_rule(item, "update", self._update, methods=["PUT"])
        app.add_url_rule(item, "delete", self._delete, methods=["DELETE"])

    def _ping(self):
        return jsonify({"message": "pong"}), 200

    def _create(self):
        try:
            data = _parse_book()
        except ValueError as exc:
            return jsonify({"parsing json": str(exc)}), 400
        try:
            book = self.data.add(data)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify(book.to_dict()), 201

    def _retrieve_all(self):
        return jsonify([book.to_dict() for book in self.data.get_all()]), 200

    def _retrieve_one(self, book_id: str):
        try:
            ident = _parse_id(book_id)
        except ValueError as exc:
            return jsonify({"parsing id to int:": str(exc)}), 400
        try:
            book = self.data.get_one(ident)
        except NotFoundError as exc:
            return jsonify({"retrieving data:": str(exc)}), 404
        return jsonify(book.to_dict()), 200

    def _update(self, book_id: str):
        try:
            ident = _parse_id(book_id)
        except ValueError as exc:
            return jsonify({"parsing id to int:": str(exc)}), 400
        try:
            data = _parse_book()
        except ValueError as exc:
            return jsonify({"parsing json": str(exc)}), 400
        try:
            book = self.data.update(ident, data)
        except NotFoundError as exc:
            return jsonify({"error": str(exc)}), 404
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify(book.to_dict()), 201

    def _delete(self, book_id: str):
        try:
            ident = _parse_id(book_id)
        except ValueError as exc:
            return jsonify({"parsing id to int:": str(exc)}), 400
        try:
            self.data.delete(ident)
        except NotFoundError as exc:
            return jsonify({"error": str(exc)}), 404
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify({"delete": f"succesfully deleted record {ident}"}), 200

    def run(self) -> None:
        """Serve on all interfaces, on $PORT or 8080."""
        port = int(os.environ.get("PORT", "8080"))
        self.app.run(host="0.0.0.0", port=port)


def main(argv: list[str] | None = None) -> None:
    """Start the book API server."""
    parser = argparse.ArgumentParser(description="Serve an in-memory book catalogue.")
    parser.parse_args(argv)
    config = Config(port=8000, root="/books")
    Server(config, BookList()).run()