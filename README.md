# bookstore

A small REST service that keeps a list of books in memory. Books can be
created, listed, fetched, updated and deleted over HTTP with JSON bodies.

## Installing

    pip install .

## Running the server

    bookstore

The server listens on port 8000 by default and serves books under `/books`.

## Endpoints

| Method | Path          | Description                                   |
|--------|---------------|-----------------------------------------------|
| GET    | `/ping`       | Health check, answers `{"message": "pong"}`   |
| POST   | `/books`      | Create a book; answers 201 with the new book  |
| GET    | `/books`      | List every active book                        |
| GET    | `/books/<id>` | Fetch one book, or 404 if it does not exist   |
| PUT    | `/books/<id>` | Replace a book's fields; answers 201          |
| DELETE | `/books/<id>` | Mark a book as deleted                        |

A book is a JSON object with the fields `ID`, `Title`, `Author`, `Price`,
`ISBN` and `Active`. `Title`, `Author` and a non-zero `Price` are required
when creating or updating; otherwise the request is answered with 400.
Identifiers are given by the server, counting up from 1. Deleted books
are kept but no longer listed or returned.

Example:

    curl -X POST localhost:8000/books \
         -H 'Content-Type: application/json' \
         -d '{"Title": "A book", "Author": "Jane Doe", "Price": 10.5, "ISBN": "1234567890"}'

## Using it from Python

    from bookstore.booklist import BookList
    from bookstore.models import Book
    from bookstore.server import Config, Server

    books = BookList()
    books.add(Book(title="A book", author="Jane Doe", price=10.5))

    server = Server(Config(port=9000, root="/api"), books)
    server.run()

`BookList` raises `NotFoundError` for unknown or deleted identifiers and
`MissingFieldsError` when required fields are missing.

## Tests

    pip install .[test]
    pytest