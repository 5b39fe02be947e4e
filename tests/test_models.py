import pytest

from bookstore.models import Book


def test_to_dict_uses_wire_names():
    book = Book(id=1, title="test-book-one", author="test-author-one",
                price=10.0, isbn="1234567890", active=True)
    assert book.to_dict() == {
        "ID": 1,
        "Title": "test-book-one",
        "Author": "test-author-one",
        "Price": 10.0,
        "ISBN": "1234567890",
        "Active": True,
    }


def test_round_trip():
    book = Book(id=2, title="test-book-two", author="test-author-two",
                price=11.0, isbn="123456789222", active=True)
    assert Book.from_dict(book.to_dict()) == book


def test_from_dict_is_case_insensitive():
    book = Book.from_dict({"title": "test-book-one", "AUTHOR": "test-author-one",
                           "price": 10, "isbn": "1234567890"})
    assert book.title == "test-book-one"
    assert book.author == "test-author-one"
    assert book.price == 10.0
    assert book.isbn == "1234567890"


def test_from_dict_defaults_and_unknown_keys():
    book = Book.from_dict({"Extra": "ignored", "Title": None})
    assert book == Book()


@pytest.mark.parametrize(
    "payload",
    [
        {"Title": 5},
        {"Price": "ten"},
        {"Price": True},
        {"ID": 1.5},
        {"ID": 2**31},
        {"Active": "yes"},
    ],
)
def test_from_dict_rejects_wrong_types(payload):
    with pytest.raises(ValueError):
        Book.from_dict(payload)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Book.from_dict(["Title"])