"""In-memory book collection served over a small REST API."""

__version__ = "0.1.0"
__all__ = ["models", "booklist", "server"]