from .database import DataStore, sample_store
from .errors import BookNotFound, CollectionNotFound, IntegrityError, MarketNotFound, NotFound, UserNotFound
from .graph import create_graph, execute
from .relations import (
    available_books_by_market,
    available_markets_for_book,
    full_market,
    latest_read_books,
    popular_books_by_market,
)


__all__ = [
    "DataStore",
    "sample_store",

    "BookNotFound",
    "CollectionNotFound",
    "IntegrityError",
    "MarketNotFound",
    "NotFound",
    "UserNotFound",

    "create_graph",
    "execute",

    "available_books_by_market",
    "available_markets_for_book",
    "full_market",
    "latest_read_books",
    "popular_books_by_market",
]
