from .records import (
    Book,
    Market,
    MarketReference,
    MOST_POPULAR,
    PopularCollection,
    ReadBook,
    User,
    UserReadHistory,
)
from .sample import sample_store
from .store import DataStore


__all__ = [
    "Book",
    "Market",
    "MarketReference",
    "MOST_POPULAR",
    "PopularCollection",
    "ReadBook",
    "User",
    "UserReadHistory",

    "DataStore",
    "sample_store",
]
