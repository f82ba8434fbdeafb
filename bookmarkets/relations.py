"""
Relational views over a :class:`bookmarkets.database.DataStore`.

Each function takes the store as its first argument and never modifies it.
Functions that look up a single record by key raise a subclass of
:class:`bookmarkets.errors.NotFound` when the key matches nothing.
"""

from . import errors
from .database import Market, MarketReference, MOST_POPULAR


def latest_read_books(store, account_id):
    history = store.find_read_history(account_id)
    if history is None:
        raise errors.UserNotFound(account_id)

    # Books are looked up on every call so renamed books show their current title.
    return [
        _get_book(store, read_book.book_id)
        for read_book in history.read_books
    ]


def available_books_by_market(store, market_id):
    return [
        book
        for book in store.books
        if market_id in book.markets
    ]


def available_markets_for_book(store, book_id):
    book = _get_book(store, book_id)
    return [
        MarketReference(id=market_id)
        for market_id in book.markets
    ]


def popular_books_by_market(store, market_id):
    collection = store.find_popular_collection(market_id, collection_name=MOST_POPULAR)
    if collection is None:
        raise errors.CollectionNotFound(MOST_POPULAR, market_id)

    return [
        _get_book(store, book_id)
        for book_id in collection.books
    ]


def full_market(store, market):
    if isinstance(market, Market):
        return market

    result = store.find_market(market.id)
    if result is None:
        raise errors.MarketNotFound(market.id)
    else:
        return result


def _get_book(store, book_id):
    book = store.find_book(book_id)
    if book is None:
        raise errors.BookNotFound(book_id)
    else:
        return book
