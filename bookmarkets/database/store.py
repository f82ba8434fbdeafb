from graphlayer import iterables

from .. import errors
from .records import MOST_POPULAR


class DataStore(object):
    """
    Read-only collections of records, built once and shared by every request.
    """

    def __init__(self, *, books=(), users=(), markets=(), read_histories=(), popular_collections=()):
        self.books = tuple(books)
        self.users = tuple(users)
        self.markets = tuple(markets)
        self.read_histories = tuple(read_histories)
        self.popular_collections = tuple(popular_collections)

    def find_book(self, book_id):
        return iterables.find(lambda book: book.id == book_id, self.books, default=None)

    def find_user(self, account_id):
        return iterables.find(lambda user: user.account_id == account_id, self.users, default=None)

    def find_market(self, market_id):
        return iterables.find(lambda market: market.id == market_id, self.markets, default=None)

    def find_read_history(self, account_id):
        return iterables.find(lambda history: history.id == account_id, self.read_histories, default=None)

    def find_popular_collection(self, market_id, collection_name=MOST_POPULAR):
        return iterables.find(
            lambda collection: collection.market == market_id and collection.collection_name == collection_name,
            self.popular_collections,
            default=None,
        )

    def check_integrity(self):
        problems = list(self._dangling_references())
        if problems:
            raise errors.IntegrityError(problems)

    def _dangling_references(self):
        book_ids = frozenset(book.id for book in self.books)
        market_ids = frozenset(market.id for market in self.markets)
        account_ids = frozenset(user.account_id for user in self.users)

        for book in self.books:
            for market_id in book.markets:
                if market_id not in market_ids:
                    yield "book {} is sold in unknown market {}".format(book.id, market_id)

        for history in self.read_histories:
            if history.id not in account_ids:
                yield "read history belongs to unknown user {}".format(history.id)
            for read_book in history.read_books:
                if read_book.book_id not in book_ids:
                    yield "read history of user {} has unknown book {}".format(history.id, read_book.book_id)

        for collection in self.popular_collections:
            if collection.market not in market_ids:
                yield "collection {} is for unknown market {}".format(collection.collection_name, collection.market)
            for book_id in collection.books:
                if book_id not in book_ids:
                    yield "collection {} for market {} has unknown book {}".format(
                        collection.collection_name,
                        collection.market,
                        book_id,
                    )
