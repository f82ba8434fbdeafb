import collections


MOST_POPULAR = "mostpopular"


Book = collections.namedtuple("Book", ["id", "title", "author", "markets"])

User = collections.namedtuple("User", ["account_id", "name"])

Market = collections.namedtuple("Market", ["id", "name"])

# Only the foreign key of a market: the name is looked up separately when asked for.
MarketReference = collections.namedtuple("MarketReference", ["id"])

ReadBook = collections.namedtuple("ReadBook", ["book_id", "timestamp"])

UserReadHistory = collections.namedtuple("UserReadHistory", ["id", "read_books"])

PopularCollection = collections.namedtuple("PopularCollection", ["collection_name", "market", "books"])
