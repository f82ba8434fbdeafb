class NotFound(LookupError):
    code = "NOT_FOUND"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UserNotFound(NotFound):
    def __init__(self, account_id):
        super().__init__("could not find read history for user: {}".format(account_id))
        self.account_id = account_id


class BookNotFound(NotFound):
    def __init__(self, book_id):
        super().__init__("could not find book: {}".format(book_id))
        self.book_id = book_id


class MarketNotFound(NotFound):
    def __init__(self, market_id):
        super().__init__("could not find market: {}".format(market_id))
        self.market_id = market_id


class CollectionNotFound(NotFound):
    def __init__(self, collection_name, market_id):
        super().__init__("could not find collection {} for market: {}".format(collection_name, market_id))
        self.collection_name = collection_name
        self.market_id = market_id


class IntegrityError(ValueError):
    def __init__(self, problems):
        super().__init__("data store has dangling references:\n{}".format(
            "\n".join("  " + problem for problem in problems),
        ))
        self.problems = problems
