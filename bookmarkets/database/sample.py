from .records import Book, Market, MOST_POPULAR, PopularCollection, ReadBook, User, UserReadHistory
from .store import DataStore


def sample_store():
    return DataStore(
        books=(
            Book(id="1", title="Harry Potter and the Chamber of Secrets", author="J.K. Rowling", markets=("SE", "EN")),
            Book(id="2", title="Jurassic Park", author="Michael Crichton", markets=("EN", )),
            Book(id="3", title="Jurassic World", author="Michael C", markets=("SE", )),
        ),
        users=(
            User(account_id="1", name="kalle"),
            User(account_id="2", name="bob"),
        ),
        markets=(
            Market(id="SE", name="Sweden"),
            Market(id="EN", name="England"),
        ),
        read_histories=(
            UserReadHistory(id="1", read_books=(
                ReadBook(book_id="3", timestamp="1234"),
                ReadBook(book_id="1", timestamp="54321"),
            )),
            UserReadHistory(id="2", read_books=()),
        ),
        popular_collections=(
            PopularCollection(collection_name=MOST_POPULAR, market="SE", books=("3", )),
            PopularCollection(collection_name=MOST_POPULAR, market="EN", books=("1", )),
        ),
    )
