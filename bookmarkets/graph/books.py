import graphlayer as g

from .. import database, relations
from . import markets
from .errors import FieldErrors


Book = g.ObjectType("Book", fields=lambda: (
    g.field("id", type=g.String),
    g.field("title", type=g.String),
    g.field("author", type=g.String),
    g.field("available_markets", type=g.NullableType(g.ListType(markets.Market))),
))


class BookQuery(object):
    @staticmethod
    def select(type_query):
        return BookQuery(type_query=type_query, records=None)

    @staticmethod
    def select_records(type_query, records):
        return BookQuery(type_query=type_query, records=records)

    def __init__(self, type_query, records):
        self.type = BookQuery
        self.type_query = type_query
        self.records = records


@g.resolver(BookQuery)
@g.dependencies(store=database.DataStore, field_errors=FieldErrors)
def book_resolver(graph, query, *, store, field_errors):
    if query.records is None:
        records = store.books
    else:
        records = query.records

    build_book = g.create_object_builder(query.type_query.element_query)

    @build_book.getter(Book.fields.id)
    def resolve_id(book):
        return book.id

    @build_book.getter(Book.fields.title)
    def resolve_title(book):
        return book.title

    @build_book.getter(Book.fields.author)
    def resolve_author(book):
        return book.author

    @build_book.field(Book.fields.available_markets)
    def resolve_available_markets(field_query):
        def resolve(book):
            return graph.resolve(markets.MarketQuery.select_records(
                field_query.type_query.element_query,
                relations.available_markets_for_book(store, book.id),
            ))

        return field_errors.capture(field_query, resolve)

    return [build_book(book) for book in records]


resolvers = (
    book_resolver,
)
