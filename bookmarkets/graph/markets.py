import graphlayer as g

from .. import database, relations
from . import books
from .errors import FieldErrors


Market = g.ObjectType("Market", fields=lambda: (
    g.field("id", type=g.String),
    g.field("name", type=g.NullableType(g.String)),
    g.field("availablebooks", type=g.ListType(books.Book)),
    g.field("mostpopularbooks", type=g.NullableType(g.ListType(books.Book))),
))


class MarketQuery(object):
    @staticmethod
    def select(type_query):
        return MarketQuery(type_query=type_query, records=None)

    @staticmethod
    def select_records(type_query, records):
        """
        Select markets from ``records``, which may be full markets or
        :class:`bookmarkets.database.MarketReference` values. Fields other
        than ``id`` on a reference are resolved by looking up the full market.
        """
        return MarketQuery(type_query=type_query, records=records)

    def __init__(self, type_query, records):
        self.type = MarketQuery
        self.type_query = type_query
        self.records = records


@g.resolver(MarketQuery)
@g.dependencies(store=database.DataStore, field_errors=FieldErrors)
def market_resolver(graph, query, *, store, field_errors):
    if query.records is None:
        records = store.markets
    else:
        records = query.records

    build_market = g.create_object_builder(query.type_query.element_query)

    @build_market.getter(Market.fields.id)
    def resolve_id(market):
        return market.id

    @build_market.field(Market.fields.name)
    def resolve_name(field_query):
        return field_errors.capture(
            field_query,
            lambda market: relations.full_market(store, market).name,
        )

    @build_market.field(Market.fields.availablebooks)
    def resolve_available_books(field_query):
        def resolve(market):
            return graph.resolve(books.BookQuery.select_records(
                field_query.type_query,
                relations.available_books_by_market(store, market.id),
            ))

        return resolve

    @build_market.field(Market.fields.mostpopularbooks)
    def resolve_most_popular_books(field_query):
        def resolve(market):
            return graph.resolve(books.BookQuery.select_records(
                field_query.type_query.element_query,
                relations.popular_books_by_market(store, market.id),
            ))

        return field_errors.capture(field_query, resolve)

    return [build_market(market) for market in records]


resolvers = (
    market_resolver,
)
