import collections

import graphlayer as g
from graphlayer.graphql import execute as graphql_execute

from .. import database
from . import books, markets, root, users
from .errors import FieldErrors


resolvers = (
    books.resolvers,
    markets.resolvers,
    users.resolvers,
    root.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store, field_errors=None):
    if field_errors is None:
        field_errors = FieldErrors()

    return _graph_definition.create_graph(
        {
            database.DataStore: store,
            FieldErrors: field_errors,
        }
    )


GraphQLResponse = collections.namedtuple("GraphQLResponse", ["data", "errors"])


def execute(document_text, *, store, variables=None):
    field_errors = FieldErrors()
    result = graphql_execute(
        graph=create_graph(store=store, field_errors=field_errors),
        document_text=document_text,
        variables=variables,
        query_type=Query,
    )

    errors = [
        {"message": str(error)}
        for error in (result.errors or ())
    ]
    errors += field_errors.to_json()

    return GraphQLResponse(data=result.data, errors=errors)


Book = books.Book
Market = markets.Market
Query = root.Query
User = users.User
