import graphlayer as g

from . import books, markets, users


Query = g.ObjectType(
    "Query",
    fields=(
        g.field("books", g.ListType(books.Book)),
        g.field("markets", g.ListType(markets.Market)),
        g.field("users", g.ListType(users.User)),
    ),
)


root_resolver = g.root_object_resolver(Query)


@root_resolver.field(Query.fields.books)
def root_resolve_books(graph, query, args):
    return graph.resolve(books.BookQuery.select(query))


@root_resolver.field(Query.fields.markets)
def root_resolve_markets(graph, query, args):
    return graph.resolve(markets.MarketQuery.select(query))


@root_resolver.field(Query.fields.users)
def root_resolve_users(graph, query, args):
    return graph.resolve(users.UserQuery.select(query))


resolvers = (root_resolver,)
