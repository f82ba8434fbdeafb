import graphlayer as g

from .. import database, relations
from . import books
from .errors import FieldErrors


User = g.ObjectType("User", fields=lambda: (
    g.field("account_id", type=g.String),
    g.field("name", type=g.String),
    g.field("latestreadbooks", type=g.NullableType(g.ListType(books.Book))),
))


class UserQuery(object):
    @staticmethod
    def select(type_query):
        return UserQuery(type_query=type_query)

    def __init__(self, type_query):
        self.type = UserQuery
        self.type_query = type_query


@g.resolver(UserQuery)
@g.dependencies(store=database.DataStore, field_errors=FieldErrors)
def user_resolver(graph, query, *, store, field_errors):
    build_user = g.create_object_builder(query.type_query.element_query)

    @build_user.getter(User.fields.account_id)
    def resolve_account_id(user):
        return user.account_id

    @build_user.getter(User.fields.name)
    def resolve_name(user):
        return user.name

    @build_user.field(User.fields.latestreadbooks)
    def resolve_latest_read_books(field_query):
        def resolve(user):
            return graph.resolve(books.BookQuery.select_records(
                field_query.type_query.element_query,
                relations.latest_read_books(store, user.account_id),
            ))

        return field_errors.capture(field_query, resolve)

    return [build_user(user) for user in store.users]


resolvers = (
    user_resolver,
)
