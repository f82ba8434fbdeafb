import collections
import logging

from graphlayer.graphql.naming import snake_case_to_camel_case

from .. import errors


_logger = logging.getLogger(__name__)


FieldError = collections.namedtuple("FieldError", ["message", "code", "type_name", "field_name", "field_key"])


class FieldErrors(object):
    """
    Errors raised while resolving individual fields of a single request.

    A field whose resolver raises :class:`bookmarkets.errors.NotFound` resolves
    to ``None`` and the error is recorded here, so the rest of the response can
    still be built. Each error records both the schema field that failed and
    the key it was requested under, which differ when the field is aliased.
    """

    def __init__(self):
        self._errors = []

    def __iter__(self):
        return iter(self._errors)

    def __len__(self):
        return len(self._errors)

    def capture(self, field_query, resolve):
        type_name = field_query.field.owner_type.name
        field_name = snake_case_to_camel_case(field_query.field.name)

        def resolve_or_none(value):
            try:
                return resolve(value)
            except errors.NotFound as error:
                _logger.warning("could not resolve %s.%s: %s", type_name, field_name, error.message)
                self._errors.append(FieldError(
                    message=error.message,
                    code=error.code,
                    type_name=type_name,
                    field_name=field_name,
                    field_key=field_query.key,
                ))
                return None

        return resolve_or_none

    def to_json(self):
        return [
            {
                "message": error.message,
                "extensions": {
                    "code": error.code,
                    "type": error.type_name,
                    "field": error.field_name,
                    "key": error.field_key,
                },
            }
            for error in self._errors
        ]
