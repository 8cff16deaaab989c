import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class JsonTextList(TypeDecorator):
    """
    Store an ordered list of strings as JSON text.

    An empty list is written as ``"[]"`` and NULL or blank text reads back as
    an empty list, so the column never surfaces ``None`` to callers.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            value = []
        return json.dumps(list(value))

    def process_result_value(self, value, dialect):
        if not value:
            return []
        decoded = json.loads(value)
        if not isinstance(decoded, list):
            raise ValueError(f"Expected a JSON array, got {type(decoded).__name__}")
        return [str(item) for item in decoded]
