"""Column types that translate between entity values and storage primitives."""

import json
from typing import Any, Optional

import structlog
from sqlalchemy import Integer, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

logger = structlog.get_logger()


class JSONEncodedList(TypeDecorator[list[str]]):
    """A list of strings stored as JSON text.

    NULL and unparsable text both read back as an empty list so a
    damaged row never breaks a listing.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(
        self, value: Optional[list[str]], dialect: Dialect
    ) -> str:
        return json.dumps(list(value or []))

    def process_result_value(
        self, value: Optional[str], dialect: Dialect
    ) -> list[str]:
        if not value:
            return []
        try:
            decoded: Any = json.loads(value)
        except ValueError:
            logger.warning("json_list_column_unparsable", raw=value[:100])
            return []
        if not isinstance(decoded, list):
            return []
        return [str(item) for item in decoded]


class IntegerBoolean(TypeDecorator[bool]):
    """A boolean stored as a 0/1 integer."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Optional[bool], dialect: Dialect) -> int:
        return 1 if value else 0

    def process_result_value(self, value: Optional[int], dialect: Dialect) -> bool:
        return value == 1
