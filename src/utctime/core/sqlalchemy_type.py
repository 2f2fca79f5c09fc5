"""
SQLAlchemy column type for UtcTime.

    created_at = Column(UtcDateTime, nullable=False)

Bound parameters are sent as the UTC datetime from ``db_value()`` and column
values come back through ``UtcTime.scan``. Backends that drop the offset
(SQLite) return naive datetimes, which scan reads as UTC.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from utctime.core.utc_time import UtcTime


class UtcDateTime(TypeDecorator):
    """Timezone-aware DateTime column holding UtcTime values."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, datetime):
            value = UtcTime(value)
        return value.db_value()

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return UtcTime.scan(value)
