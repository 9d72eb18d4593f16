from datetime import datetime, timezone
from typing import Optional, Union

from dateutil import parser as date_parser


class DateUtils:
    """Timestamp helpers shared by the domain models"""

    UTC = timezone.utc

    @classmethod
    def now_utc(cls) -> datetime:
        """Get current UTC datetime"""
        return datetime.now(cls.UTC)

    @classmethod
    def parse(cls, value: Union[str, datetime, None]) -> Optional[datetime]:
        """
        Normalize a database timestamp.

        SQLite hands CURRENT_TIMESTAMP columns back as 'YYYY-MM-DD HH:MM:SS'
        strings through text() queries; Postgres returns datetimes. Both are
        stored in UTC, so naive values are tagged as UTC.
        """
        if value is None or value == "":
            return None
        dt = value if isinstance(value, datetime) else date_parser.parse(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=cls.UTC)
        return dt

