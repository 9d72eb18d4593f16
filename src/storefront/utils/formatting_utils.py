import re
from typing import Iterable, List


class FormattingUtils:
    """Text helpers for turning provider content into display values"""

    TAG_PATTERN = re.compile(r"<[^>]*>")

    @classmethod
    def strip_html(cls, html: str) -> str:
        """
        Remove markup tags and surrounding whitespace.

        Examples:
            strip_html("<p>Soft <b>cotton</b></p> ") -> "Soft cotton"
        """
        return cls.TAG_PATTERN.sub("", html or "").strip()

    @staticmethod
    def unique(values: Iterable[str]) -> List[str]:
        """De-duplicate while keeping first-seen order"""
        seen = set()
        result = []
        for value in values:
            if value not in seen:
                seen.add(value)
                result.append(value)
        return result

    @staticmethod
    def minor_to_major(amount: int) -> float:
        """1299 -> 12.99"""
        return amount / 100
