"""
Exceptions raised while retrieving an RU menu.
"""
from typing import Optional


class RuMenuError(Exception):
    """Base class for every error raised by ufpr_ru_lib."""


class DateParseError(RuMenuError, ValueError):
    """The requested date is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date format: {value!r}. Use YYYY-MM-DD")


class FetchError(RuMenuError):
    """The menu page could not be downloaded."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class MarkupParseError(RuMenuError):
    """A single meal fragment could not be parsed."""

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        super().__init__(f"Could not parse fragment {fragment[:40]!r}: {reason}")
