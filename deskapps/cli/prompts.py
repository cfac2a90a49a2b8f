"""Input parsing shared by the console menus."""

from datetime import date, datetime
from typing import Callable

DATE_FORMAT = "%Y-%m-%d"
NO_COMMAS = "Name cannot contain commas."

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD date.

    Raises:
        ValueError: If the text is not a valid date
    """
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_int(value: str) -> int:
    """Parse a whole number, raising ValueError otherwise."""
    return int(value.strip())


def parse_float(value: str) -> float:
    return float(value.strip())


def ask(read: InputFn, prompt: str) -> str:
    """Prompt for one line and strip it."""
    return read(prompt).strip()


def has_field_delimiter(value: str) -> bool:
    """True if the text would split into extra fields in the data files."""
    return "," in value
