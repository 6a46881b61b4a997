# ==============================================================================
# STRING HELPERS
# ==============================================================================
# Normalization and small transformations for user-supplied text
# ==============================================================================

from __future__ import annotations

import unicodedata
from typing import Optional, TypeVar
from uuid import UUID

from daily_helpers.core.exceptions import InvalidArgumentError

T = TypeVar("T")

TRUTHY_VALUES = frozenset({"si", "true", "ok", "on"})


def check_string(value: Optional[str] = None) -> bool:
    """Check whether ``value`` is one of si / true / ok / on (any case)."""
    if value is None:
        return False
    return value.lower() in TRUTHY_VALUES


def to_null_if_empty(value: Optional[str]) -> Optional[str]:
    """Upper-cased, trimmed text, or None for None / blank input."""
    if value is None or not value.strip():
        return None
    return value.strip().upper()


def convert_to_uuid(value: Optional[str]) -> Optional[UUID]:
    """Parse ``value`` as a UUID, returning None when it is not one."""
    if not value:
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


def remove_character(text: Optional[str], old: str, new: str = "") -> Optional[str]:
    """
    Replace every ``old`` with ``new``, then trim and upper-case.

    Returns None when ``text`` is None or blank.
    """
    if text is None or not text.strip():
        return None
    return text.replace(old, new).strip().upper()


def get_first_n_characters(text: str, number_of_characters: int) -> str:
    """
    Return the first ``number_of_characters`` characters of ``text``.

    Raises:
        InvalidArgumentError: If text is blank or the count is negative
    """
    if text is None or not text.strip():
        raise InvalidArgumentError("Text cannot be null or empty.", argument="text")
    if number_of_characters < 0:
        raise InvalidArgumentError(
            "Number of characters must be greater than or equal to 0.",
            argument="number_of_characters",
        )
    return text[:number_of_characters]


def status_value(condition: bool, true_value: T, false_value: T) -> T:
    return true_value if condition else false_value


def normalize_value(value: Optional[str]) -> Optional[str]:
    """
    Strip accents and diacritics and upper-case the text.

    ``"Canción Niño"`` becomes ``"CANCION NINO"``. Returns None for None or
    blank input.
    """
    if value is None or not value.strip():
        return None

    decomposed = unicodedata.normalize("NFD", value)
    without_marks = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", without_marks).upper()
