# ==============================================================================
# UTILS PACKAGE INITIALIZATION
# ==============================================================================

"""
Utilities Module
================

Stateless helper functions:
- Strings: normalization and small transformations
- Dates: lenient parsing and month arithmetic
- Numbers: formatting and rounding
- Encoding: Base64
- Validation: error rendering and decimal precision
"""

from daily_helpers.utils.dates import (
    combine_date_and_time,
    convert_date,
    last_day_of_month,
    parse_and_format_date,
)
from daily_helpers.utils.encoding import decode_base64_string, encode_to_base64
from daily_helpers.utils.numbers import format_number, round_to_nearest_integer
from daily_helpers.utils.strings import (
    check_string,
    convert_to_uuid,
    get_first_n_characters,
    normalize_value,
    remove_character,
    status_value,
    to_null_if_empty,
)
from daily_helpers.utils.validation import (
    check_decimal_precision,
    collect_field_errors,
    contains_value,
    decimal_precision,
    validation_error_html,
    validation_error_text,
)

__all__ = [
    "combine_date_and_time",
    "convert_date",
    "last_day_of_month",
    "parse_and_format_date",
    "decode_base64_string",
    "encode_to_base64",
    "format_number",
    "round_to_nearest_integer",
    "check_string",
    "convert_to_uuid",
    "get_first_n_characters",
    "normalize_value",
    "remove_character",
    "status_value",
    "to_null_if_empty",
    "check_decimal_precision",
    "collect_field_errors",
    "contains_value",
    "decimal_precision",
    "validation_error_html",
    "validation_error_text",
]
