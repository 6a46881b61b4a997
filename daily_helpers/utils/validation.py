# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# Rendering of field validation errors (plain text / HTML) and a decimal
# precision rule for pydantic models.
# ==============================================================================

from __future__ import annotations

import html
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from fastapi.exceptions import RequestValidationError
from pydantic import AfterValidator
from pydantic import ValidationError as PydanticValidationError

ErrorSource = Union[
    PydanticValidationError,
    RequestValidationError,
    Iterable[Mapping[str, Any]],
    Mapping[str, Sequence[str]],
]

FIELD_ERROR_LABEL = "Field validation error."


def contains_value(value: Any, *values: Any) -> bool:
    """Check whether ``value`` is one of ``values``."""
    return value in values


def _field_name(location: Any) -> str:
    if isinstance(location, (list, tuple)):
        return ".".join(str(part) for part in location)
    return str(location)


def collect_field_errors(errors: ErrorSource) -> List[Tuple[str, str]]:
    """
    First error message of each failing field, in first-seen order.

    Accepts a pydantic ``ValidationError``, a FastAPI
    ``RequestValidationError``, a list of pydantic-style error dicts
    (``{"loc": ..., "msg": ...}``) or a mapping of field name to messages.
    """
    if isinstance(errors, (PydanticValidationError, RequestValidationError)):
        entries: Iterable[Any] = errors.errors()
    elif isinstance(errors, Mapping):
        entries = (
            {"loc": field, "msg": messages[0]}
            for field, messages in errors.items()
            if messages
        )
    else:
        entries = errors

    collected: dict[str, str] = {}
    for entry in entries:
        field = _field_name(entry.get("loc", ""))
        if field not in collected:
            collected[field] = str(entry.get("msg", ""))
    return list(collected.items())


def validation_error_text(errors: ErrorSource) -> str:
    """``field: message`` per failing field, one per line."""
    return "\n".join(f"{field}: {message}" for field, message in collect_field_errors(errors))


def validation_error_html(errors: ErrorSource) -> str:
    """Bootstrap list-group markup with one entry per failing field."""
    items = [
        "<a href='#' class='list-group-item list-group-item-action' aria-current='true' style='font-size: 13px;'>"
        "<div class='d-flex w-100 justify-content-between'>"
        f"<h5 class='mb-1'>{html.escape(field)}</h5>"
        "</div>"
        f"<p class='mb-1'>{html.escape(message)}</p>"
        f"<small style='color: red;'>{FIELD_ERROR_LABEL}</small>"
        "</a>"
        for field, message in collect_field_errors(errors)
    ]
    return "<div class='list-group' style='text-align: left;'>" + "\n".join(items) + "</div>"


# ==============================================================================
# DECIMAL PRECISION
# ==============================================================================

def check_decimal_precision(
    value: Optional[Decimal],
    precision: int,
    scale: int,
) -> Optional[Decimal]:
    """
    Check a decimal against a maximum precision and scale.

    ``scale`` caps the fractional digits (as written, so ``1.50`` has two)
    and ``precision - scale`` caps the integral digits. None passes.

    Raises:
        ValueError: If the value is not a finite decimal within the limits
    """
    if value is None:
        return value

    message = f"The value must be a decimal with precision {precision} and scale {scale}."
    if not isinstance(value, Decimal) or not value.is_finite():
        raise ValueError(message)

    exponent = value.as_tuple().exponent
    scale_digits = max(0, -exponent)
    integral_digits = len(str(abs(int(value))))

    if scale_digits > scale or integral_digits > precision - scale:
        raise ValueError(message)
    return value


def decimal_precision(precision: int, scale: int) -> AfterValidator:
    """
    Pydantic validator enforcing ``check_decimal_precision``.

    Example:
        >>> Amount = Annotated[Decimal, decimal_precision(18, 2)]
    """
    return AfterValidator(lambda value: check_decimal_precision(value, precision, scale))
