"""
Request validators for the product routes.

Each function takes raw request data and returns a typed value together
with the violations found. Every rule for a field is evaluated and every
violation is kept, so a caller sees the whole list at once.
"""
import math
import re
from typing import Any, Optional, Tuple

from app.schemas.product import FieldViolation, ProductCreate, ProductUpdate

INVALID_ID = "Id no válido"
EMPTY_NAME = "El nombre de producto no puede ir vacio"
NOT_NUMERIC = "Valor no válido"
EMPTY_PRICE = "El precio de producto no puede ir vacio"
INVALID_PRICE = "Precio no válido"
INVALID_AVAILABILITY = "Valor para disponibilidad no válido"

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_MAX_ID_DIGITS = 19
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")

_BOOLEAN_LITERALS = {"true": True, "false": False, "1": True, "0": False}

_MISSING = object()


def _is_empty(value: Any) -> bool:
    return value is _MISSING or value is None or str(value) == ""


def _as_number(value: Any) -> Optional[float]:
    """Return the numeric value, or None when the value is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) or (isinstance(value, str) and _NUMERIC_RE.match(value)):
        try:
            number = float(value)
        except OverflowError:
            return None
        # Values past the float range cannot be stored as a price
        return number if math.isfinite(number) else None
    return None


def _as_boolean(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        return _BOOLEAN_LITERALS.get(value)
    return None


def _body_violation(value: Any, msg: str, path: str) -> FieldViolation:
    if value is _MISSING:
        value = None
    elif isinstance(value, float) and not math.isfinite(value):
        # JSON has no literal for inf or nan
        value = str(value)
    return FieldViolation(
        value=value,
        msg=msg,
        path=path,
        location="body",
    )


def validate_id(raw_id: Any) -> Tuple[Optional[int], list[FieldViolation]]:
    """Check that the path id is an integer literal."""
    text = str(raw_id)
    if not _INT_RE.match(text):
        return None, [FieldViolation(value=raw_id, msg=INVALID_ID, path="id", location="params")]
    if len(text.lstrip("+-").lstrip("0")) > _MAX_ID_DIGITS:
        # Past any key column; keep only the sign so lookups miss
        return (-1 if text.startswith("-") else 1) * 10 ** _MAX_ID_DIGITS, []
    return int(text), []


def _validate_name(body: dict) -> Tuple[Optional[str], list[FieldViolation]]:
    value = body.get("name", _MISSING)
    if _is_empty(value):
        return None, [_body_violation(value, EMPTY_NAME, "name")]
    return str(value), []


def _validate_price(body: dict) -> Tuple[Optional[float], list[FieldViolation]]:
    value = body.get("price", _MISSING)
    violations = []

    number = _as_number(value)
    if number is None:
        violations.append(_body_violation(value, NOT_NUMERIC, "price"))
    if _is_empty(value):
        violations.append(_body_violation(value, EMPTY_PRICE, "price"))
    # Positivity only applies once the value is known to be a number
    if number is not None and not number > 0:
        violations.append(_body_violation(value, INVALID_PRICE, "price"))

    return (number if not violations else None), violations


def _validate_availability(body: dict) -> Tuple[Optional[bool], list[FieldViolation]]:
    value = body.get("availability", _MISSING)
    flag = None if value is _MISSING else _as_boolean(value)
    if flag is None:
        return None, [_body_violation(value, INVALID_AVAILABILITY, "availability")]
    return flag, []


def _as_body(raw_body: Any) -> dict:
    return raw_body if isinstance(raw_body, dict) else {}


def validate_create(raw_body: Any) -> Tuple[Optional[ProductCreate], list[FieldViolation]]:
    """Validate the body of a create request."""
    body = _as_body(raw_body)
    name, name_errors = _validate_name(body)
    price, price_errors = _validate_price(body)
    violations = name_errors + price_errors

    fields = {"name": name, "price": price}
    # Availability is optional on create and defaults to true
    if "availability" in body:
        fields["availability"], availability_errors = _validate_availability(body)
        violations += availability_errors
    if violations:
        return None, violations

    return ProductCreate(**fields), []


def validate_update(raw_id: Any, raw_body: Any) -> Tuple[Optional[Tuple[int, ProductUpdate]], list[FieldViolation]]:
    """Validate the path id and the full-update body together."""
    body = _as_body(raw_body)
    product_id, violations = validate_id(raw_id)
    name, name_errors = _validate_name(body)
    price, price_errors = _validate_price(body)
    availability, availability_errors = _validate_availability(body)
    violations = violations + name_errors + price_errors + availability_errors
    if violations:
        return None, violations

    return (product_id, ProductUpdate(name=name, price=price, availability=availability)), []
