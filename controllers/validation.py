# controllers/validation.py

from controllers.errors import ValidationError


def clean_text(value, field):
    """Trimmed mandatory string."""
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(f"{field} is required")
    return text


def optional_text(value):
    if value is None:
        return ""
    return str(value).strip()


def to_id(value):
    """int id, or None when *value* is absent/blank."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid id: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"Invalid id: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid id: {value!r}")


def require_id(value, field):
    ident = to_id(value)
    if not ident:
        raise ValidationError(f"{field} is required")
    return ident


def require_price(value, field="price"):
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")
