"""Lenient numeric coercion for values arriving from input widgets."""


def coerce_non_negative(value, *, default: int = 0) -> int:
    """Return ``value`` as an int clamped at zero; unparseable input becomes ``default``."""
    try:
        amount = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            amount = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default
    return amount if amount > 0 else 0


def coerce_int(value, *, default: int | None = None) -> int | None:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
