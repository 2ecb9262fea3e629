"""Utilities for parsing roster cells.
Kept apart from the import service so the parsing rules are testable.
"""

import math
import re
from decimal import Decimal

# digits with an optional dot decimal part, nothing else
_PLAIN_NUMBER = re.compile(r"^[+-]?\d+(\.\d+)?$")


def parse_amount(value):
    """
    Parse a roster amount: a numeric cell or a plain dot-decimal string.

    Thousands separators, comma decimals and currency text are refused,
    so ``"1,000"`` is rejected rather than guessed. Returns a float, or
    None when the value is not a plain finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        result = float(value)
        return result if math.isfinite(result) else None

    raw_value = str(value).strip()
    if not _PLAIN_NUMBER.match(raw_value):
        return None
    return float(raw_value)


def parse_contract_type(value):
    """Return "hourly" / "monthly" for a contract type cell, None otherwise."""
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in ("hourly", "hour", "h", "horaire"):
        return "hourly"
    if text in ("monthly", "month", "m", "mensuel"):
        return "monthly"
    return None
