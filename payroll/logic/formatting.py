from __future__ import annotations

import math
from datetime import datetime

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M:%S"
TIMESTAMP_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"


def fmt_number(value) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def fmt_date(moment: datetime) -> str:
    return moment.strftime(DATE_FORMAT)


def fmt_time(moment: datetime) -> str:
    # 24h clock
    return moment.strftime(TIME_FORMAT)


def fmt_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)
