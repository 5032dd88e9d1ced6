from __future__ import annotations

from typing import Any

import pandas as pd


def _cast_to_float(value: Any) -> float | None:
    """Convert to float, or None if the value has no numeric reading."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    """Convert to int (truncating floats), or None if conversion fails."""
    as_f = _cast_to_float(value)
    if as_f is None:
        return None
    try:
        return int(as_f)
    except (OverflowError, ValueError):
        return None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Common pre-processing for values coming out of JSON or pandas:
    - None -> None
    - pandas NA / NaN -> None
    - numpy scalar -> .item()
    """
    if value is None:
        return None

    if isinstance(value, list | tuple | dict):
        return value

    if pd.isna(value):
        return None

    if hasattr(value, "item"):
        value = value.item()

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Convert a raw payload value to int or float; None if it cannot be read.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    dispatch = {
        int: _cast_to_int,
        float: _cast_to_float,
    }
    caster = dispatch.get(type_)
    if caster is None:
        raise TypeError(f"safe_cast does not support {type_!r}")
    return caster(value)


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def float_or_zero(x: Any) -> float:
    """Numeric payload field with the record's zero default."""
    value = as_float(x)
    return 0.0 if value is None else value


def value_at(column: Any, index: int) -> Any | None:
    """Item of a column array (hourly/daily payloads), None if missing."""
    if not isinstance(column, list | tuple) or index >= len(column):
        return None
    return column[index]


# --- unit conversions ---------------------------------------------------------
def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


def mps_to_kph(speed_mps: float) -> float:
    return speed_mps * 3.6


def kph_to_mps(speed_kph: float) -> float:
    return speed_kph / 3.6
