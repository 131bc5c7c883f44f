"""Display suffixes and rounding for the selected unit system.

The API is queried in the target unit system already, so nothing here
converts between Celsius and Fahrenheit.
"""

from decimal import ROUND_HALF_UP, Decimal

from weatherview.models.common import Units


def _coerce(units: Units | str) -> Units:
    try:
        return Units(units)
    except ValueError:
        raise ValueError(f"Unknown units: {units!r}") from None


def suffix_for(units: Units | str) -> str:
    return "°F" if _coerce(units) == Units.IMPERIAL else "°C"


def speed_suffix_for(units: Units | str) -> str:
    return "mph" if _coerce(units) == Units.IMPERIAL else "m/s"


def round_temp(value: float) -> int:
    """Round half away from zero: 20.5 -> 21, -20.5 -> -21."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_temp(value: float, units: Units | str) -> str:
    return f"{round_temp(value)}{suffix_for(units)}"
