"""Display conversions between metric and US customary lighting units."""

from __future__ import annotations


FEET_PER_METER = 3.28084
FOOT_CANDLES_PER_LUX = 0.092903

METRIC = "metric"
IMPERIAL = "imperial"


def meters_to_feet(meters: float) -> float:
    return float(meters) * FEET_PER_METER


def feet_to_meters(feet: float) -> float:
    return float(feet) / FEET_PER_METER


def lux_to_foot_candles(lux: float) -> float:
    return float(lux) * FOOT_CANDLES_PER_LUX


def foot_candles_to_lux(fc: float) -> float:
    return float(fc) / FOOT_CANDLES_PER_LUX


def format_illuminance(lux: float, system: str = METRIC, decimals: int = 1) -> str:
    if system == IMPERIAL:
        return f"{lux_to_foot_candles(lux):.{decimals}f} fc"
    return f"{float(lux):.{decimals}f} lux"


def format_length(meters: float, system: str = METRIC, decimals: int = 2) -> str:
    if system == IMPERIAL:
        return f"{meters_to_feet(meters):.{decimals}f} ft"
    return f"{float(meters):.{decimals}f} m"
