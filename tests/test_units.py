from __future__ import annotations

import pytest

from floodlux.core.units import (
    IMPERIAL,
    feet_to_meters,
    foot_candles_to_lux,
    format_illuminance,
    format_length,
    lux_to_foot_candles,
    meters_to_feet,
)


def test_length_conversions() -> None:
    assert meters_to_feet(1.0) == pytest.approx(3.28084)
    assert feet_to_meters(meters_to_feet(20.0)) == pytest.approx(20.0)


def test_illuminance_conversions() -> None:
    assert lux_to_foot_candles(10.7639) == pytest.approx(1.0, abs=1e-4)
    assert foot_candles_to_lux(lux_to_foot_candles(500.0)) == pytest.approx(500.0)


def test_formatting() -> None:
    assert format_illuminance(215.04) == "215.0 lux"
    assert format_illuminance(10.7639, IMPERIAL) == "1.0 fc"
    assert format_length(20.0) == "20.00 m"
    assert format_length(1.0, IMPERIAL, 1) == "3.3 ft"
