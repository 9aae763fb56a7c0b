from __future__ import annotations

import numpy as np

from floodlux.metrics.statistics import compute_statistics, reduce_field
from floodlux.models import Area, IlluminanceField, SamplePoint


def _field(values) -> IlluminanceField:
    pts = tuple(SamplePoint(float(i), 0.0, 0.0, float(v)) for i, v in enumerate(values))
    return IlluminanceField(points=pts, area=Area(x=0.0, y=0.0, width=10.0, height=10.0), spacing=1.0)


def test_basic_statistics() -> None:
    s = compute_statistics([100.0, 80.0, 60.0, 40.0])
    assert s.average == 70.0
    assert s.minimum == 40.0
    assert s.maximum == 100.0
    assert abs(s.uniformity_ratio - 40.0 / 70.0) < 1e-12
    assert s.count == 4


def test_standard_deviation_is_population() -> None:
    s = compute_statistics([2, 4, 4, 4, 5, 5, 7, 9])
    assert abs(s.standard_deviation - 2.0) < 1e-12


def test_empty_field_is_all_zero() -> None:
    s = reduce_field(_field([]))
    assert (s.average, s.minimum, s.maximum, s.uniformity_ratio, s.standard_deviation, s.count) == (
        0.0, 0.0, 0.0, 0.0, 0.0, 0,
    )


def test_zero_average_gives_zero_uniformity() -> None:
    s = reduce_field(_field([0.0, 0.0, 0.0]))
    assert s.average == 0.0
    assert s.uniformity_ratio == 0.0
    assert not np.isnan(s.uniformity_ratio)


def test_uniformity_ratio_bounded() -> None:
    rng = np.random.default_rng(7)
    for _ in range(50):
        vals = rng.uniform(0.0, 500.0, size=rng.integers(1, 40))
        vals[rng.integers(0, vals.size)] = 0.0 if rng.random() < 0.3 else vals[0]
        s = compute_statistics(vals.tolist())
        assert 0.0 <= s.uniformity_ratio <= 1.0
    s = compute_statistics([0.1] * 10)
    assert s.uniformity_ratio == 1.0


def test_rounded_display_values() -> None:
    s = compute_statistics([100.04, 50.0, 20.0]).rounded()
    assert s.average == 56.7
    assert s.maximum == 100.0
    assert s.uniformity_ratio == round(20.0 / (170.04 / 3.0), 3)
    assert s.to_dict()["count"] == 3
