from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

import numpy as np

from floodlux.models.geometry import IlluminanceField


@dataclass(frozen=True)
class StatisticsResult:
    average: float
    minimum: float
    maximum: float
    uniformity_ratio: float
    standard_deviation: float
    count: int

    def to_dict(self) -> Dict[str, float]:
        return {
            "average": self.average,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "uniformity_ratio": self.uniformity_ratio,
            "standard_deviation": self.standard_deviation,
            "count": self.count,
        }

    def rounded(self) -> "StatisticsResult":
        """Display form: lux values to 1 decimal, uniformity to 3."""
        return StatisticsResult(
            average=round(self.average, 1),
            minimum=round(self.minimum, 1),
            maximum=round(self.maximum, 1),
            uniformity_ratio=round(self.uniformity_ratio, 3),
            standard_deviation=round(self.standard_deviation, 1),
            count=self.count,
        )


def compute_statistics(values: Iterable[float]) -> StatisticsResult:
    arr = np.asarray(list(values), dtype=float).reshape(-1)
    if arr.size == 0:
        return StatisticsResult(0.0, 0.0, 0.0, 0.0, 0.0, 0)
    e_avg = float(np.mean(arr))
    e_min = float(np.min(arr))
    e_max = float(np.max(arr))
    # mean of equal values can land one ulp below them
    u0 = min(1.0, e_min / e_avg) if e_avg > 0.0 else 0.0
    return StatisticsResult(
        average=e_avg,
        minimum=e_min,
        maximum=e_max,
        uniformity_ratio=u0,
        standard_deviation=float(np.std(arr)),  # population (ddof=0)
        count=int(arr.size),
    )


def reduce_field(field: IlluminanceField) -> StatisticsResult:
    return compute_statistics(p.illuminance for p in field.points)
