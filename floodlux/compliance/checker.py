"""
Compliance checking of calculated statistics against a lighting standard.

Checking never raises for an unknown standard id: the result is simply
non-compliant with a single "Unknown standard" issue, so callers can show
it alongside the statistics.

Checked metrics:
- Average illuminance (always)
- Uniformity ratio Emin/Eavg (always)
- Vertical illuminance, color temperature, CRI, glare rating (only when the
  measured value is supplied)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from floodlux.metrics.statistics import StatisticsResult
from floodlux.standards.catalog import (
    AVERAGE_ILLUMINANCE,
    COLOR_TEMPERATURE,
    CRI,
    GLARE_RATING,
    UNIFORMITY_RATIO,
    VERTICAL_ILLUMINANCE,
    Requirement,
    StandardsCatalog,
    default_catalog,
)


UNKNOWN_STANDARD = "Unknown standard"

StatsLike = Union[StatisticsResult, Mapping[str, Any]]


@dataclass(frozen=True)
class ComplianceResult:
    compliant: bool
    issues: List[str] = field(default_factory=list)
    standard: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"compliant": self.compliant, "issues": list(self.issues), "standard": self.standard}


def _num(value: float, decimals: int) -> str:
    """Fixed-decimal rendering without trailing zeros (150.0 -> '150')."""
    text = f"{float(value):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _stat(stats: StatsLike, name: str, camel: str) -> float:
    if isinstance(stats, Mapping):
        value = stats.get(name, stats.get(camel, 0.0))
    else:
        value = getattr(stats, name)
    return float(value or 0.0)


def _check_minimum(
    issues: List[str],
    req: Optional[Requirement],
    value: float,
    label: str,
    decimals: int,
    unit: str = "",
) -> None:
    if req is None or req.minimum is None:
        return
    # compared at display precision
    value = round(float(value), decimals)
    if value < req.minimum:
        suffix = f" {unit}" if unit else ""
        issues.append(
            f"{label} {_num(value, decimals)}{suffix} is below minimum {_num(req.minimum, decimals)}{suffix}"
        )


def _check_maximum(
    issues: List[str],
    req: Optional[Requirement],
    value: float,
    label: str,
    decimals: int,
    unit: str = "",
) -> None:
    if req is None or req.maximum is None:
        return
    value = round(float(value), decimals)
    if value > req.maximum:
        suffix = f" {unit}" if unit else ""
        issues.append(
            f"{label} {_num(value, decimals)}{suffix} exceeds maximum {_num(req.maximum, decimals)}{suffix}"
        )


def check_compliance(
    stats: StatsLike,
    standard_id: str,
    catalog: Optional[StandardsCatalog] = None,
    *,
    vertical_illuminance: Optional[float] = None,
    color_temperature: Optional[float] = None,
    cri: Optional[float] = None,
    glare_rating: Optional[float] = None,
) -> ComplianceResult:
    """
    Check statistics against a named standard.

    Args:
        stats: StatisticsResult, or a mapping with average/uniformity_ratio
        standard_id: Catalog id (e.g. "fifa")
        catalog: Standards catalog, defaults to the bundled one
        vertical_illuminance: Measured vertical illuminance (lux), optional
        color_temperature: Fixture CCT (K), optional
        cri: Fixture color rendering index, optional
        glare_rating: Estimated glare rating, optional

    Returns:
        ComplianceResult with issues in check order
    """
    cat = catalog if catalog is not None else default_catalog()
    standard = cat.find(standard_id)
    if standard is None:
        return ComplianceResult(compliant=False, issues=[UNKNOWN_STANDARD], standard=None)

    issues: List[str] = []
    _check_minimum(
        issues,
        standard.requirement(AVERAGE_ILLUMINANCE),
        _stat(stats, "average", "average"),
        "Average illuminance",
        1,
        "lux",
    )
    _check_minimum(
        issues,
        standard.requirement(UNIFORMITY_RATIO),
        _stat(stats, "uniformity_ratio", "uniformityRatio"),
        "Uniformity ratio",
        3,
    )

    if vertical_illuminance is not None:
        _check_minimum(
            issues, standard.requirement(VERTICAL_ILLUMINANCE), vertical_illuminance, "Vertical illuminance", 1, "lux"
        )
    if color_temperature is not None:
        req = standard.requirement(COLOR_TEMPERATURE)
        _check_minimum(issues, req, color_temperature, "Color temperature", 0, "K")
        _check_maximum(issues, req, color_temperature, "Color temperature", 0, "K")
    if cri is not None:
        _check_minimum(issues, standard.requirement(CRI), cri, "CRI", 0)
    if glare_rating is not None:
        _check_maximum(issues, standard.requirement(GLARE_RATING), glare_rating, "Glare rating", 1, "GR")

    return ComplianceResult(compliant=not issues, issues=issues, standard=standard.name)
