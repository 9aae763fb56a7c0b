from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from floodlux.calculation.grid import CancellationToken, ProgressCallback, sample
from floodlux.compliance.checker import ComplianceResult, check_compliance
from floodlux.core.errors import InvalidAreaError
from floodlux.derived.contours import Contour, generate_contours
from floodlux.metrics.statistics import StatisticsResult, reduce_field
from floodlux.models.fixture import Fixture
from floodlux.models.geometry import Area, IlluminanceField
from floodlux.settings import CalculationSettings
from floodlux.standards.catalog import StandardsCatalog


logger = logging.getLogger(__name__)

NO_AREA_MESSAGE = "Define an area to calculate"


@dataclass(frozen=True)
class CalculationReport:
    area: Area
    field: IlluminanceField
    statistics: StatisticsResult
    compliance: ComplianceResult
    contours: List[Contour] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        return {
            "area": {"x": self.area.x, "y": self.area.y, "width": self.area.width, "height": self.area.height},
            "statistics": self.statistics.rounded().to_dict(),
            "compliance": self.compliance.to_dict(),
            "contour_levels": [c.level for c in self.contours],
        }


def select_area(areas: Sequence[Area]) -> Area:
    """The first area is the calculation area; any others are ignored."""
    if not areas:
        raise InvalidAreaError(NO_AREA_MESSAGE)
    if len(areas) > 1:
        logger.info("%d areas defined, calculating the first one only", len(areas))
    return areas[0]


def run_calculation(
    fixtures: Sequence[Fixture],
    areas: Sequence[Area],
    standard_id: str,
    spacing: Optional[float] = None,
    *,
    catalog: Optional[StandardsCatalog] = None,
    settings: Optional[CalculationSettings] = None,
    cancel: Optional[CancellationToken] = None,
    progress: Optional[ProgressCallback] = None,
) -> CalculationReport:
    """Sample, reduce, check and contour the first area in one call."""
    cfg = settings or CalculationSettings()
    grid_spacing = cfg.grid_spacing if spacing is None else spacing
    area = select_area(areas)

    logger.info("Calculating %d fixtures over %.1f x %.1f m at %.2f m spacing",
                len(fixtures), area.width, area.height, grid_spacing)
    result_field = sample(
        fixtures,
        area,
        grid_spacing,
        surface_reflectance=cfg.surface_reflectance,
        cancel=cancel,
        progress=progress,
    )
    stats = reduce_field(result_field)
    compliance = check_compliance(stats, standard_id, catalog)
    contours = generate_contours(result_field, cfg.contour_levels)
    logger.info(
        "Eavg=%.1f lx Emin=%.1f lx U0=%.3f (%s: %s)",
        stats.average, stats.minimum, stats.uniformity_ratio,
        compliance.standard or standard_id, "PASS" if compliance.compliant else "FAIL",
    )
    return CalculationReport(area=area, field=result_field, statistics=stats, compliance=compliance, contours=contours)


async def run_calculation_async(
    fixtures: Sequence[Fixture],
    areas: Sequence[Area],
    standard_id: str,
    spacing: Optional[float] = None,
    **kwargs: Any,
) -> CalculationReport:
    """
    Same as run_calculation, deferred by one event-loop step.

    The yield lets the caller render a busy state before the blocking
    computation runs on the loop thread.
    """
    await asyncio.sleep(0)
    return run_calculation(fixtures, areas, standard_id, spacing, **kwargs)
