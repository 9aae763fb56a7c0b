from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from floodlux.models.fixture import Fixture


DEFAULT_OPERATING_HOURS = 8.0
DEFAULT_ELECTRICITY_RATE = 0.15  # currency per kWh
DEFAULT_CO2_FACTOR = 0.5  # kg CO2 per kWh, average grid


@dataclass(frozen=True)
class PowerEstimate:
    total_power_w: float
    energy_per_day_kwh: float
    energy_per_year_kwh: float
    operating_cost_per_year: float
    co2_per_year_kg: float

    def rounded(self) -> "PowerEstimate":
        return PowerEstimate(
            total_power_w=round(self.total_power_w, 0),
            energy_per_day_kwh=round(self.energy_per_day_kwh, 1),
            energy_per_year_kwh=round(self.energy_per_year_kwh, 0),
            operating_cost_per_year=round(self.operating_cost_per_year, 0),
            co2_per_year_kg=round(self.co2_per_year_kg, 0),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "total_power_w": self.total_power_w,
            "energy_per_day_kwh": self.energy_per_day_kwh,
            "energy_per_year_kwh": self.energy_per_year_kwh,
            "operating_cost_per_year": self.operating_cost_per_year,
            "co2_per_year_kg": self.co2_per_year_kg,
        }


def estimate_power(
    fixtures: Sequence[Fixture],
    operating_hours: float = DEFAULT_OPERATING_HOURS,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    co2_factor: float = DEFAULT_CO2_FACTOR,
) -> PowerEstimate:
    total_w = float(sum(f.power for f in fixtures))
    per_day = total_w * float(operating_hours) / 1000.0
    per_year = per_day * 365.0
    return PowerEstimate(
        total_power_w=total_w,
        energy_per_day_kwh=per_day,
        energy_per_year_kwh=per_year,
        operating_cost_per_year=per_year * float(electricity_rate),
        co2_per_year_kg=per_year * float(co2_factor),
    )
