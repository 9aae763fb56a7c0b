from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from floodlux.core.errors import FloodluxError
from floodlux.core.units import IMPERIAL, METRIC, format_illuminance, format_length
from floodlux.derived.energy import estimate_power
from floodlux.derived.spillage import evaluate_spillage
from floodlux.io.scene import Scene, load_scene
from floodlux.logging_config import setup_logging
from floodlux.optim.layout import LayoutRequirements, optimize_layout
from floodlux.plotting.isolux import plot_isolux
from floodlux.runner import run_calculation, select_area
from floodlux.standards.catalog import default_catalog, load_catalog


logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace) -> Scene:
    path = Path(args.scene).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Scene file not found: {path}")
    return load_scene(path)


def _catalog(args: argparse.Namespace):
    if getattr(args, "standards_file", None):
        return load_catalog(Path(args.standards_file).expanduser().resolve())
    return default_catalog()


def _cmd_standards(args: argparse.Namespace) -> int:
    catalog = _catalog(args)
    for std in catalog:
        print(f"{std.id}: {std.name}")
        for key, req in std.requirements.items():
            parts = []
            if req.minimum is not None:
                parts.append(f"min {req.minimum:g}")
            if req.maximum is not None:
                parts.append(f"max {req.maximum:g}")
            if req.recommended is not None:
                parts.append(f"recommended {req.recommended:g}")
            unit = f" {req.unit}" if req.unit else ""
            print(f"  {key}: {', '.join(parts)}{unit}")
    return 0


def _cmd_calculate(args: argparse.Namespace) -> int:
    scene = _load(args)
    cfg = scene.settings
    report = run_calculation(
        scene.fixtures,
        scene.areas,
        args.standard,
        args.spacing,
        catalog=_catalog(args),
        settings=cfg,
    )
    out: Dict[str, Any] = report.summary()

    if scene.boundary:
        spill = evaluate_spillage(scene.fixtures, scene.boundary, cfg.spill_threshold)
        out["spillage"] = {
            "points": len(spill.spillage_points),
            "max_spillage": round(spill.max_spillage, 1),
            "average_spillage": round(spill.average_spillage, 1),
        }

    if args.isolux:
        path = plot_isolux(report.field, report.contours, Path(args.isolux), fixtures=scene.fixtures)
        out["isolux_png"] = str(path)

    if args.json:
        print(json.dumps(out, indent=2))
        return 0

    s = report.statistics.rounded()
    c = report.compliance

    def lx(value: float) -> str:
        return format_illuminance(value, args.units)

    print("Floodlux Calculation")
    print(f"  Points: {s.count}")
    print(f"  Average: {lx(s.average)}")
    print(f"  Minimum: {lx(s.minimum)}")
    print(f"  Maximum: {lx(s.maximum)}")
    print(f"  Uniformity (Emin/Eavg): {s.uniformity_ratio:.3f}")
    print(f"  Std deviation: {lx(s.standard_deviation)}")
    print(f"  Standard: {c.standard or args.standard} -> {'COMPLIANT' if c.compliant else 'NON-COMPLIANT'}")
    for issue in c.issues:
        print(f"    - {issue}")
    if "spillage" in out:
        sp = out["spillage"]
        print(f"  Spillage: {sp['points']} point(s), max {lx(sp['max_spillage'])}, avg {lx(sp['average_spillage'])}")
    if "isolux_png" in out:
        print(f"  Saved: {out['isolux_png']}")
    return 0


def _cmd_layout(args: argparse.Namespace) -> int:
    scene = _load(args)
    area = select_area(scene.areas)
    plan = optimize_layout(
        area,
        LayoutRequirements(average_illuminance=args.target, mounting_height=args.mounting_height),
        scene.fixtures,
    )
    if args.json:
        print(json.dumps({
            "fixture": plan.fixture.id or plan.fixture.name,
            "count": plan.count,
            "spacing": plan.spacing,
            "efficacy": plan.efficacy,
            "placements": [list(p) for p in plan.placements],
        }, indent=2))
        return 0
    print("Floodlux Layout")
    print(f"  Fixture: {plan.fixture.name} ({plan.efficacy:.0f} lm/W)")
    print(f"  Count: {plan.count}")
    print(f"  Spacing: {format_length(plan.spacing, args.units, 1)}")
    for x, y, z in plan.placements:
        print(f"    ({format_length(x, args.units)}, {format_length(y, args.units)}, {format_length(z, args.units)})")
    return 0


def _cmd_energy(args: argparse.Namespace) -> int:
    scene = _load(args)
    cfg = scene.settings
    est = estimate_power(
        scene.fixtures,
        operating_hours=cfg.operating_hours if args.hours is None else args.hours,
        electricity_rate=cfg.electricity_rate if args.rate is None else args.rate,
        co2_factor=cfg.co2_factor,
    ).rounded()
    print("Floodlux Energy")
    print(f"  Total power: {est.total_power_w:.0f} W")
    print(f"  Energy per day: {est.energy_per_day_kwh:.1f} kWh")
    print(f"  Energy per year: {est.energy_per_year_kwh:.0f} kWh")
    print(f"  Operating cost per year: {est.operating_cost_per_year:.0f}")
    print(f"  CO2 per year: {est.co2_per_year_kg:.0f} kg")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="floodlux")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    p.add_argument("--standards-file", default=None, help="JSON/YAML standards catalog to use instead of the bundled one")
    p.add_argument("--log-file", default=None, help="Also write log records to this file")
    p.add_argument("--units", choices=[METRIC, IMPERIAL], default=METRIC, help="Units for printed values (default: metric)")
    sub = p.add_subparsers(dest="cmd", required=True)

    st = sub.add_parser("standards", help="List lighting standards and their requirements.")
    st.set_defaults(func=_cmd_standards)

    calc = sub.add_parser("calculate", help="Sample illuminance over the first area and check compliance.")
    calc.add_argument("scene", help="Scene file (JSON or YAML)")
    calc.add_argument("--standard", default="fifa", help="Standard id (default: fifa)")
    calc.add_argument("--spacing", type=float, default=None, help="Grid spacing in meters (default: scene setting, 2)")
    calc.add_argument("--isolux", default=None, help="Also save an isolux PNG to this path")
    calc.add_argument("--json", action="store_true", help="Print results as JSON")
    calc.set_defaults(func=_cmd_calculate)

    lay = sub.add_parser("layout", help="Propose a regular fixture grid for the first area.")
    lay.add_argument("scene", help="Scene file; its fixtures are the candidates")
    lay.add_argument("--target", type=float, default=200.0, help="Target average illuminance (lux)")
    lay.add_argument("--mounting-height", type=float, default=20.0, help="Mounting height (m)")
    lay.add_argument("--json", action="store_true", help="Print the plan as JSON")
    lay.set_defaults(func=_cmd_layout)

    en = sub.add_parser("energy", help="Estimate power, energy and running cost.")
    en.add_argument("scene", help="Scene file (JSON or YAML)")
    en.add_argument("--hours", type=float, default=None, help="Operating hours per day")
    en.add_argument("--rate", type=float, default=None, help="Electricity rate per kWh")
    en.set_defaults(func=_cmd_energy)

    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    try:
        return int(args.func(args))
    except (FloodluxError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"[ERROR] {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
