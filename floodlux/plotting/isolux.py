"""
Isolux plot export for reports.

Draws the sampled field with the isolux band colors produced by
``generate_contours`` so the PNG matches what the editor shows.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from floodlux.derived.contours import Contour  # noqa: E402
from floodlux.metrics.statistics import reduce_field  # noqa: E402
from floodlux.models.fixture import Fixture  # noqa: E402
from floodlux.models.geometry import IlluminanceField  # noqa: E402


def plot_isolux(
    field: IlluminanceField,
    contours: Sequence[Contour],
    outpath: Path,
    fixtures: Optional[Sequence[Fixture]] = None,
    title: Optional[str] = None,
) -> Path:
    """
    Save an isolux band plot of a sampled field.

    Args:
        field: Sampled illuminance field (complete grid)
        contours: Bands from generate_contours, ascending levels
        outpath: Output PNG path
        fixtures: Optionally mark fixture positions
        title: Plot title (auto-generated if None)

    Returns:
        Path to saved plot
    """
    outpath = Path(outpath)
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(8, 6))

    coords = field.coordinates()
    if field.nx >= 2 and field.ny >= 2 and contours:
        x = coords[:, 0].reshape(field.nx, field.ny).T
        y = coords[:, 1].reshape(field.nx, field.ny).T
        z = field.as_grid()
        # one band per level, ascending
        bands = sorted({c.level: c for c in reversed(list(contours))}.values(), key=lambda c: c.level)
        levels: List[float] = [c.level for c in bands]
        colors = [tuple(ch / 255.0 for ch in c.color) for c in bands]
        top = max(float(np.max(z)), levels[-1]) + 1.0
        ax.contourf(x, y, z, levels=levels + [top], colors=colors, alpha=0.85)
        cs = ax.contour(x, y, z, levels=levels, colors="black", linewidths=0.6)
        ax.clabel(cs, inline=True, fontsize=8, fmt="%.0f lx")
    else:
        sc = ax.scatter(coords[:, 0], coords[:, 1], c=field.values(), cmap="inferno", s=12)
        fig.colorbar(sc, ax=ax, label="Illuminance (lux)")

    if fixtures:
        ax.scatter(
            [f.position.x for f in fixtures],
            [f.position.y for f in fixtures],
            marker="^", color="black", s=30, label="Fixtures",
        )
        ax.legend(loc="upper right", fontsize=8)

    x0, y0, x1, y1 = field.area.bounds
    ax.plot([x0, x1, x1, x0, x0], [y0, y0, y1, y1, y0], color="gray", linewidth=1.0)

    if title is None:
        s = reduce_field(field)
        title = (f"Isolux\nEavg={s.average:.0f} lx, Emin={s.minimum:.0f} lx, "
                 f"Emax={s.maximum:.0f} lx, U0={s.uniformity_ratio:.2f}")
    ax.set_title(title, fontsize=11)
    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_aspect("equal")

    fig.tight_layout()
    fig.savefig(outpath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return outpath
