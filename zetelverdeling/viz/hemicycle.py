"""Halfrond-diagram van de Tweede Kamer.

Toont de zetelverdeling als halve cirkel, met de meerderheidsgrens
(76 van de 150 zetels).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from zetelverdeling.config import get_party_color
from zetelverdeling.engine.allocation import majority_threshold


def _seat_positions(n_seats: int, n_rows: int = 8) -> List[Tuple[float, float]]:
    """Berekent de (x, y)-positie van elke zetel in het halfrond.

    De zetels liggen op concentrische bogen met toenemende straal.
    """
    if n_seats <= 0:
        return []
    n_rows = max(1, min(n_rows, n_seats))

    seats_per_row = []
    remaining = n_seats
    for i in range(n_rows):
        row_seats = max(1, round(remaining / (n_rows - i)))
        seats_per_row.append(row_seats)
        remaining -= row_seats
    seats_per_row[-1] += remaining

    positions = []
    r_min, r_max = 1.5, 4.0
    for row_idx, n_in_row in enumerate(seats_per_row):
        r = r_min + (r_max - r_min) * row_idx / max(1, n_rows - 1)
        for j in range(n_in_row):
            angle = np.pi * (j / (n_in_row - 1)) if n_in_row > 1 else np.pi / 2
            positions.append((r * np.cos(angle), r * np.sin(angle)))

    return positions[:n_seats]


def plot_hemicycle(
    seats: Dict[str, int],
    title: str = "Tweede Kamer — 150 zetels",
    figsize: Tuple[int, int] = (12, 7),
    show_majority_line: bool = True,
    party_colors: Optional[Dict[str, str]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """Tekent een halfrond-diagram.

    Partijen worden geplaatst van groot naar klein, in de volgorde van
    de zetelverdeling bij gelijke aantallen.

    Args:
        seats: dict partij → zetels.
        title: titel.
        figsize: afmetingen van de figuur.
        show_majority_line: meerderheidsgrens tonen.
        party_colors: eigen kleuren (dict partij → hex).
        ax: matplotlib-assen (maakt een figuur als None).

    Returns:
        Figure matplotlib.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()

    total = sum(seats.values())
    positions = _seat_positions(total)

    ordered = sorted(seats, key=lambda p: -seats[p])
    party_colors = party_colors or {}
    colors = {p: party_colors.get(p, get_party_color(p)) for p in ordered}

    idx = 0
    for party in ordered:
        for _ in range(seats[party]):
            x, y = positions[idx]
            ax.scatter(x, y, c=colors[party], s=60, edgecolors="white", linewidth=0.5, zorder=3)
            idx += 1

    if show_majority_line and total > 0:
        ax.axhline(y=0, color="black", linewidth=1.5, zorder=1)
        ax.text(0, -0.3, f"Meerderheid : {majority_threshold(total)} zetels",
                ha="center", va="top", fontsize=10, style="italic")

    legend_patches = [
        mpatches.Patch(color=colors[p], label=f"{p} ({seats[p]})")
        for p in ordered if seats[p] > 0
    ]
    if legend_patches:
        ax.legend(
            handles=legend_patches,
            loc="lower center",
            bbox_to_anchor=(0.5, -0.15),
            ncol=min(4, len(legend_patches)),
            fontsize=8,
        )

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlim(-5, 5)
    ax.set_ylim(-0.8, 5)
    ax.set_aspect("equal")
    ax.axis("off")

    fig.tight_layout()
    return fig
