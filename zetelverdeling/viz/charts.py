"""Plotly-grafieken.

Visualisaties :
  - Horizontale staven : stempercentage per partij, met stemmen en zetels
  - Gestapelde staven : zetels per scenario (wat-als-berekeningen)
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from zetelverdeling.config import get_party_color
from zetelverdeling.engine.allocation import majority_threshold


def format_votes(votes: int) -> str:
    """Stemmen met Nederlandse duizendtalscheiding (1.234.567)."""
    return f"{int(votes):,}".replace(",", ".")


# ---------------------------------------------------------------------------
# Landelijke uitslag
# ---------------------------------------------------------------------------

def national_result_bar(
    table: pd.DataFrame,
    election_id: str,
    height: Optional[int] = None,
    title: Optional[str] = None,
    show_seats: bool = True,
) -> go.Figure:
    """Horizontale staafgrafiek van het stempercentage per partij.

    Args:
        table: uitvoer van results_table (party, votes, percentage, seats, color).
        election_id: verkiezing, komt in de titel.
        height: hoogte in pixels (standaard 24 px per partij).
        title: eigen titel (bijv. voor een gemeente of kieskring).
        show_seats: zetels in de tooltip ; uit voor regionale uitslagen.

    Returns:
        Figure Plotly.
    """
    customdata = np.column_stack([
        [format_votes(v) for v in table["votes"]],
        table["seats"].astype(int).to_numpy(),
    ]) if len(table) else None

    hovertemplate = (
        "<b>%{y}</b><br>"
        "Stempercentage: %{x:.2f}%<br>"
        "Totaal Stemmen: %{customdata[0]}"
    )
    if show_seats:
        hovertemplate += "<br>Aantal Zetels: %{customdata[1]}"

    fig = go.Figure(go.Bar(
        x=table["percentage"],
        y=table["party"],
        orientation="h",
        marker_color=list(table["color"]),
        marker_line_color="#ffffff",
        marker_line_width=1,
        customdata=customdata,
        hovertemplate=hovertemplate + "<extra></extra>",
    ))

    fig.update_layout(
        title=title or f"Nationale verkiezingsresultaten: Stempercentage & Zetels ({election_id})",
        title_font_size=18,
        xaxis_title="Stempercentage (%)",
        xaxis_ticksuffix="%",
        yaxis_autorange="reversed",
        showlegend=False,
        template="plotly_white",
        height=height or max(400, 24 * len(table)),
    )
    return fig


# ---------------------------------------------------------------------------
# Vergelijking van scenario's
# ---------------------------------------------------------------------------

def seats_comparison(
    scenarios_seats: Dict[str, Dict[str, int]],
    title: str = "Zetelverdeling per scenario",
) -> go.Figure:
    """Gestapelde staven die de zetels per scenario vergelijken.

    Args:
        scenarios_seats: dict scenario → (dict partij → zetels).
        title: titel.

    Returns:
        Figure Plotly.
    """
    parties = []
    for seats in scenarios_seats.values():
        for party in seats:
            if party not in parties:
                parties.append(party)

    fig = go.Figure()
    for party in parties:
        fig.add_trace(go.Bar(
            name=party,
            x=list(scenarios_seats.keys()),
            y=[scenarios_seats[sc].get(party, 0) for sc in scenarios_seats],
            marker_color=get_party_color(party),
        ))

    fig.update_layout(
        barmode="stack",
        title=title,
        xaxis_title="Scenario",
        yaxis_title="Zetels",
        legend_title="Partij",
        template="plotly_white",
    )

    totals = [sum(seats.values()) for seats in scenarios_seats.values()]
    if totals and max(totals) > 0:
        majority = majority_threshold(max(totals))
        fig.add_hline(y=majority, line_dash="dash", line_color="red",
                      annotation_text=f"Meerderheid ({majority})",
                      annotation_position="bottom right")

    return fig
