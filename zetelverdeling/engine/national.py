"""Landelijke en regionale uitslag : zetels, stempercentages en kerncijfers.

Stappen :
  1. Samenvoegen van dubbele partijregels (stemmen optellen)
  2. Zetelverdeling D'Hondt over 150 zetels
  3. Stempercentage per partij
  4. Samenvatting : meerderheid, grootste partij, aantal partijen
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from zetelverdeling.config import TOTAL_SEATS, get_party_color, get_party_logo_url
from zetelverdeling.engine.allocation import (
    PartyInput,
    PartyResult,
    aggregate_votes,
    allocate_seats,
    majority_threshold,
)

NO_DATA_LABEL = "Geen data"

TABLE_COLUMNS = ["party", "votes", "percentage", "seats", "color"]


@dataclass
class PartyRecord:
    """Landelijk resultaat van één partij."""
    name: str
    votes: int
    seats: int
    percentage: float = 0.0


@dataclass
class NationalSummary:
    """Kerncijfers van een verkiezing."""
    election_id: Optional[str]
    records: List[PartyRecord] = field(default_factory=list)

    total_seats: int = 0
    majority_threshold: int = 0
    party_count: int = 0
    largest_party: Tuple[str, int] = (NO_DATA_LABEL, 0)

    @property
    def seats(self) -> Dict[str, int]:
        return {r.name: r.seats for r in self.records}

    @property
    def largest_party_percentage(self) -> str:
        if self.total_seats == 0:
            return "(0.00%)"
        return f"({self.largest_party[1] / self.total_seats * 100:.2f}%)"


def build_party_records(
    results: Iterable[PartyInput],
    total_seats: int = TOTAL_SEATS,
) -> List[PartyRecord]:
    """Berekent zetels en stempercentage per partij.

    Dubbele partijnamen worden eerst samengevoegd ; anders zou de
    zetelverdeling een partij dubbel tellen.

    Args:
        results: stemtotalen per partij.
        total_seats: aantal te verdelen zetels.

    Returns:
        Lijst van PartyRecord in volgorde van eerste voorkomen.
    """
    parties = aggregate_votes(results)
    seats = allocate_seats(parties, total_seats)
    return _records(parties, seats)


def build_vote_records(results: Iterable[PartyInput]) -> List[PartyRecord]:
    """Stemmen en percentages zonder zetels (gemeente, kieskring)."""
    return _records(aggregate_votes(results), {})


def _records(parties: List[PartyResult], seats: Dict[str, int]) -> List[PartyRecord]:
    total_votes = sum(p.votes for p in parties)
    return [
        PartyRecord(
            name=p.name,
            votes=p.votes,
            seats=seats.get(p.name, 0),
            percentage=(p.votes / total_votes * 100.0) if total_votes > 0 else 0.0,
        )
        for p in parties
    ]


def parties_from_rows(rows: Iterable[Mapping[str, Any]]) -> List[PartyResult]:
    """Zet tabelrijen ("name", "votes") om in PartyResult.

    Een tabel met lege cellen levert float-kolommen op ; alleen gehele
    waarden worden teruggezet naar int. Breuken blijven staan zodat
    allocate_seats ze als InvalidInput weigert.
    """
    parties = []
    for row in rows:
        votes = row["votes"]
        if isinstance(votes, float) and votes.is_integer():
            votes = int(votes)
        parties.append(PartyResult(name=str(row["name"]), votes=votes))
    return parties


def summarize(
    records: Sequence[PartyRecord],
    election_id: Optional[str] = None,
) -> NationalSummary:
    """Stelt de kerncijfers samen uit de partijresultaten."""
    summary = NationalSummary(election_id=election_id, records=list(records))
    summary.total_seats = sum(r.seats for r in records)
    summary.majority_threshold = majority_threshold(summary.total_seats)
    summary.party_count = len(records)

    if summary.total_seats > 0:
        # max() houdt bij gelijke zetels de eerste partij
        top = max(records, key=lambda r: r.seats)
        summary.largest_party = (top.name, top.seats)

    return summary


def results_table(
    records: Sequence[PartyRecord],
    include_logo: bool = False,
) -> pd.DataFrame:
    """Tabel voor grafieken, gesorteerd op stemmen (hoog naar laag).

    Met include_logo komt er een kolom "logo" bij (URL of None).
    """
    columns = TABLE_COLUMNS + (["logo"] if include_logo else [])
    if not records:
        return pd.DataFrame(columns=columns)

    total_votes = sum(r.votes for r in records)
    df = pd.DataFrame({
        "party": [r.name for r in records],
        "votes": [r.votes for r in records],
        "percentage": [
            round(r.votes / total_votes * 100, 2) if total_votes > 0 else 0.0
            for r in records
        ],
        "seats": [r.seats for r in records],
        "color": [get_party_color(r.name) for r in records],
    })
    if include_logo:
        df["logo"] = [get_party_logo_url(r.name) for r in records]
    return df.sort_values("votes", ascending=False, kind="stable").reset_index(drop=True)
