"""Centraal laadpunt voor verkiezingsuitslagen (API + zetelberekening)."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Union

from zetelverdeling.config import TOTAL_SEATS
from zetelverdeling.data.api_client import ElectionApiClient
from zetelverdeling.data.schemas import NationalResult, PartyDTO, RegionDataDto, RegionResultDto
from zetelverdeling.engine.allocation import PartyInput, allocate_seats
from zetelverdeling.engine.national import (
    NationalSummary,
    PartyRecord,
    build_party_records,
    build_vote_records,
    summarize,
)

logger = logging.getLogger(__name__)

ResultInput = Union[PartyInput, NationalResult, PartyDTO, RegionResultDto]


def _to_party_inputs(results: Iterable[ResultInput]) -> List[PartyInput]:
    return [
        r.to_party_result() if isinstance(r, (NationalResult, PartyDTO, RegionResultDto)) else r
        for r in results
    ]


class ResultsLoader:
    """Haalt uitslagen op en rekent de zetelverdeling uit."""

    def __init__(
        self,
        client: Optional[ElectionApiClient] = None,
        total_seats: int = TOTAL_SEATS,
    ):
        self.client = client or ElectionApiClient()
        self.total_seats = total_seats

    def national_results(self, election_id: str) -> List[NationalResult]:
        return self.client.get_national_results(election_id)

    def calculate_seats(
        self,
        results: Iterable[ResultInput],
        total_seats: Optional[int] = None,
    ) -> Dict[str, int]:
        """Zetels per partij volgens D'Hondt (standaard 150)."""
        seats = self.total_seats if total_seats is None else total_seats
        return allocate_seats(_to_party_inputs(results), seats)

    def party_records(self, election_id: str) -> List[PartyRecord]:
        """Stemmen, zetels en percentages, berekend uit de landelijke stemtotalen."""
        results = self.national_results(election_id)
        logger.info("%d partijregels ontvangen voor %s", len(results), election_id)
        return build_party_records(_to_party_inputs(results), self.total_seats)

    def load_summary(self, election_id: str) -> NationalSummary:
        """Kerncijfers op basis van de opgeslagen zetels in de database."""
        parties = self.client.get_parties_from_db(election_id)
        records = [
            PartyRecord(
                name=p.name,
                votes=p.total_votes,
                seats=p.national_seats,
                percentage=p.vote_percentage,
            )
            for p in parties
        ]
        return summarize(records, election_id)

    # --- Regionale uitslagen ---

    def municipality_records(self, municipality: str) -> List[PartyRecord]:
        """Stemmen en percentages per partij in één gemeente."""
        results = self.client.get_municipality_results(municipality)
        return build_vote_records(_to_party_inputs(results))

    def all_municipality_records(self) -> Dict[str, List[PartyRecord]]:
        """dict gemeente → uitslag per partij."""
        return _region_records(self.client.get_all_municipality_results())

    def constituency_records(self, election_id: str) -> Dict[str, List[PartyRecord]]:
        """dict kieskring → uitslag per partij."""
        return _region_records(self.client.get_constituency_results(election_id))

    def province_tree(self) -> Dict[str, List[str]]:
        """Nederland → provincies → kieskringen, als dict provincie → kieskringnamen."""
        return {
            province.name: [k.name for k in province.kieskringen]
            for province in self.client.get_provinces()
        }


def _region_records(regions: Iterable[RegionDataDto]) -> Dict[str, List[PartyRecord]]:
    records: Dict[str, List[PartyRecord]] = {}
    for region in regions:
        if region.name in records:
            logger.warning("Regio %s komt dubbel voor ; laatste uitslag telt", region.name)
        records[region.name] = build_vote_records(region.to_party_results())
    return records
