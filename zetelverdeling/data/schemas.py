"""Pydantic-modellen voor de validatie van backend-antwoorden."""

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from zetelverdeling.engine.allocation import PartyResult


class NationalResult(BaseModel):
    """Landelijk stemtotaal van een partij (XML-cache van de backend)."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    total_votes: int = Field(ge=0, alias="totalVotes")

    def to_party_result(self) -> PartyResult:
        return PartyResult(name=self.name, votes=self.total_votes)


class PartyDTO(BaseModel):
    """Opgeslagen partijresultaat (stemmen, zetels) uit de database."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    name: str = Field(min_length=1)
    total_votes: int = Field(ge=0, alias="totalVotes")
    national_seats: int = Field(ge=0, default=0, alias="nationalSeats")
    vote_percentage: float = Field(ge=0, default=0.0, alias="votePercentage")

    def to_party_result(self) -> PartyResult:
        return PartyResult(name=self.name, votes=self.total_votes)


class ApiErrorResponse(BaseModel):
    """Standaard foutobject van de Spring Boot-backend."""
    message: str
    timestamp: Optional[str] = None
    status: Optional[int] = None
    error: Optional[str] = None
    path: Optional[str] = None


# ---------------------------------------------------------------------------
# Regionale uitslagen (gemeenten, kieskringen) en provincies
# ---------------------------------------------------------------------------

class RegionResultDto(BaseModel):
    """Geldige stemmen van één partij binnen een gemeente of kieskring."""
    model_config = ConfigDict(populate_by_name=True)

    party_name: str = Field(min_length=1, alias="partyName")
    valid_votes: int = Field(ge=0, alias="validVotes")

    def to_party_result(self) -> PartyResult:
        return PartyResult(name=self.party_name, votes=self.valid_votes)


class RegionDataDto(BaseModel):
    """Naam van een gemeente of kieskring met de uitslag per partij."""
    name: str
    results: List[RegionResultDto] = Field(default_factory=list)

    def to_party_results(self) -> List[PartyResult]:
        return [r.to_party_result() for r in self.results]


# Dezelfde vorm voor gemeenten en kieskringen
MunicipalityResultDto = RegionResultDto
MunicipalityDataDto = RegionDataDto
ConstituencyResultDto = RegionResultDto
ConstituencyDataDto = RegionDataDto


class KieskringDto(BaseModel):
    kieskring_id: int
    name: str


class ProvinceDto(BaseModel):
    """Provincie met haar kieskringen."""
    province_id: int
    name: str
    kieskringen: List[KieskringDto] = Field(default_factory=list)
