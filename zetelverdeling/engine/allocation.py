"""Methode D'Hondt (grootste gemiddelden) voor de zetelverdeling.

Referenties :
  - Kieswet, art. P 6 (verdeling volgens de grootste gemiddelden)
  - Tweede Kamer : 150 zetels, landelijk verdeeld

Gelijke quotiënten worden beslecht in invoervolgorde : de partij die het
eerst in de lijst staat krijgt de zetel. De wettelijke loting bij gelijke
gemiddelden valt buiten deze module ; de aanroeper bepaalt dus met de
volgorde van de invoer wie een betwiste zetel wint.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from zetelverdeling.config import TOTAL_SEATS


class InvalidInput(ValueError):
    """Ongeldige invoer : programmeer- of datafout, opnieuw proberen heeft geen zin."""


class DuplicatePartyName(InvalidInput):
    """Twee invoerregels delen dezelfde partijnaam."""

    def __init__(self, name: str):
        super().__init__(f"Partijnaam komt meer dan eens voor : {name!r}")
        self.name = name


@dataclass(frozen=True)
class PartyResult:
    """Stemtotaal van één partij."""
    name: str
    votes: int


PartyInput = Union[PartyResult, Mapping[str, object]]


def _is_integer(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _as_party_result(item: PartyInput) -> PartyResult:
    if isinstance(item, PartyResult):
        name, votes = item.name, item.votes
    elif isinstance(item, Mapping):
        if "name" not in item or "votes" not in item:
            raise InvalidInput(f"Partij zonder 'name' of 'votes' : {item!r}")
        name, votes = item["name"], item["votes"]
    else:
        raise InvalidInput(f"Onbekend invoertype : {type(item).__name__}")

    if not isinstance(name, str) or not name:
        raise InvalidInput(f"Partijnaam moet een niet-lege string zijn : {name!r}")
    if not _is_integer(votes):
        raise InvalidInput(f"Stemmen voor {name!r} moeten een geheel getal zijn : {votes!r}")
    if votes < 0:
        raise InvalidInput(f"Negatief aantal stemmen voor {name!r} : {votes}")
    return PartyResult(name=name, votes=int(votes))


def _validate_results(results: Iterable[PartyInput]) -> List[PartyResult]:
    parties: List[PartyResult] = []
    seen = set()
    for item in results:
        party = _as_party_result(item)
        if party.name in seen:
            raise DuplicatePartyName(party.name)
        seen.add(party.name)
        parties.append(party)
    return parties


def allocate_seats(
    results: Iterable[PartyInput],
    total_seats: int = TOTAL_SEATS,
) -> Dict[str, int]:
    """Zetelverdeling volgens D'Hondt.

    Elke ronde gaat één zetel naar de partij met het hoogste quotiënt
    stemmen / (zetels + 1). Partijen zonder stemmen doen niet mee maar
    staan wel met 0 zetels in het resultaat.

    Quotiënten worden exact vergeleken via kruislingse vermenigvuldiging :
    a.votes * (b.seats + 1) > b.votes * (a.seats + 1).

    Args:
        results: PartyResult-objecten of dicts met "name" en "votes".
        total_seats: aantal te verdelen zetels (positief geheel getal).

    Returns:
        dict partijnaam → zetels.

    Raises:
        InvalidInput: total_seats <= 0, negatieve of niet-gehele stemmen,
            lege naam.
        DuplicatePartyName: een naam komt meer dan eens voor.
    """
    if not _is_integer(total_seats) or total_seats <= 0:
        raise InvalidInput(f"total_seats moet een positief geheel getal zijn : {total_seats!r}")

    parties = _validate_results(results)
    seats: Dict[str, int] = {p.name: 0 for p in parties}

    active = [p for p in parties if p.votes > 0]
    if not active:
        return seats

    won = [0] * len(active)
    for _ in range(int(total_seats)):
        best = 0
        for i in range(1, len(active)):
            # Strikt groter : bij gelijkheid blijft de eerst genoemde partij staan
            if active[i].votes * (won[best] + 1) > active[best].votes * (won[i] + 1):
                best = i
        won[best] += 1

    for party, n in zip(active, won):
        seats[party.name] = n
    return seats


def aggregate_votes(results: Iterable[PartyInput]) -> List[PartyResult]:
    """Voegt regels met dezelfde partijnaam samen door de stemmen op te tellen.

    De volgorde van eerste voorkomen blijft behouden, zodat de
    gelijkspelregel van allocate_seats voorspelbaar blijft.
    """
    totals: Dict[str, int] = {}
    for item in results:
        party = _as_party_result(item)
        totals[party.name] = totals.get(party.name, 0) + party.votes
    return [PartyResult(name=name, votes=votes) for name, votes in totals.items()]


def compute_quotient_table(
    results: Iterable[PartyInput],
    max_divisor: int = 20,
) -> List[Tuple[str, int, float]]:
    """Tabel van D'Hondt-quotiënten (handig voor debuggen / visualisatie).

    Returns:
        Lijst van (partij, deler, quotiënt) gesorteerd op dalend quotiënt ;
        gelijke quotiënten in invoervolgorde, net als bij allocate_seats.
    """
    if not _is_integer(max_divisor) or max_divisor <= 0:
        raise InvalidInput(f"max_divisor moet een positief geheel getal zijn : {max_divisor!r}")

    rows = []
    for party in _validate_results(results):
        if party.votes == 0:
            continue
        for d in range(1, int(max_divisor) + 1):
            rows.append((party.name, d, Fraction(party.votes, d)))
    rows.sort(key=lambda row: row[2], reverse=True)
    return [(name, d, float(q)) for name, d, q in rows]


def majority_threshold(total_seats: int) -> int:
    """Aantal zetels voor een meerderheid (76 van de 150), 0 zonder zetels."""
    if total_seats <= 0:
        return 0
    return total_seats // 2 + 1
