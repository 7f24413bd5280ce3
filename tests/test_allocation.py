"""Unittests voor de methode D'Hondt en de zetelverdeling."""

from fractions import Fraction

import numpy as np
import pytest
from zetelverdeling.engine.allocation import (
    DuplicatePartyName,
    InvalidInput,
    PartyResult,
    aggregate_votes,
    allocate_seats,
    compute_quotient_table,
    majority_threshold,
)


def _parties(**votes):
    return [PartyResult(name, v) for name, v in votes.items()]


def _reference_dhondt(parties, total_seats):
    """Onafhankelijke referentie : de total_seats hoogste quotiënten.

    Gelijke quotiënten worden gerangschikt op invoervolgorde.
    """
    quotients = []
    for idx, p in enumerate(parties):
        if p.votes == 0:
            continue
        for d in range(1, total_seats + 1):
            quotients.append((-Fraction(p.votes, d), idx, p.name))
    quotients.sort()
    seats = {p.name: 0 for p in parties}
    for _, _, name in quotients[:total_seats]:
        seats[name] += 1
    return seats


class TestAllocateSeats:
    """Tests van de zetelverdeling D'Hondt."""

    def test_small_example(self):
        """Quotiënten 100, 50, 50, 33.3, 25, 25, 25 → 4 / 2 / 1."""
        seats = allocate_seats(_parties(A=100, B=50, C=25), 7)
        assert seats == {"A": 4, "B": 2, "C": 1}

    def test_national_scale(self):
        """500k / 300k / 200k over 150 zetels."""
        seats = allocate_seats(_parties(A=500_000, B=300_000, C=200_000), 150)
        assert seats == {"A": 75, "B": 45, "C": 30}
        assert sum(seats.values()) == 150

    def test_two_parties(self):
        seats = allocate_seats(_parties(A=600, B=400), 10)
        assert seats == {"A": 6, "B": 4}

    def test_single_party_takes_all(self):
        assert allocate_seats(_parties(A=1000), 5) == {"A": 5}

    def test_default_is_150_seats(self):
        seats = allocate_seats(_parties(A=3, B=2, C=1))
        assert sum(seats.values()) == 150

    def test_all_zero_votes(self):
        """Geen stemmen → geen zetels, geen fout."""
        seats = allocate_seats(_parties(A=0, B=0), 150)
        assert seats == {"A": 0, "B": 0}

    def test_zero_vote_party_listed_with_zero(self):
        seats = allocate_seats(_parties(A=100, Z=0, B=100), 3)
        assert seats["Z"] == 0
        assert set(seats) == {"A", "Z", "B"}
        assert sum(seats.values()) == 3

    def test_empty_input(self):
        assert allocate_seats([], 150) == {}

    def test_tie_goes_to_first_listed(self):
        """Exact gelijke quotiënten : de eerst genoemde partij wint."""
        assert allocate_seats(_parties(A=10, B=10), 1) == {"A": 1, "B": 0}

    def test_tie_follows_input_order(self):
        seats = allocate_seats([PartyResult("B", 10), PartyResult("A", 10)], 1)
        assert seats == {"B": 1, "A": 0}

    def test_tie_on_later_round(self):
        """A (600) en B (400) hebben allebei quotiënt 200 in ronde 4."""
        seats = allocate_seats(_parties(A=600, B=400), 4)
        assert seats == {"A": 3, "B": 1}

    def test_exact_comparison_for_large_counts(self):
        """2**53 en 2**53 + 1 zijn gelijk als float, niet als geheel getal."""
        big = 2 ** 53
        seats = allocate_seats([PartyResult("B", big), PartyResult("A", big + 1)], 1)
        assert seats == {"B": 0, "A": 1}

    def test_mapping_input(self):
        seats = allocate_seats([{"name": "A", "votes": 100}, {"name": "B", "votes": 50}], 3)
        assert seats == {"A": 2, "B": 1}

    def test_numpy_integers_accepted(self):
        seats = allocate_seats([PartyResult("A", np.int64(100)), PartyResult("B", np.int64(50))], 3)
        assert seats == {"A": 2, "B": 1}

    def test_input_not_mutated(self):
        results = [{"name": "A", "votes": 100}, {"name": "B", "votes": 50}]
        snapshot = [dict(r) for r in results]
        allocate_seats(results, 10)
        assert results == snapshot

    def test_generator_input(self):
        seats = allocate_seats((PartyResult(n, v) for n, v in [("A", 2), ("B", 1)]), 3)
        assert seats == {"A": 2, "B": 1}


class TestInvalidInput:
    """Foutgevallen : falen vóór de eerste ronde."""

    def test_negative_votes(self):
        with pytest.raises(InvalidInput):
            allocate_seats(_parties(A=100, B=-1), 10)

    @pytest.mark.parametrize("total_seats", [0, -1, 1.5, True, "150", None])
    def test_invalid_total_seats(self, total_seats):
        with pytest.raises(InvalidInput):
            allocate_seats(_parties(A=100), total_seats)

    def test_zero_seats_rejected_even_without_parties(self):
        with pytest.raises(InvalidInput):
            allocate_seats([], 0)

    @pytest.mark.parametrize("votes", [10.0, "10", None, False])
    def test_non_integer_votes(self, votes):
        with pytest.raises(InvalidInput):
            allocate_seats([{"name": "A", "votes": votes}], 1)

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidInput):
            allocate_seats([PartyResult(name, 10)], 1)

    def test_missing_keys(self):
        with pytest.raises(InvalidInput):
            allocate_seats([{"name": "A"}], 1)

    def test_unknown_item_type(self):
        with pytest.raises(InvalidInput):
            allocate_seats([("A", 10)], 1)

    def test_duplicate_name(self):
        with pytest.raises(DuplicatePartyName) as excinfo:
            allocate_seats([PartyResult("A", 10), PartyResult("B", 5), PartyResult("A", 3)], 5)
        assert excinfo.value.name == "A"
        assert isinstance(excinfo.value, InvalidInput)
        assert isinstance(excinfo.value, ValueError)


class TestAllocationProperties:
    """Invarianten op willekeurige (vaste seed) invoer."""

    @staticmethod
    def _random_case(seed):
        rng = np.random.default_rng(seed)
        n_parties = int(rng.integers(1, 15))
        votes = rng.integers(0, 200_000, size=n_parties)
        # Een paar partijen zonder stemmen en een paar exacte gelijke standen
        votes[rng.random(n_parties) < 0.15] = 0
        if n_parties > 2:
            votes[1] = votes[0]
        parties = [PartyResult(f"P{i}", int(v)) for i, v in enumerate(votes)]
        total_seats = int(rng.integers(1, 200))
        return parties, total_seats

    @pytest.mark.parametrize("seed", range(25))
    def test_seat_sum_and_keys(self, seed):
        parties, total_seats = self._random_case(seed)
        seats = allocate_seats(parties, total_seats)

        assert set(seats) == {p.name for p in parties}
        if any(p.votes > 0 for p in parties):
            assert sum(seats.values()) == total_seats
        else:
            assert sum(seats.values()) == 0
        for p in parties:
            if p.votes == 0:
                assert seats[p.name] == 0

    @pytest.mark.parametrize("seed", range(25))
    def test_matches_reference(self, seed):
        parties, total_seats = self._random_case(seed)
        assert allocate_seats(parties, total_seats) == _reference_dhondt(parties, total_seats)

    @pytest.mark.parametrize("seed", range(25))
    def test_monotone_in_own_votes(self, seed):
        parties, total_seats = self._random_case(seed)
        rng = np.random.default_rng(seed + 1000)
        idx = int(rng.integers(0, len(parties)))
        before = allocate_seats(parties, total_seats)

        boosted = list(parties)
        boosted[idx] = PartyResult(parties[idx].name, parties[idx].votes + int(rng.integers(1, 50_000)))
        after = allocate_seats(boosted, total_seats)

        assert after[parties[idx].name] >= before[parties[idx].name]


class TestAggregateVotes:
    """Samenvoegen van dubbele partijregels."""

    def test_sums_duplicates_in_first_seen_order(self):
        merged = aggregate_votes([PartyResult("A", 10), PartyResult("B", 5), PartyResult("A", 7)])
        assert merged == [PartyResult("A", 17), PartyResult("B", 5)]

    def test_merged_input_can_be_allocated(self):
        merged = aggregate_votes([{"name": "A", "votes": 100}, {"name": "A", "votes": 50}])
        assert allocate_seats(merged, 2) == {"A": 2}

    def test_negative_votes_still_rejected(self):
        with pytest.raises(InvalidInput):
            aggregate_votes([PartyResult("A", 10), PartyResult("A", -20)])


class TestQuotientTable:
    """Tests van de quotiëntentabel."""

    def test_table_order(self):
        table = compute_quotient_table(_parties(A=120, B=80), max_divisor=5)
        assert table[0] == ("A", 1, 120.0)
        for i in range(len(table) - 1):
            assert table[i][2] >= table[i + 1][2]

    def test_ties_in_input_order(self):
        table = compute_quotient_table(_parties(A=100, B=50), max_divisor=3)
        assert table[:3] == [("A", 1, 100.0), ("A", 2, 50.0), ("B", 1, 50.0)]

    def test_zero_vote_parties_skipped(self):
        table = compute_quotient_table(_parties(A=10, Z=0), max_divisor=2)
        assert {name for name, _, _ in table} == {"A"}

    def test_top_rows_match_allocation(self):
        parties = _parties(A=100, B=50, C=25)
        table = compute_quotient_table(parties, max_divisor=7)
        winners = [name for name, _, _ in table[:7]]
        assert {n: winners.count(n) for n in "ABC"} == allocate_seats(parties, 7)

    def test_invalid_divisor(self):
        with pytest.raises(InvalidInput):
            compute_quotient_table(_parties(A=10), max_divisor=0)


class TestMajorityThreshold:

    @pytest.mark.parametrize("total, expected", [(150, 76), (151, 76), (1, 1), (2, 2), (0, 0)])
    def test_threshold(self, total, expected):
        assert majority_threshold(total) == expected
