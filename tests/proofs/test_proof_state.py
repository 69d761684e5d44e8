"""Tests for ProofState."""

import pytest

from resolvent.core.logic import Constant, Predicate, Clause, Variable
from resolvent.proofs import ProofState


def make_clauses():
    a = Constant("A")
    return [
        Clause([Predicate("P", [a]), Predicate("Q", [a])], 1),
        Clause([Predicate("P", [a], True)], 2),
    ]


class TestProofState:
    def test_creation(self):
        state = ProofState(make_clauses())
        assert len(state) == 2
        assert state.frontier == 0
        assert state.attempted == set()
        assert state.next_id == 3
        assert state.get(2) is state.clauses[1]

    def test_does_not_share_the_input_list(self):
        clauses = make_clauses()
        state = ProofState(clauses)
        state.add(Clause([Predicate("R")]))
        assert len(clauses) == 2

    def test_add_numbers_new_clauses(self):
        state = ProofState(make_clauses())
        added = state.add(Clause([Predicate("Q", [Constant("A")])]))
        assert added.id == 3
        assert state.clauses[-1] is added
        assert state.get(3) is added

    def test_add_rejects_duplicates(self):
        """Equality ignores predicate order and ids."""
        a = Constant("A")
        state = ProofState(make_clauses())
        assert state.add(Clause([Predicate("Q", [a]), Predicate("P", [a])], 99)) is None
        assert len(state) == 2
        assert state.next_id == 3

    def test_contains(self):
        state = ProofState(make_clauses())
        assert Clause([Predicate("P", [Constant("A")], True)]) in state
        assert Clause([Predicate("P", [Variable("x")], True)]) not in state

    def test_attempted_pairs_are_unordered(self):
        state = ProofState(make_clauses())
        left, right = state.clauses
        assert not state.is_attempted(left, right)
        state.mark_attempted(right, left)
        assert state.is_attempted(left, right)
        assert ProofState.pair_key(5, 2) == (2, 5)

    def test_empty_clause(self):
        state = ProofState(make_clauses())
        assert not state.contains_empty_clause
        state.add(Clause())
        assert state.contains_empty_clause

    def test_clauses_need_unique_ids(self):
        with pytest.raises(AssertionError):
            ProofState([Clause([Predicate("P")])])
        with pytest.raises(AssertionError):
            ProofState([Clause([Predicate("P")], 1), Clause([Predicate("Q")], 1)])
