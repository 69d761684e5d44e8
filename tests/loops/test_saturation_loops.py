"""Tests for the saturation loops."""

import unittest
from unittest import mock

from resolvent.clausal import ClausalFormBuilder
from resolvent.core.logic import Clause, Predicate, Constant
from resolvent.loops import BasicLoop, ExhaustiveLoop, Loop, LoopRegistry, get_loop, list_loops, register_loop
from resolvent.proofs import Proof, ProofState, Outcome, ListTraceSink


def make_proof(sentences, query, trace=None):
    builder = ClausalFormBuilder()
    clauses = builder.build_clauses(sentences)
    state = ProofState(clauses)
    negated = state.add(builder.negate_query(query))
    return Proof(state, query=query, negated_query=negated, trace=trace)


PROBLEMS = [
    (["Man(x) ⇒ Mortal(x)", "Man(Socrates)"], "Mortal(Socrates)"),
    (["Man(x) ⇒ Mortal(x)", "Man(Socrates)"], "Mortal(Zeus)"),
    (["Man(Socrates)"], "Mortal(Socrates)"),
    (["P(x) ⇒ Q(x)", "Q(x) ⇒ R(x)", "R(x) ⇒ S(x)", "P(A)", "P(B)"], "S(B)"),
    (["P(x) ∨ Q(x)", "¬P(A)", "Q(x) ⇒ R(x)"], "R(A)"),
    (["Parent(x, y) ∧ Parent(y, z) ⇒ Grandparent(x, z)", "Parent(A, B)", "Parent(B, C)"],
     "Grandparent(A, C)"),
]


class TestBasicLoop(unittest.TestCase):
    """Test the incremental loop on small problems."""

    def test_socrates(self):
        trace = ListTraceSink()
        proof = BasicLoop().run(make_proof(*PROBLEMS[0], trace=trace))
        self.assertEqual(proof.outcome, Outcome.PROVED)
        steps = [(s.left_clause_id, s.right_clause_id, s.resolvent_text) for s in trace.steps]
        self.assertEqual(steps, [
            (1, 2, "Mortal(Socrates)"),
            (1, 3, "¬Man(Socrates)"),
            (2, 5, "□"),
        ])
        self.assertEqual(trace.terminal.kind, "contradiction")
        self.assertEqual(trace.terminal.step_number, 3)
        self.assertEqual(trace.terminal.clause_count, 6)

    def test_saturation(self):
        trace = ListTraceSink()
        proof = BasicLoop().run(make_proof(*PROBLEMS[2], trace=trace))
        self.assertEqual(proof.outcome, Outcome.SATURATED)
        self.assertEqual(trace.steps, [])
        self.assertEqual(trace.terminal.kind, "saturated")
        self.assertEqual(trace.terminal.clause_count, 2)
        self.assertEqual(proof.passes, 1)

    def test_saturation_after_derivations(self):
        proof = BasicLoop().run(make_proof(*PROBLEMS[1]))
        self.assertEqual(proof.outcome, Outcome.SATURATED)
        self.assertEqual([str(s.resolvent) for s in proof.steps], ["Mortal(Socrates)", "¬Man(Zeus)"])
        self.assertEqual(proof.passes, 2)

    def test_step_limit(self):
        trace = ListTraceSink()
        proof = BasicLoop(max_steps=1).run(make_proof(*PROBLEMS[0], trace=trace))
        self.assertEqual(proof.outcome, Outcome.INCONCLUSIVE)
        self.assertEqual(proof.length, 1)
        self.assertEqual(trace.terminal.kind, "inconclusive")

    def test_contradiction_beats_step_limit(self):
        proof = BasicLoop(max_steps=3).run(make_proof(*PROBLEMS[0]))
        self.assertEqual(proof.outcome, Outcome.PROVED)

    def test_invalid_step_limit(self):
        with self.assertRaises(ValueError):
            BasicLoop(max_steps=0)
        loop = BasicLoop(max_steps=5)
        with self.assertRaises(ValueError):
            loop.max_steps = -1
        self.assertEqual(loop.max_steps, 5)

    def test_empty_clause_in_input(self):
        state = ProofState([Clause([Predicate("P", [Constant("A")])], 1), Clause([], 2)])
        proof = BasicLoop().run(Proof(state))
        self.assertEqual(proof.outcome, Outcome.PROVED)
        self.assertEqual(proof.length, 0)

    def test_every_pair_attempted_once(self):
        proof = BasicLoop().run(make_proof(*PROBLEMS[1]))
        n = len(proof.state)
        self.assertEqual(len(proof.state.attempted), n * (n - 1) // 2)

    def test_no_duplicate_clauses(self):
        for sentences, query in PROBLEMS:
            proof = BasicLoop().run(make_proof(sentences, query))
            self.assertEqual(len(set(proof.state.clauses)), len(proof.state.clauses))


class TestLoopEquivalence(unittest.TestCase):
    """Basic and exhaustive scanning give the same search."""

    def test_same_trace(self):
        for sentences, query in PROBLEMS:
            with self.subTest(query=query):
                basic_trace, exhaustive_trace = ListTraceSink(), ListTraceSink()
                basic = BasicLoop().run(make_proof(sentences, query, basic_trace))
                exhaustive = ExhaustiveLoop().run(make_proof(sentences, query, exhaustive_trace))
                self.assertEqual(basic.outcome, exhaustive.outcome)
                self.assertEqual(basic_trace.records, exhaustive_trace.records)
                self.assertEqual(basic.passes, exhaustive.passes)

    def test_expected_outcomes(self):
        expected = [Outcome.PROVED, Outcome.SATURATED, Outcome.SATURATED,
                    Outcome.PROVED, Outcome.PROVED, Outcome.PROVED]
        for (sentences, query), outcome in zip(PROBLEMS, expected):
            with self.subTest(query=query):
                self.assertEqual(BasicLoop().run(make_proof(sentences, query)).outcome, outcome)


class TestLoopRegistry(unittest.TestCase):
    def test_names(self):
        self.assertEqual(list_loops(), ["basic", "exhaustive"])

    def test_get_loop(self):
        loop = get_loop("Exhaustive", max_steps=10)
        self.assertIsInstance(loop, ExhaustiveLoop)
        self.assertIsInstance(loop, Loop)
        self.assertEqual(loop.max_steps, 10)

    def test_unknown_loop(self):
        with self.assertRaises(ValueError):
            get_loop("given-clause")

    def test_private_registry(self):
        registry = LoopRegistry(fast=BasicLoop)
        self.assertIn("FAST", registry)
        self.assertIsInstance(registry.create("fast", max_steps=3), BasicLoop)
        with self.assertRaises(TypeError):
            registry.register("bad", object)

    def test_register_loop(self):
        class EagerLoop(BasicLoop):
            pass

        with mock.patch("resolvent.loops.registry._registry", LoopRegistry(basic=BasicLoop)):
            self.assertIs(register_loop("Eager", EagerLoop), EagerLoop)
            self.assertEqual(list_loops(), ["basic", "eager"])
            self.assertIsInstance(get_loop("eager", max_steps=5), EagerLoop)
        self.assertNotIn("eager", list_loops())


if __name__ == "__main__":
    unittest.main()
