"""Tests for the binary resolution rule."""

import unittest

from resolvent.core.logic import Variable, Constant, Predicate, Clause
from resolvent.rules import ResolutionRule, resolve_clauses


def P(name, *terms, negated=False):
    return Predicate(name, list(terms), negated)


class TestResolutionRule(unittest.TestCase):
    """Test cases for ResolutionRule."""

    def setUp(self):
        self.rule = ResolutionRule()
        self.x = Variable("x")
        self.a = Constant("A")
        self.b = Constant("B")
        self.c = Constant("C")
        self.socrates = Constant("Socrates")

    def test_modus_ponens(self):
        rule_clause = Clause([P("Man", self.x, negated=True), P("Mortal", self.x)], 1)
        fact = Clause([P("Man", self.socrates)], 2)

        application = self.rule.apply(rule_clause, fact)
        self.assertIsNotNone(application)
        self.assertEqual(str(application.resolvent), "Mortal(Socrates)")
        self.assertIsNone(application.resolvent.id)
        self.assertEqual(application.parents, (rule_clause, fact))
        self.assertEqual(application.substitution.mapping, {"x": self.socrates})
        self.assertEqual(application.rule_name, "resolution")

    def test_empty_resolvent(self):
        resolvent = resolve_clauses(Clause([P("P", self.a)]), Clause([P("P", self.x, negated=True)]))
        self.assertTrue(resolvent.is_empty)

    def test_same_polarity_does_not_resolve(self):
        """Unifiable literals of the same sign are not a resolution pair."""
        self.assertIsNone(self.rule.apply(Clause([P("P", self.x)]), Clause([P("P", self.a)])))

    def test_no_complementary_pair(self):
        self.assertIsNone(resolve_clauses(Clause([P("P", self.a)]), Clause([P("Q", self.a, negated=True)])))

    def test_non_unifiable_complements(self):
        self.assertIsNone(resolve_clauses(Clause([P("P", self.a)]), Clause([P("P", self.b, negated=True)])))

    def test_resolvent_size(self):
        """|R| = |C1| + |C2| - 2 when nothing collapses."""
        left = Clause([P("P", self.x), P("Q", self.x), P("R", self.a)])
        right = Clause([P("P", self.b, negated=True), P("S", self.b)])
        resolvent = resolve_clauses(left, right)
        self.assertEqual(str(resolvent), "Q(B) ∨ R(A) ∨ S(B)")
        self.assertEqual(len(resolvent), len(left) + len(right) - 2)

    def test_duplicates_collapse(self):
        """Equal literals after substitution appear once, first one kept."""
        left = Clause([P("P", self.x), P("Q", self.a)])
        right = Clause([P("P", self.b, negated=True), P("Q", self.a)])
        self.assertEqual(str(resolve_clauses(left, right)), "Q(A)")

        left = Clause([P("P", self.x), P("Q", self.x), P("R", self.a)])
        right = Clause([P("P", self.a, negated=True), P("Q", self.a)])
        self.assertEqual(str(resolve_clauses(left, right)), "Q(A) ∨ R(A)")

    def test_first_pair_wins(self):
        """Only the first unifiable complementary pair is resolved."""
        left = Clause([P("P", self.a), P("Q", self.a)])
        right = Clause([P("P", self.a, negated=True), P("Q", self.a, negated=True)])
        application = self.rule.apply(left, right)
        self.assertEqual(application.metadata["resolved"], (0, 0))
        self.assertEqual(str(application.resolvent), "Q(A) ∨ ¬Q(A)")

    def test_failed_candidate_is_skipped(self):
        left = Clause([P("P", self.a), P("Q", self.b)])
        right = Clause([P("P", self.c, negated=True), P("Q", self.x, negated=True)])
        application = self.rule.apply(left, right)
        self.assertEqual(application.metadata["resolved"], (1, 1))
        self.assertEqual(str(application.resolvent), "P(A) ∨ ¬P(C)")

    def test_left_literals_come_first(self):
        left = Clause([P("A1"), P("P", self.x, negated=True)])
        right = Clause([P("B1"), P("P", self.a)])
        self.assertEqual(str(resolve_clauses(left, right)), "A1 ∨ B1")
        self.assertEqual(str(resolve_clauses(right, left)), "B1 ∨ A1")


if __name__ == "__main__":
    unittest.main()
