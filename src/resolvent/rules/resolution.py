"""Binary resolution inference rule."""

from typing import List, Optional

from .base import Rule, RuleApplication
from resolvent.core.logic import Clause, Predicate
from resolvent.core.unification import unify


class ResolutionRule(Rule):
    """Binary resolution on the first complementary pair that unifies.

    Candidates are scanned in stored predicate order (left clause outer,
    right clause inner). Only the first success is used, so a clause pair
    yields at most one resolvent.
    """

    @property
    def name(self) -> str:
        return "resolution"

    def apply(self, left: Clause, right: Clause) -> Optional[RuleApplication]:
        """
        Resolve two clauses.

        Args:
            left: First parent clause
            right: Second parent clause

        Returns:
            RuleApplication holding the resolvent (without id), or None when
            no complementary pair unifies
        """
        for i, literal1 in enumerate(left.predicates):
            for j, literal2 in enumerate(right.predicates):
                # unify() ignores polarity, the complementary check lives here
                if not literal1.is_complementary(literal2):
                    continue

                mgu = unify(literal1, literal2)
                if mgu is None:
                    continue

                remaining = [p for k, p in enumerate(left.predicates) if k != i] + \
                    [p for k, p in enumerate(right.predicates) if k != j]
                resolvent = Clause(self._deduplicate([mgu.apply(p) for p in remaining]))

                return RuleApplication(
                    rule_name=self.name,
                    parents=(left, right),
                    resolvent=resolvent,
                    substitution=mgu,
                    metadata={'resolved': (i, j)}
                )

        return None

    def _deduplicate(self, predicates: List[Predicate]) -> List[Predicate]:
        unique = []
        seen = set()
        for predicate in predicates:
            if predicate not in seen:
                seen.add(predicate)
                unique.append(predicate)
        return unique


def resolve_clauses(left: Clause, right: Clause) -> Optional[Clause]:
    """Resolvent of two clauses, or None if they do not interact."""
    application = ResolutionRule().apply(left, right)
    return application.resolvent if application else None
