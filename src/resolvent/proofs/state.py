"""Working clause set of a single proof search."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from resolvent.core.logic import Clause


@dataclass
class ProofState:
    """Clauses of one search, the pairs already tried and the pass frontier.

    ``frontier`` is the index of the first clause that has not been paired
    with the clauses before it yet. New clauses get the next free id.
    """
    clauses: List[Clause]
    attempted: Set[Tuple[int, int]] = field(default_factory=set)
    frontier: int = 0

    def __post_init__(self):
        self.clauses = list(self.clauses)
        self._by_id: Dict[int, Clause] = {}
        for clause in self.clauses:
            assert clause.id is not None, f"clause {clause} has no id"
            assert clause.id not in self._by_id, f"duplicate clause id {clause.id}"
            self._by_id[clause.id] = clause
        self._seen: Set[Clause] = set(self.clauses)
        self.next_id = max(self._by_id, default=0) + 1

    def __len__(self) -> int:
        return len(self.clauses)

    def __contains__(self, clause: Clause) -> bool:
        """Structural membership, ignoring ids and predicate order."""
        return clause in self._seen

    def get(self, clause_id: int) -> Clause:
        return self._by_id[clause_id]

    def add(self, clause: Clause) -> Optional[Clause]:
        """Number ``clause`` and add it, unless an equal clause is present.

        Returns the numbered clause, or None for a duplicate.
        """
        if clause in self._seen:
            return None
        numbered = clause.with_id(self.next_id)
        self.next_id += 1
        self.clauses.append(numbered)
        self._by_id[numbered.id] = numbered
        self._seen.add(numbered)
        return numbered

    @staticmethod
    def pair_key(left_id: int, right_id: int) -> Tuple[int, int]:
        return (min(left_id, right_id), max(left_id, right_id))

    def is_attempted(self, left: Clause, right: Clause) -> bool:
        return self.pair_key(left.id, right.id) in self.attempted

    def mark_attempted(self, left: Clause, right: Clause):
        self.attempted.add(self.pair_key(left.id, right.id))

    @property
    def contains_empty_clause(self) -> bool:
        return any(clause.is_empty for clause in self.clauses)
