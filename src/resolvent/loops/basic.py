"""Incremental saturation loop.

Each pass only resolves pairs that involve at least one clause added by the
previous pass (the whole initial set counts as new for the first pass).
Older pairs were attempted already, so skipping them changes nothing about
the result or the order in which resolvents are found.
"""

from typing import Iterator, Tuple

from resolvent.core.logic import Clause
from resolvent.proofs.state import ProofState
from .base import Loop


class BasicLoop(Loop):
    """New-against-all resolution, pairs in ascending id order."""

    def candidate_pairs(self, state: ProofState) -> Iterator[Tuple[Clause, Clause]]:
        clauses = list(state.clauses)
        for i, left in enumerate(clauses):
            for right in clauses[max(i + 1, state.frontier):]:
                yield left, right
