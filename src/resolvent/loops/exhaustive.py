"""All-against-all saturation loop."""

from typing import Iterator, Tuple

from resolvent.core.logic import Clause
from resolvent.proofs.state import ProofState
from .base import Loop


class ExhaustiveLoop(Loop):
    """Rescans every pair of the working set on each pass.

    Already attempted pairs are skipped by the base loop, so the outcome and
    the derivation order match ``BasicLoop``; only the scanning cost differs.
    """

    def candidate_pairs(self, state: ProofState) -> Iterator[Tuple[Clause, Clause]]:
        clauses = list(state.clauses)
        for i, left in enumerate(clauses):
            for right in clauses[i + 1:]:
                yield left, right
