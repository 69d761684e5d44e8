"""Base class for saturation loops."""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from resolvent.core.logic import Clause
from resolvent.proofs import Proof, Outcome
from resolvent.proofs.state import ProofState
from resolvent.rules import Rule, ResolutionRule


logger = logging.getLogger(__name__)


class Loop(ABC):
    """Pass-based saturation.

    A pass attempts every candidate pair once. Resolvents found during a pass
    join the working set right away, which makes them count for duplicate
    detection, but they are only paired from the next pass on. A pass that
    adds nothing means the set is saturated.
    """

    def __init__(self, rule: Optional[Rule] = None, max_steps: Optional[int] = None):
        """
        Initialize the loop.

        Args:
            rule: Inference rule applied to clause pairs (binary resolution by default)
            max_steps: Stop with an inconclusive outcome after this many derived clauses
        """
        self.rule = rule or ResolutionRule()
        self.max_steps = max_steps

    @property
    def max_steps(self) -> Optional[int]:
        return self._max_steps

    @max_steps.setter
    def max_steps(self, value: Optional[int]):
        if value is not None and value < 1:
            raise ValueError(f"max_steps must be positive, got {value}")
        self._max_steps = value

    @abstractmethod
    def candidate_pairs(self, state: ProofState) -> Iterator[Tuple[Clause, Clause]]:
        """
        Clause pairs for the coming pass.

        Pairs must come from a snapshot of ``state.clauses`` taken before the
        pass, with the left clause first in the working order.
        """
        pass

    def step(self, proof: Proof) -> Optional[Outcome]:
        """
        Execute one pass.

        Args:
            proof: Proof whose state is extended in place

        Returns:
            The outcome if the pass decided the search, None otherwise
        """
        state = proof.state
        pass_size = len(state)
        attempted = 0
        added = 0

        for left, right in self.candidate_pairs(state):
            if state.is_attempted(left, right):
                continue
            state.mark_attempted(left, right)
            attempted += 1

            application = self.rule.apply(left, right)
            if application is None:
                continue

            resolvent = state.add(application.resolvent)
            if resolvent is None:
                continue

            added += 1
            proof.add_step(application, resolvent)
            if self.is_contradiction(resolvent):
                logger.debug("Contradiction from clauses %d and %d", left.id, right.id)
                return Outcome.PROVED
            if self.max_steps is not None and proof.length >= self.max_steps:
                logger.debug("Step limit %d reached", self.max_steps)
                return Outcome.INCONCLUSIVE

        state.frontier = pass_size
        proof.passes += 1
        logger.debug("Pass %d: %d pairs attempted, %d clauses added, %d clauses in total",
                     proof.passes, attempted, added, len(state))
        return None if added else Outcome.SATURATED

    def run(self, proof: Proof) -> Proof:
        """Run passes until the search is decided and finish the proof."""
        if proof.state.contains_empty_clause:
            return proof.finish(Outcome.PROVED)

        outcome = None
        while outcome is None:
            outcome = self.step(proof)
        return proof.finish(outcome)

    def is_contradiction(self, clause: Clause) -> bool:
        """Check if a clause is a contradiction (empty clause)."""
        return clause.is_empty
