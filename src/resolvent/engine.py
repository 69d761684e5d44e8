"""Resolution refutation engine.

The engine owns a standardized clause base. Each query runs on a fresh
working copy of it: the negated query is appended, then a saturation loop
resolves clause pairs until the empty clause shows up (``PROVED``), a pass
adds nothing (``SATURATED``) or the optional step limit is hit
(``INCONCLUSIVE``).
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Union

from resolvent.clausal import ClausalFormBuilder, VariableRenamer
from resolvent.core.exceptions import SearchLimitExceeded
from resolvent.core.logic import Clause
from resolvent.loops import Loop, get_loop
from resolvent.proofs import Proof, Outcome, ProofState, TraceSink


logger = logging.getLogger(__name__)


class EngineState(Enum):
    INITIALIZED = "initialized"
    SEARCHING = "searching"
    PROVED = "proved"
    SATURATED = "saturated"
    INCONCLUSIVE = "inconclusive"


_FINAL_STATES = {
    Outcome.PROVED: EngineState.PROVED,
    Outcome.SATURATED: EngineState.SATURATED,
    Outcome.INCONCLUSIVE: EngineState.INCONCLUSIVE,
}


class ResolutionEngine:
    """Decides entailment of queries from a fixed clause base."""

    def __init__(self, clauses: Iterable[Clause],
                 loop: Union[str, Loop] = "basic",
                 max_steps: Optional[int] = None,
                 trace: Optional[TraceSink] = None,
                 builder: Optional[ClausalFormBuilder] = None):
        """
        Initialize the engine.

        Args:
            clauses: Standardized clause base; missing ids are assigned in order
            loop: Loop name from the registry, or a loop instance
            max_steps: Derived-clause limit per query (None for no limit)
            trace: Sink receiving the step records of every query
            builder: Builder used to negate queries; must not reuse the
                     base's variable names
        """
        self.clauses = self._number(clauses)
        if isinstance(loop, Loop):
            if max_steps is not None:
                loop.max_steps = max_steps
            self.loop = loop
        else:
            self.loop = get_loop(loop, max_steps=max_steps)
        self.trace = trace
        if builder is None:
            builder = ClausalFormBuilder(VariableRenamer())
            for clause in self.clauses:
                builder.renamer.reserve(clause.variables())
                builder.reserve_symbols(str(clause))
        self.builder = builder
        self.state = EngineState.INITIALIZED
        logger.debug("Engine initialized with %d clauses", len(self.clauses))

    @classmethod
    def from_sentences(cls, sentences: Iterable[str], **kwargs) -> 'ResolutionEngine':
        """Build the clause base from sentence strings."""
        builder = kwargs.pop('builder', None) or ClausalFormBuilder()
        clauses = builder.build_clauses(sentences)
        return cls(clauses, builder=builder, **kwargs)

    def prove(self, query: str) -> Proof:
        """
        Attempt a refutation of ``query``.

        Args:
            query: A literal or a conjunction of literals

        Returns:
            The finished proof; its outcome tells whether the query is proved

        Raises:
            MalformedSentence: If the query cannot be parsed
        """
        negated = self.builder.negate_query(query)
        state = ProofState(self.clauses)
        negated = state.add(negated) or negated.with_id(self._existing_id(state, negated))

        proof = Proof(state, query=query, negated_query=negated, trace=self.trace)
        self.state = EngineState.SEARCHING
        logger.debug("Searching %r: negated query %s is clause %d", query, negated, negated.id)

        self.loop.run(proof)

        self.state = _FINAL_STATES[proof.outcome]
        logger.info("Query %r: %s after %d steps in %d passes",
                    query, proof.outcome.value, proof.length, proof.passes)
        return proof

    def resolve(self, query: str) -> bool:
        """
        Decide whether the clause base entails ``query``.

        Returns:
            True if ``¬query`` was refuted, False if the clause set saturated

        Raises:
            MalformedSentence: If the query cannot be parsed
            SearchLimitExceeded: If the step limit ran out first
        """
        proof = self.prove(query)
        if proof.is_inconclusive:
            raise SearchLimitExceeded(self.loop.max_steps, proof)
        return proof.is_complete

    @staticmethod
    def _number(clauses: Iterable[Clause]) -> List[Clause]:
        numbered = []
        next_id = 1
        for clause in clauses:
            if clause.id is None:
                clause = clause.with_id(next_id)
            next_id = max(next_id, clause.id + 1)
            numbered.append(clause)
        return numbered

    @staticmethod
    def _existing_id(state: ProofState, clause: Clause) -> int:
        # The negated query is already part of the base.
        for existing in state.clauses:
            if existing == clause:
                return existing.id
        raise AssertionError(f"{clause} not found in working set")
