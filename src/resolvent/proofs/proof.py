"""Proof record: derivation steps, outcome and derivation graph."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import networkx as nx

from resolvent.core.logic import Clause
from resolvent.core.unification import Substitution
from resolvent.rules.base import RuleApplication
from .state import ProofState
from .trace import (
    TraceSink, NullTraceSink, StepRecord,
    ContradictionRecord, SaturationRecord, InconclusiveRecord
)


class Outcome(Enum):
    PROVED = "proved"
    SATURATED = "saturated"
    INCONCLUSIVE = "inconclusive"


@dataclass
class ProofStep:
    """A clause derived from two clauses of the working set."""
    step_number: int
    left: Clause
    right: Clause
    resolvent: Clause
    substitution: Substitution


class Proof:
    """A refutation attempt for one query.

    Holds the working state, the derivation steps in order and, once the
    search is over, its outcome. Steps are mirrored to the trace sink as they
    are added.
    """

    def __init__(self, state: ProofState,
                 query: Optional[str] = None,
                 negated_query: Optional[Clause] = None,
                 trace: Optional[TraceSink] = None):
        self.state = state
        self.query = query
        self.negated_query = negated_query
        self.trace = trace or NullTraceSink()
        self.steps: List[ProofStep] = []
        self.outcome: Optional[Outcome] = None
        self.passes = 0

    @property
    def length(self) -> int:
        """Number of derived clauses."""
        return len(self.steps)

    @property
    def is_complete(self) -> bool:
        """Check if the empty clause was derived."""
        return self.outcome is Outcome.PROVED

    @property
    def is_saturated(self) -> bool:
        return self.outcome is Outcome.SATURATED

    @property
    def is_inconclusive(self) -> bool:
        return self.outcome is Outcome.INCONCLUSIVE

    @property
    def empty_clause(self) -> Optional[Clause]:
        if self.steps and self.steps[-1].resolvent.is_empty:
            return self.steps[-1].resolvent
        return None

    def add_step(self, application: RuleApplication, resolvent: Clause) -> ProofStep:
        """Record ``resolvent`` (already numbered) as derived by ``application``."""
        left, right = application.parents
        step = ProofStep(len(self.steps) + 1, left, right, resolvent, application.substitution)
        self.steps.append(step)
        self.trace.record(StepRecord(
            step_number=step.step_number,
            left_clause_id=left.id,
            right_clause_id=right.id,
            left_clause_text=str(left),
            right_clause_text=str(right),
            resolvent_text=str(resolvent),
        ))
        return step

    def finish(self, outcome: Outcome) -> 'Proof':
        """Set the outcome and emit the terminal trace record."""
        assert self.outcome is None, "proof already finished"
        self.outcome = outcome
        record_class = {
            Outcome.PROVED: ContradictionRecord,
            Outcome.SATURATED: SaturationRecord,
            Outcome.INCONCLUSIVE: InconclusiveRecord,
        }[outcome]
        self.trace.record(record_class(step_number=len(self.steps), clause_count=len(self.state)))
        return self

    def to_graph(self) -> nx.DiGraph:
        """Derivation graph with an edge from each parent to its resolvent."""
        graph = nx.DiGraph()
        query_id = self.negated_query.id if self.negated_query is not None else None
        derived = {step.resolvent.id for step in self.steps}
        for clause in self.state.clauses:
            if clause.id in derived:
                origin = 'derived'
            elif clause.id == query_id:
                origin = 'query'
            else:
                origin = 'axiom'
            graph.add_node(clause.id, text=str(clause), origin=origin)
        for step in self.steps:
            graph.add_edge(step.left.id, step.resolvent.id, step=step.step_number)
            graph.add_edge(step.right.id, step.resolvent.id, step=step.step_number)
        return graph

    def refutation(self) -> List[ProofStep]:
        """The steps the empty clause actually depends on, in derivation order."""
        empty = self.empty_clause
        if empty is None:
            return []
        needed = nx.ancestors(self.to_graph(), empty.id) | {empty.id}
        return [step for step in self.steps if step.resolvent.id in needed]

    def __repr__(self) -> str:
        outcome = self.outcome.value if self.outcome else None
        return f"Proof(steps={len(self.steps)}, outcome={outcome})"
