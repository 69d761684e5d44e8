"""
resolvent: refutation-based first-order reasoning.

resolvent decides whether a query follows from a set of sentences by
negating the query, converting everything to clausal form and saturating the
clause set with binary resolution. It includes:

- A flat first-order vocabulary (constants, variables, predicates, clauses)
- Unification with occurs-check
- Clausal-form conversion with variable standardization
- Pass-based saturation loops
- Structured search traces and derivation graphs
- A plain sentence file format

Basic usage:
    >>> from resolvent import ResolutionEngine
    >>> engine = ResolutionEngine.from_sentences([
    ...     "Man(x) ⇒ Mortal(x)",
    ...     "Man(Socrates)",
    ... ])
    >>> engine.resolve("Mortal(Socrates)")
    True
"""

import logging
from typing import Iterable, Optional

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core logic structures
from resolvent.core import (
    Term, Variable, Constant, Predicate, Clause,
    ResolventError, MalformedSentence, SearchLimitExceeded,
    save_clauses, load_clauses
)

# Unification
from resolvent.core.unification import (
    Substitution, unify, unify_terms, apply_substitution, occurs_check
)

# Clausal form
from resolvent.clausal import ClausalFormBuilder, build_clauses

# Inference rules
from resolvent.rules import Rule, RuleApplication, ResolutionRule, resolve_clauses

# Proofs and traces
from resolvent.proofs import (
    Proof, ProofStep, ProofState, Outcome,
    TraceSink, ListTraceSink, CallbackTraceSink, JSONTraceSink, NullTraceSink,
    StepRecord, ContradictionRecord, SaturationRecord, InconclusiveRecord,
    save_proof, load_proof
)

# Saturation loops
from resolvent.loops import Loop, BasicLoop, ExhaustiveLoop, get_loop

# Engine
from resolvent.engine import ResolutionEngine, EngineState

# File formats
from resolvent.fileformats import get_format_handler

# Configuration
from resolvent.utils.config import get_config


def prove(sentences: Iterable[str], query: str,
          loop: Optional[str] = None,
          max_steps: Optional[int] = None,
          trace: Optional[TraceSink] = None) -> Proof:
    """
    Attempt to prove ``query`` from ``sentences``.

    Args:
        sentences: Knowledge base in sentence notation
        query: The query to refute
        loop: Name of the loop to use (default from configuration)
        max_steps: Derived-clause limit (default from configuration)
        trace: Optional sink for the step records

    Returns:
        Proof object containing the outcome and the derivation
    """
    config = get_config()
    engine = ResolutionEngine.from_sentences(
        sentences,
        loop=loop or config.get("prover.loop", "basic"),
        max_steps=max_steps if max_steps is not None else config.get("prover.max_steps"),
        trace=trace,
    )
    return engine.prove(query)


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Term", "Variable", "Constant", "Predicate", "Clause",
    "ResolventError", "MalformedSentence", "SearchLimitExceeded",
    "save_clauses", "load_clauses",

    # Unification
    "Substitution", "unify", "unify_terms", "apply_substitution", "occurs_check",

    # Clausal form
    "ClausalFormBuilder", "build_clauses",

    # Rules
    "Rule", "RuleApplication", "ResolutionRule", "resolve_clauses",

    # Proofs
    "Proof", "ProofStep", "ProofState", "Outcome",
    "TraceSink", "ListTraceSink", "CallbackTraceSink", "JSONTraceSink", "NullTraceSink",
    "StepRecord", "ContradictionRecord", "SaturationRecord", "InconclusiveRecord",
    "save_proof", "load_proof",

    # Loops
    "Loop", "BasicLoop", "ExhaustiveLoop", "get_loop",

    # Engine
    "ResolutionEngine", "EngineState",

    # File formats
    "get_format_handler",

    # Configuration
    "get_config",

    # High-level API
    "prove"
]
