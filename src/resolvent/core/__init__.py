"""Core reasoning data structures."""

from .logic import (
    Term, Variable, Constant, Predicate, Clause
)
from .exceptions import (
    ResolventError, MalformedSentence, SearchLimitExceeded
)
from .serialization import (
    CoreJSONEncoder, decode_core_object,
    clauses_to_json, clauses_from_json,
    save_clauses, load_clauses
)
from .unification import (
    Substitution, unify, unify_terms, apply_substitution,
    occurs_check
)

__all__ = [
    # Logic
    'Term', 'Variable', 'Constant', 'Predicate', 'Clause',
    # Errors
    'ResolventError', 'MalformedSentence', 'SearchLimitExceeded',
    # Serialization
    'CoreJSONEncoder', 'decode_core_object',
    'clauses_to_json', 'clauses_from_json',
    'save_clauses', 'load_clauses',
    # Unification
    'Substitution', 'unify', 'unify_terms', 'apply_substitution',
    'occurs_check'
]
