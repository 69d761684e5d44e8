"""Clausal-form conversion of sentences."""

from .builder import ClausalFormBuilder, VariableRenamer, build_clauses
from .literals import parse_literal, parse_term, normalize

__all__ = [
    'ClausalFormBuilder', 'VariableRenamer', 'build_clauses',
    'parse_literal', 'parse_term', 'normalize'
]
