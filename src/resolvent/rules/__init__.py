"""Inference rules for resolution proving."""

from .base import Rule, RuleApplication
from .resolution import ResolutionRule, resolve_clauses

__all__ = ['Rule', 'RuleApplication', 'ResolutionRule', 'resolve_clauses']
