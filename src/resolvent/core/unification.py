"""Unification algorithm for flat first-order predicates.

``unify`` only compares symbols, arities and arguments. It is polarity
agnostic: requiring opposite polarity is the resolution rule's job, so other
callers can use it for plain structural matching.
"""

from typing import Dict, Optional, Union
from dataclasses import dataclass

from .logic import Term, Predicate, Clause


@dataclass
class Substitution:
    """Represents a substitution mapping variable names to terms."""
    mapping: Dict[str, Term]

    def __init__(self, mapping: Optional[Dict[str, Term]] = None):
        self.mapping = dict(mapping) if mapping else {}

    def __contains__(self, name: str) -> bool:
        return name in self.mapping

    def __len__(self) -> int:
        return len(self.mapping)

    def resolve(self, term: Term) -> Term:
        """Follow bindings until reaching a constant or an unbound variable."""
        while term.is_variable and term.name in self.mapping:
            term = self.mapping[term.name]
        return term

    def bind(self, name: str, term: Term) -> 'Substitution':
        """Return a new substitution extended with ``name -> term``."""
        assert not occurs_check(name, term, self), f"{name} occurs in {term}"
        new_mapping = self.mapping.copy()
        new_mapping[name] = term
        return Substitution(new_mapping)

    def apply(self, value: Union[Term, Predicate, Clause]):
        """Apply substitution to a term, predicate or clause."""
        if isinstance(value, Term):
            return self.resolve(value).copy()
        elif isinstance(value, Predicate):
            return Predicate(value.name, [self.apply(term) for term in value.terms], value.negated)
        elif isinstance(value, Clause):
            return Clause([self.apply(predicate) for predicate in value.predicates], value.id)
        raise TypeError(f"Cannot apply a substitution to {value!r}")

    def compose(self, other: 'Substitution') -> 'Substitution':
        """Compose this substitution with another (self first, then other)."""
        new_mapping = {name: other.apply(term) for name, term in self.mapping.items()}

        for name, term in other.mapping.items():
            if name not in new_mapping:
                new_mapping[name] = term

        return Substitution(new_mapping)

    def __str__(self):
        if not self.mapping:
            return "{}"
        items = [f"{name} -> {term}" for name, term in self.mapping.items()]
        return "{" + ", ".join(items) + "}"


def apply_substitution(value: Union[Term, Predicate, Clause], substitution: Substitution):
    """Apply ``substitution`` to a term, predicate or clause."""
    return substitution.apply(value)


def occurs_check(name: str, term: Term, substitution: Optional[Substitution] = None) -> bool:
    """Check if variable ``name`` occurs in term (prevents cyclic bindings)."""
    if substitution is not None:
        term = substitution.resolve(term)
    # Flat terms: the only possible occurrence is the term itself.
    return term.is_variable and term.name == name


def unify_terms(term1: Term, term2: Term,
                substitution: Optional[Substitution] = None) -> Optional[Substitution]:
    """Unify two terms given an existing substitution."""
    if substitution is None:
        substitution = Substitution()

    term1 = substitution.resolve(term1)
    term2 = substitution.resolve(term2)

    if term1 == term2:
        return substitution

    if term1.is_variable:
        if occurs_check(term1.name, term2, substitution):
            return None
        return substitution.bind(term1.name, term2)

    if term2.is_variable:
        if occurs_check(term2.name, term1, substitution):
            return None
        return substitution.bind(term2.name, term1)

    # Two distinct constants
    return None


def unify(predicate1: Predicate, predicate2: Predicate) -> Optional[Substitution]:
    """Most general unifier of two predicates, or None if there is none."""
    if predicate1.name != predicate2.name:
        return None

    if predicate1.arity != predicate2.arity:
        return None

    substitution = Substitution()
    for term1, term2 in zip(predicate1.terms, predicate2.terms):
        substitution = unify_terms(term1, term2, substitution)
        if substitution is None:
            return None

    return substitution
