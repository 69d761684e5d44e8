"""Flat first-order vocabulary: terms, predicates (literals) and clauses."""

from typing import Iterable, Optional, Set, Tuple


NEGATION = "¬"
DISJUNCTION = " ∨ "
EMPTY_CLAUSE = "□"


class Term:
    def __init__(self, name: str, is_variable: bool = False):
        self.name = name
        self.is_variable = is_variable

    def __eq__(self, other):
        if not isinstance(other, Term):
            return False
        return self.name == other.name and \
            self.is_variable == other.is_variable

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash((self.name, self.is_variable))
        return self.hash

    def __repr__(self):
        return self.name

    @property
    def is_constant(self) -> bool:
        return not self.is_variable

    def copy(self) -> 'Term':
        return Term(self.name, self.is_variable)


class Variable(Term):
    def __init__(self, name: str):
        super().__init__(name, True)


class Constant(Term):
    def __init__(self, name: str):
        super().__init__(name, False)


class Predicate:
    """A possibly negated atom ``Name(t1, ..., tn)``.

    Predicates double as literals: ``negated`` carries the polarity. They are
    value objects, every transformation returns a new instance.
    """

    def __init__(self, name: str, terms: Iterable[Term] = (), negated: bool = False):
        self.name = name
        self.terms = tuple(terms)
        self.negated = negated

    def __eq__(self, other):
        if not isinstance(other, Predicate):
            return False
        return self.name == other.name and \
            self.negated == other.negated and \
            self.terms == other.terms

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash((self.name, self.terms, self.negated))
        return self.hash

    def __repr__(self):
        prefix = NEGATION if self.negated else ""
        if not self.terms:
            return f"{prefix}{self.name}"
        return f"{prefix}{self.name}({', '.join(map(str, self.terms))})"

    @property
    def arity(self) -> int:
        return len(self.terms)

    def negate(self) -> 'Predicate':
        return Predicate(self.name, self.terms, not self.negated)

    def is_complementary(self, other: 'Predicate') -> bool:
        """Same symbol, opposite polarity. Arguments are not compared."""
        return self.name == other.name and self.negated != other.negated

    def variables(self) -> Set[str]:
        return {term.name for term in self.terms if term.is_variable}

    def copy(self) -> 'Predicate':
        return Predicate(self.name, [term.copy() for term in self.terms], self.negated)


class Clause:
    """Disjunction of predicates.

    The id is provenance only and takes no part in equality. Equality and
    hashing ignore predicate order.
    """

    def __init__(self, predicates: Iterable[Predicate] = (), id: Optional[int] = None):
        self.predicates: Tuple[Predicate, ...] = tuple(predicates)
        self.id = id

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return False
        return frozenset(self.predicates) == frozenset(other.predicates)

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash(frozenset(self.predicates))
        return self.hash

    def __repr__(self):
        if not self.predicates:
            return EMPTY_CLAUSE
        return DISJUNCTION.join(map(str, self.predicates))

    def __len__(self):
        return len(self.predicates)

    def __iter__(self):
        return iter(self.predicates)

    @property
    def is_empty(self) -> bool:
        return len(self.predicates) == 0

    def variables(self) -> Set[str]:
        variables = set()
        for predicate in self.predicates:
            variables |= predicate.variables()
        return variables

    def with_id(self, id: Optional[int]) -> 'Clause':
        return Clause(self.predicates, id)

    def copy(self) -> 'Clause':
        return Clause([predicate.copy() for predicate in self.predicates], self.id)
