"""Conversion of sentences into standardized clauses.

Each sentence is converted on its own:

- ``A ⇒ B`` becomes ``¬A ∨ B``. A conjunctive consequent gives one clause per
  conjunct and a disjunctive antecedent one clause per disjunct.
- Leading ``∀`` markers are dropped, the variables stay implicitly universal.
  A top-level ``∃`` variable is replaced by a fresh Skolem constant whose
  name does not occur in the input. Inside an antecedent the roles swap:
  ``∃`` is dropped and ``∀`` is Skolemized.
- ``A ∧ B ∧ ...`` gives one clause per conjunct.
- ``A ∨ B ∨ ...`` gives a single clause.
- Anything else is a one-literal clause.

After conversion every clause gets its variables renamed apart so that no two
clauses share a variable name.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from resolvent.core.exceptions import MalformedSentence
from resolvent.core.logic import Clause, Constant, Predicate, Term, Variable
from resolvent.core.unification import Substitution
from .literals import (
    IMPLIES, AND, OR, FORALL, EXISTS, QUANTIFIER,
    normalize, parse_literal, split_top_level, strip_outer_parens
)


logger = logging.getLogger(__name__)

SYMBOL = re.compile(r"[A-Za-z0-9_]+")


class VariableRenamer:
    """Hands out fresh variable names ``v1``, ``v2``, ... ."""

    def __init__(self, prefix: str = "v", reserved: Iterable[str] = ()):
        self.prefix = prefix
        self.counter = 0
        self.reserved = set(reserved)

    def reserve(self, names: Iterable[str]):
        """Never hand out any of ``names``."""
        self.reserved |= set(names)

    def fresh(self) -> str:
        while True:
            self.counter += 1
            name = f"{self.prefix}{self.counter}"
            if name not in self.reserved:
                return name

    def standardize(self, clause: Clause) -> Clause:
        """Rename every variable of ``clause`` to a fresh name.

        One mapping per clause: repeated occurrences of a name stay linked.
        The mapping is applied in a single step, so a source name that
        happens to equal a fresh name is not renamed twice.
        """
        mapping: Dict[str, Term] = {}
        for predicate in clause.predicates:
            for term in predicate.terms:
                if term.is_variable and term.name not in mapping:
                    mapping[term.name] = Variable(self.fresh())
        predicates = [
            Predicate(
                predicate.name,
                [mapping[term.name] if term.is_variable else term for term in predicate.terms],
                predicate.negated
            )
            for predicate in clause.predicates
        ]
        return Clause(predicates, clause.id)


class ClausalFormBuilder:
    """Turns sentence strings into clauses for the resolution engine."""

    def __init__(self, renamer: Optional[VariableRenamer] = None):
        self.renamer = renamer or VariableRenamer()
        self.skolem_count = 0
        # Names written in the input; Skolem constants skip them.
        self.symbols: Set[str] = set()

    def build_clauses(self, sentences: Iterable[str]) -> List[Clause]:
        """Convert and standardize ``sentences``; clause ids run from 1."""
        sentences = list(sentences)
        for sentence in sentences:
            self.reserve_symbols(normalize(sentence))

        clauses = []
        for sentence in sentences:
            clauses.extend(self.sentence_to_clauses(sentence))

        standardized = [
            self.renamer.standardize(clause).with_id(i)
            for i, clause in enumerate(clauses, start=1)
        ]
        logger.debug("Built %d clauses", len(standardized))
        return standardized

    def sentence_to_clauses(self, sentence: str) -> List[Clause]:
        """Convert one sentence without renaming its variables."""
        text = normalize(sentence)
        self.reserve_symbols(text)
        skolems: Dict[str, Term] = {}
        literal_sets = self._convert(text, sentence, skolems, universal=False)
        substitution = Substitution(skolems)
        return [substitution.apply(Clause(predicates)) for predicates in literal_sets]

    def negate_query(self, query: str) -> Clause:
        """Negation of ``query`` as one standardized clause.

        The query is a literal or a conjunction of literals. Free and
        existentially quantified variables become universal once negated;
        a universally quantified one becomes a Skolem constant.
        """
        text = normalize(query)
        self.reserve_symbols(text)
        skolems: Dict[str, Term] = {}
        text, _ = self._strip_quantifiers(text, query, skolems, False, skolem_marker=FORALL)

        if len(split_top_level(text, IMPLIES)) > 1 or len(split_top_level(text, OR)) > 1:
            raise MalformedSentence(query, "a query must be a literal or a conjunction of literals")

        predicates = [
            parse_literal(conjunct, negated=True, sentence=query)
            for conjunct in split_top_level(text, AND)
        ]
        clause = Substitution(skolems).apply(Clause(predicates))
        return self.renamer.standardize(clause)

    def reserve_symbols(self, text: str):
        """Keep Skolem constants clear of every name appearing in ``text``."""
        self.symbols.update(SYMBOL.findall(text))

    def skolem_constant(self) -> Constant:
        while True:
            self.skolem_count += 1
            name = f"Sk{self.skolem_count}"
            if name not in self.symbols:
                self.symbols.add(name)
                return Constant(name)

    def _convert(self, text: str, sentence: str, skolems: Dict[str, Term],
                 universal: bool) -> List[List[Predicate]]:
        text, universal = self._strip_quantifiers(text, sentence, skolems, universal)
        if not text:
            raise MalformedSentence(sentence, "empty formula")

        parts = split_top_level(text, IMPLIES)
        if len(parts) > 2:
            raise MalformedSentence(sentence, "chained implications need parentheses")
        if len(parts) == 2:
            return self._implication(parts[0], parts[1], sentence, skolems, universal)

        conjuncts = split_top_level(text, AND)
        if len(conjuncts) > 1:
            clauses = []
            for conjunct in conjuncts:
                clauses.extend(self._convert(conjunct, sentence, skolems, universal))
            return clauses

        return [self._disjunction(text, sentence, skolems, universal)]

    def _implication(self, antecedent: str, consequent: str, sentence: str,
                     skolems: Dict[str, Term], universal: bool) -> List[List[Predicate]]:
        # (∃x A) ⇒ B is ∀x (A ⇒ B) and (∀x A) ⇒ B is ∃x (A ⇒ B).
        antecedent, _ = self._strip_quantifiers(antecedent, sentence, skolems, universal,
                                                skolem_marker=FORALL)
        consequent, universal = self._strip_quantifiers(consequent, sentence, skolems, universal)
        for side in (antecedent, consequent):
            if not side:
                raise MalformedSentence(sentence, "implication with an empty side")
            if len(split_top_level(side, IMPLIES)) > 1:
                raise MalformedSentence(sentence, "nested implication")

        premises = []
        for alternative in split_top_level(antecedent, OR):
            conjuncts = split_top_level(strip_outer_parens(alternative), AND)
            premises.append([
                parse_literal(conjunct, negated=True, sentence=sentence)
                for conjunct in conjuncts
            ])

        conclusions = [
            self._disjunction(conjunct, sentence, skolems, universal)
            for conjunct in split_top_level(consequent, AND)
        ]

        return [premise + conclusion for premise in premises for conclusion in conclusions]

    def _disjunction(self, text: str, sentence: str, skolems: Dict[str, Term],
                     universal: bool) -> List[Predicate]:
        text, universal = self._strip_quantifiers(text, sentence, skolems, universal)
        predicates = []
        for disjunct in split_top_level(text, OR):
            disjunct, _ = self._strip_quantifiers(disjunct, sentence, skolems, universal)
            if len(split_top_level(disjunct, AND)) > 1:
                raise MalformedSentence(sentence, "conjunction nested inside a disjunction")
            predicates.append(parse_literal(disjunct, sentence=sentence))
        return predicates

    def _strip_quantifiers(self, text: str, sentence: str, skolems: Dict[str, Term],
                           universal: bool, skolem_marker: str = EXISTS) -> Tuple[str, bool]:
        """Drop leading quantifier markers.

        Variables bound by ``skolem_marker`` become Skolem constants, which is
        only possible outside the scope of the other quantifier. Returns the
        remaining text and whether it now sits inside that other scope.
        """
        while True:
            text = strip_outer_parens(text)
            match = QUANTIFIER.match(text)
            if match is None:
                return text, universal

            names = [name.strip() for name in match.group("names").split(",")]
            if match.group("marker") == skolem_marker:
                if universal:
                    raise MalformedSentence(sentence, "Skolem functions are not supported")
                for name in names:
                    skolems[name] = self.skolem_constant()
            else:
                universal = True
            text = text[match.end():]


def build_clauses(sentences: Iterable[str]) -> List[Clause]:
    """Convert ``sentences`` with a fresh builder."""
    return ClausalFormBuilder().build_clauses(sentences)
