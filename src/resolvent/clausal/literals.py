"""Lexical layer of the sentence notation.

Connectives are single characters once ASCII aliases are normalized:
``⇒`` implication, ``∧`` conjunction, ``∨`` disjunction, ``¬`` negation and
the ``∀``/``∃`` quantifier markers.
"""

import re
from typing import List, Optional

from resolvent.core.exceptions import MalformedSentence
from resolvent.core.logic import Term, Predicate


IMPLIES = "⇒"
AND = "∧"
OR = "∨"
NOT = "¬"
FORALL = "∀"
EXISTS = "∃"

CONNECTIVES = (IMPLIES, AND, OR)

ALIASES = [
    ("=>", IMPLIES),
    ("->", IMPLIES),
    ("→", IMPLIES),
    ("&", AND),
    ("|", OR),
    ("~", NOT),
    ("!", NOT),
]

UNSUPPORTED = ("<=>", "<->", "⇔", "↔")

QUANTIFIER = re.compile(
    r"(?P<marker>[∀∃])\s*(?P<names>[a-z][a-z0-9_]*(?:\s*,\s*[a-z][a-z0-9_]*)*)\s*\.?\s*"
)
LITERAL = re.compile(r"(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*(?:\((?P<args>[^()]*)\))?")
TERM = re.compile(r"[A-Za-z0-9_]+")


def normalize(sentence: str) -> str:
    """Map ASCII connectives onto the canonical symbols and validate nesting."""
    if not isinstance(sentence, str):
        raise TypeError(f"Expected str, got {sentence!r}")
    for connective in UNSUPPORTED:
        if connective in sentence:
            raise MalformedSentence(sentence, f"unknown connective {connective!r}")
    text = sentence
    for alias, symbol in ALIASES:
        text = text.replace(alias, symbol)
    check_balanced(text, sentence)
    text = text.strip()
    if not text:
        raise MalformedSentence(sentence, "empty sentence")
    return text


def check_balanced(text: str, sentence: Optional[str] = None):
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise MalformedSentence(sentence or text, "unbalanced parentheses")
    if depth != 0:
        raise MalformedSentence(sentence or text, "unbalanced parentheses")


def split_top_level(text: str, connective: str) -> List[str]:
    """Split on ``connective`` wherever it is not nested inside parentheses."""
    parts = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == connective and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
    parts.append(text[start:].strip())
    return parts


def strip_outer_parens(text: str) -> str:
    """Remove parentheses that wrap the whole of ``text``."""
    text = text.strip()
    while text.startswith("(") and _matching_paren(text, 0) == len(text) - 1:
        text = text[1:-1].strip()
    return text


def _matching_paren(text: str, start: int) -> int:
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def parse_term(text: str, sentence: Optional[str] = None) -> Term:
    """Lowercase first character means variable, anything else a constant."""
    text = text.strip()
    if not text:
        raise MalformedSentence(sentence or text, "empty argument")
    if not TERM.fullmatch(text):
        raise MalformedSentence(sentence or text, f"unsupported term {text!r}")
    return Term(text, text[0].islower())


def parse_literal(fragment: str, negated: bool = False,
                  sentence: Optional[str] = None) -> Predicate:
    """Read one possibly negated predicate.

    Each leading negation marker toggles ``negated``, so callers pass the
    polarity the surrounding formula imposes.
    """
    sentence = sentence or fragment
    text = fragment
    while True:
        text = strip_outer_parens(text)
        if not text.startswith(NOT):
            break
        negated = not negated
        text = text[1:]

    if not text:
        raise MalformedSentence(sentence, "empty literal")
    if any(connective in text for connective in CONNECTIVES):
        raise MalformedSentence(sentence, f"expected a single literal, got {text!r}")

    match = LITERAL.fullmatch(text)
    if match is None:
        raise MalformedSentence(sentence, f"cannot read {text!r} as a single predicate")

    args = match.group("args")
    if args is None or not args.strip():
        terms = []
    else:
        terms = [parse_term(arg, sentence) for arg in args.split(",")]
    return Predicate(match.group("name"), terms, negated)
