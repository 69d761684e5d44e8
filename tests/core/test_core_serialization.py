"""Tests for JSON serialization of core objects."""

import json

from resolvent.core.logic import Variable, Constant, Predicate, Clause
from resolvent.core.serialization import (
    CoreJSONEncoder, clauses_to_json, clauses_from_json, save_clauses, load_clauses
)
from resolvent.core.unification import Substitution


def sample_clauses():
    x = Variable("x")
    return [
        Clause([Predicate("Man", [x], True), Predicate("Mortal", [x])], 1),
        Clause([Predicate("Man", [Constant("Socrates")])], 2),
        Clause([], 3),
    ]


class TestCoreSerialization:
    def test_encoded_shape(self):
        data = json.loads(clauses_to_json(sample_clauses()[:1]))
        clause = data[0]
        assert clause["_type"] == "Clause"
        assert clause["id"] == 1
        assert clause["predicates"][0]["negated"] is True
        assert clause["predicates"][0]["terms"][0] == {"_type": "Term", "name": "x", "is_variable": True}

    def test_clauses_from_json(self):
        clauses = sample_clauses()
        loaded = clauses_from_json(clauses_to_json(clauses))
        assert loaded == clauses
        assert [c.id for c in loaded] == [1, 2, 3]
        assert str(loaded[0]) == "¬Man(x) ∨ Mortal(x)"
        assert loaded[2].is_empty

    def test_substitution(self):
        text = json.dumps(Substitution({"x": Constant("A")}), cls=CoreJSONEncoder)
        assert json.loads(text)["mapping"]["x"]["name"] == "A"

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "clauses.json"
        save_clauses(sample_clauses(), path)
        assert "Socrates" in path.read_text(encoding="utf-8")
        assert load_clauses(path) == sample_clauses()
