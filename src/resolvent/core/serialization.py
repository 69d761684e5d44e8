"""JSON serialization for core objects."""

import json
from pathlib import Path
from typing import Dict, Any, List, Union

from .logic import Term, Predicate, Clause
from .unification import Substitution


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for terms, predicates, clauses and substitutions."""

    def default(self, obj):
        if isinstance(obj, Term):
            return {
                "_type": "Term",
                "name": obj.name,
                "is_variable": obj.is_variable
            }

        elif isinstance(obj, Predicate):
            return {
                "_type": "Predicate",
                "name": obj.name,
                "terms": list(obj.terms),
                "negated": obj.negated
            }

        elif isinstance(obj, Clause):
            return {
                "_type": "Clause",
                "id": obj.id,
                "predicates": list(obj.predicates)
            }

        elif isinstance(obj, Substitution):
            return {
                "_type": "Substitution",
                "mapping": obj.mapping
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Term":
        return Term(dct["name"], dct["is_variable"])

    elif obj_type == "Predicate":
        return Predicate(dct["name"], dct["terms"], dct["negated"])

    elif obj_type == "Clause":
        return Clause(dct["predicates"], dct.get("id"))

    elif obj_type == "Substitution":
        return Substitution(dct["mapping"])

    return dct


def clauses_to_json(clauses: List[Clause], indent: int = 2) -> str:
    """Convert a list of clauses to a JSON string."""
    return json.dumps(list(clauses), cls=CoreJSONEncoder, indent=indent, ensure_ascii=False)


def clauses_from_json(json_str: str) -> List[Clause]:
    """Create a list of clauses from a JSON string."""
    return json.loads(json_str, object_hook=decode_core_object)


def save_clauses(clauses: List[Clause], file_path: Union[str, Path]) -> None:
    """Save clauses to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(list(clauses), f, cls=CoreJSONEncoder, indent=2, ensure_ascii=False)


def load_clauses(file_path: Union[str, Path]) -> List[Clause]:
    """Load clauses from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=decode_core_object)
