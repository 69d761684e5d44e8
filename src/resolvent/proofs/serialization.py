"""JSON serialization for proof objects."""

import json
from pathlib import Path
from typing import Union

from resolvent.core.serialization import CoreJSONEncoder, decode_core_object
from .proof import Proof, ProofStep, Outcome
from .state import ProofState


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for proof objects.

    Steps refer to clauses by id; the clauses themselves are stored once in
    the proof's clause list.
    """

    def default(self, obj):
        if isinstance(obj, ProofStep):
            return {
                "_type": "ProofStep",
                "step_number": obj.step_number,
                "left": obj.left.id,
                "right": obj.right.id,
                "resolvent": obj.resolvent.id,
                "substitution": obj.substitution
            }

        elif isinstance(obj, Proof):
            return {
                "_type": "Proof",
                "query": obj.query,
                "negated_query": obj.negated_query.id if obj.negated_query is not None else None,
                "outcome": obj.outcome.value if obj.outcome else None,
                "passes": obj.passes,
                "clauses": obj.state.clauses,
                "steps": obj.steps
            }

        return super().default(obj)


def decode_proof_object(dct):
    """Object hook turning proof dictionaries back into a Proof."""
    result = decode_core_object(dct)
    if result is not dct:
        return result

    if dct.get("_type") != "Proof":
        return dct

    state = ProofState(dct["clauses"])
    negated_query = state.get(dct["negated_query"]) if dct["negated_query"] is not None else None
    proof = Proof(state, query=dct["query"], negated_query=negated_query)
    proof.passes = dct["passes"]
    for step in dct["steps"]:
        proof.steps.append(ProofStep(
            step["step_number"],
            state.get(step["left"]),
            state.get(step["right"]),
            state.get(step["resolvent"]),
            step["substitution"]
        ))
    if dct["outcome"] is not None:
        proof.outcome = Outcome(dct["outcome"])
    return proof


def proof_to_json(proof: Proof, indent: int = 2) -> str:
    """Convert a Proof to JSON string."""
    return json.dumps(proof, cls=ProofJSONEncoder, indent=indent, ensure_ascii=False)


def proof_from_json(json_str: str) -> Proof:
    """Create a Proof from JSON string."""
    return json.loads(json_str, object_hook=decode_proof_object)


def save_proof(proof: Proof, file_path: Union[str, Path]) -> None:
    """Save a Proof to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(proof, f, cls=ProofJSONEncoder, indent=2, ensure_ascii=False)


def load_proof(file_path: Union[str, Path]) -> Proof:
    """Load a Proof from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=decode_proof_object)
