"""
Proof representation, working state and search trace.
"""

from .proof import Proof, ProofStep, Outcome
from .state import ProofState
from .trace import (
    TraceRecord, StepRecord, TerminalRecord,
    ContradictionRecord, SaturationRecord, InconclusiveRecord,
    TraceSink, NullTraceSink, ListTraceSink, CallbackTraceSink, JSONTraceSink
)
from .serialization import (
    ProofJSONEncoder, decode_proof_object,
    proof_to_json, proof_from_json,
    save_proof, load_proof
)

__all__ = [
    'Proof', 'ProofStep', 'Outcome', 'ProofState',
    'TraceRecord', 'StepRecord', 'TerminalRecord',
    'ContradictionRecord', 'SaturationRecord', 'InconclusiveRecord',
    'TraceSink', 'NullTraceSink', 'ListTraceSink', 'CallbackTraceSink', 'JSONTraceSink',
    'ProofJSONEncoder', 'decode_proof_object',
    'proof_to_json', 'proof_from_json',
    'save_proof', 'load_proof'
]
