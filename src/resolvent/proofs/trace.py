"""Structured trace of a proof search.

The engine reports every derived clause to a ``TraceSink`` as a
``StepRecord`` and finishes with exactly one terminal record. Sinks decide
what to do with the records; the engine itself never writes anywhere.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union


@dataclass(frozen=True)
class TraceRecord:
    kind: ClassVar[str] = "record"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class StepRecord(TraceRecord):
    """One derived clause and the two clauses it came from."""
    kind: ClassVar[str] = "step"

    step_number: int
    left_clause_id: int
    right_clause_id: int
    left_clause_text: str
    right_clause_text: str
    resolvent_text: str


@dataclass(frozen=True)
class TerminalRecord(TraceRecord):
    step_number: int
    clause_count: int

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class ContradictionRecord(TerminalRecord):
    kind: ClassVar[str] = "contradiction"


@dataclass(frozen=True)
class SaturationRecord(TerminalRecord):
    kind: ClassVar[str] = "saturated"


@dataclass(frozen=True)
class InconclusiveRecord(TerminalRecord):
    kind: ClassVar[str] = "inconclusive"


class TraceSink(ABC):
    """Receives trace records in the order they happen."""

    @abstractmethod
    def record(self, record: TraceRecord) -> None:
        pass

    def close(self) -> None:
        pass


class NullTraceSink(TraceSink):
    def record(self, record: TraceRecord) -> None:
        pass


class ListTraceSink(TraceSink):
    """Keeps the records in memory, mostly for tests and diagnostics."""

    def __init__(self):
        self.records: List[TraceRecord] = []

    def record(self, record: TraceRecord) -> None:
        self.records.append(record)

    @property
    def steps(self) -> List[StepRecord]:
        return [r for r in self.records if isinstance(r, StepRecord)]

    @property
    def terminal(self) -> Optional[TerminalRecord]:
        if self.records and self.records[-1].is_terminal:
            return self.records[-1]
        return None

    def clear(self):
        self.records = []


class CallbackTraceSink(TraceSink):
    """Forwards every record to a callable."""

    def __init__(self, callback: Callable[[TraceRecord], None]):
        self.callback = callback

    def record(self, record: TraceRecord) -> None:
        self.callback(record)


class JSONTraceSink(TraceSink):
    """Writes the trace of one or more searches to a JSON file.

    Every terminal record closes a run; the file is rewritten after each run
    so it is readable while a batch is still going.
    """

    def __init__(self, path: Union[str, Path], name: Optional[str] = None):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.data: Dict[str, Any] = {
            "generated": datetime.now().isoformat(),
            "name": name or self.path.stem,
            "runs": [],
        }
        self._current: List[Dict[str, Any]] = []

    def record(self, record: TraceRecord) -> None:
        self._current.append(record.to_dict())
        if record.is_terminal:
            self.data["runs"].append({
                "finished": datetime.now().isoformat(),
                "outcome": record.kind,
                "records": self._current,
            })
            self._current = []
            self._save()

    def close(self) -> None:
        if self._current:
            self.data["runs"].append({
                "finished": None,
                "outcome": None,
                "records": self._current,
            })
            self._current = []
        self._save()

    def _save(self):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)
