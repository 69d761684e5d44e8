"""Base class for knowledge-base file formats."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from resolvent.core.logic import Clause


@dataclass
class KnowledgeBase:
    """Sentences and queries read from a file, still in surface syntax."""
    sentences: List[str] = field(default_factory=list)
    queries: List[str] = field(default_factory=list)


class FileFormat(ABC):
    """Abstract base class for file format handlers.

    File format handlers are responsible for:
    1. Reading sentences and queries from files in a specific notation
    2. Writing clause lists back to files
    """

    @abstractmethod
    def parse_file(self, file_path: Path, **kwargs) -> KnowledgeBase:
        """Parse a file and return a KnowledgeBase.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        pass

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> KnowledgeBase:
        """Parse a string and return a KnowledgeBase."""
        pass

    @abstractmethod
    def write_file(self, clauses: List[Clause], file_path: Path, **kwargs) -> None:
        """Write clauses to a file."""
        pass

    @abstractmethod
    def format_clauses(self, clauses: List[Clause], **kwargs) -> str:
        """Format clauses as a string."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this file format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format handles."""
        pass
