"""Plain sentence file format.

One sentence per line, ``#`` starts a comment and a line beginning with
``?`` holds a query::

    # Socrates
    ∀x (Man(x) ⇒ Mortal(x))
    Man(Socrates)
    ? Mortal(Socrates)
"""

from pathlib import Path
from typing import List

from resolvent.core.logic import Clause
from .base import FileFormat, KnowledgeBase


COMMENT = "#"
QUERY = "?"


class SentenceFormat(FileFormat):
    """Handler for ``.kb``/``.fol`` sentence files."""

    def parse_file(self, file_path: Path, **kwargs) -> KnowledgeBase:
        file_path = Path(file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            return self.parse_string(f.read())

    def parse_string(self, content: str, **kwargs) -> KnowledgeBase:
        knowledge_base = KnowledgeBase()
        for line in content.splitlines():
            line = line.split(COMMENT, 1)[0].strip()
            if not line:
                continue
            if line.startswith(QUERY):
                knowledge_base.queries.append(line[len(QUERY):].strip())
            else:
                knowledge_base.sentences.append(line)
        return knowledge_base

    def write_file(self, clauses: List[Clause], file_path: Path, **kwargs) -> None:
        with open(Path(file_path), 'w', encoding='utf-8') as f:
            f.write(self.format_clauses(clauses))

    def format_clauses(self, clauses: List[Clause], **kwargs) -> str:
        lines = []
        for i, clause in enumerate(clauses, start=1):
            clause_id = clause.id if clause.id is not None else i
            lines.append(f"{COMMENT} {clause_id}\n{clause}")
        return "\n".join(lines) + "\n" if lines else ""

    @property
    def name(self) -> str:
        return "sentences"

    @property
    def extensions(self) -> List[str]:
        return ['.kb', '.fol']
