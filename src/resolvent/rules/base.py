"""Base interface for inference rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

from resolvent.core.logic import Clause
from resolvent.core.unification import Substitution


@dataclass
class RuleApplication:
    """Result of applying an inference rule to a pair of clauses."""
    rule_name: str
    parents: Tuple[Clause, Clause]
    resolvent: Clause
    substitution: Substitution = field(default_factory=Substitution)
    metadata: Dict[str, Any] = field(default_factory=dict)


class Rule(ABC):
    """Abstract base class for binary inference rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the inference rule."""
        pass

    @abstractmethod
    def apply(self, left: Clause, right: Clause) -> Optional[RuleApplication]:
        """
        Apply the rule to two clauses.

        Args:
            left: First parent clause
            right: Second parent clause

        Returns:
            RuleApplication if the rule was applicable, None otherwise
        """
        pass
