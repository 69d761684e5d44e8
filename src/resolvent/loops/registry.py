"""Saturation loops by name, for the engine, the configuration and the CLI."""

from typing import Any, Dict, List, Type

from .base import Loop
from .basic import BasicLoop
from .exhaustive import ExhaustiveLoop


class LoopRegistry:
    """Case-insensitive mapping from loop names to ``Loop`` subclasses."""

    def __init__(self, **loops: Type[Loop]):
        self._loops: Dict[str, Type[Loop]] = {}
        for name, loop_class in loops.items():
            self.register(name, loop_class)

    def register(self, name: str, loop_class: Type[Loop]) -> Type[Loop]:
        if not (isinstance(loop_class, type) and issubclass(loop_class, Loop)):
            raise TypeError(f"{loop_class!r} is not a Loop subclass")
        self._loops[name.lower()] = loop_class
        return loop_class

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._loops

    def create(self, name: str, **kwargs: Any) -> Loop:
        try:
            loop_class = self._loops[name.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown loop {name!r}, expected one of: {', '.join(self._loops)}"
            ) from None
        return loop_class(**kwargs)

    def names(self) -> List[str]:
        return list(self._loops)


_registry = LoopRegistry(basic=BasicLoop, exhaustive=ExhaustiveLoop)


def get_loop(name: str, **kwargs: Any) -> Loop:
    """Instantiate the loop registered as ``name``."""
    return _registry.create(name, **kwargs)


def list_loops() -> List[str]:
    return _registry.names()


def register_loop(name: str, loop_class: Type[Loop]) -> Type[Loop]:
    return _registry.register(name, loop_class)
