"""Saturation loops driving pairwise resolution."""

from .base import Loop
from .basic import BasicLoop
from .exhaustive import ExhaustiveLoop
from .registry import LoopRegistry, get_loop, list_loops, register_loop

__all__ = ['Loop', 'BasicLoop', 'ExhaustiveLoop', 'LoopRegistry', 'get_loop', 'list_loops', 'register_loop']
