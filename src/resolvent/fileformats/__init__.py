"""Knowledge-base file formats."""

from .base import FileFormat, KnowledgeBase
from .sentences import SentenceFormat
from .registry import FileFormatRegistry, get_format_handler

__all__ = ['FileFormat', 'KnowledgeBase', 'SentenceFormat', 'FileFormatRegistry', 'get_format_handler']
