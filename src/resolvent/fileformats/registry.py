"""Knowledge-base formats by name and by file extension."""

from pathlib import Path
from typing import Dict, Optional, Type, Union

from .base import FileFormat
from .sentences import SentenceFormat


class FileFormatRegistry:
    """Looks up format handlers; every lookup returns a fresh handler."""

    def __init__(self):
        self._formats: Dict[str, Type[FileFormat]] = {}
        self._extensions: Dict[str, str] = {}
        self.register(SentenceFormat)

    def register(self, format_class: Type[FileFormat], name: Optional[str] = None) -> Type[FileFormat]:
        """Register ``format_class`` under ``name`` (default: its own name) and its extensions."""
        handler = format_class()
        name = (name or handler.name).lower()
        self._formats[name] = format_class
        for extension in handler.extensions:
            self._extensions[extension.lower()] = name
        return format_class

    def get_handler(self, format_name: str) -> FileFormat:
        try:
            return self._formats[format_name.lower()]()
        except KeyError:
            raise ValueError(f"Unknown file format: {format_name}") from None

    def get_handler_for_file(self, file_path: Union[str, Path]) -> FileFormat:
        suffix = Path(file_path).suffix.lower()
        if suffix not in self._extensions:
            raise ValueError(f"No handler found for file extension: {suffix or '(none)'}")
        return self.get_handler(self._extensions[suffix])


_registry = FileFormatRegistry()


def get_format_handler(format_name: Optional[str] = None,
                       file_path: Optional[Union[str, Path]] = None) -> FileFormat:
    """Handler by explicit name, else by the extension of ``file_path``."""
    if format_name:
        return _registry.get_handler(format_name)
    if file_path:
        return _registry.get_handler_for_file(file_path)
    raise ValueError("Either format_name or file_path must be provided")
