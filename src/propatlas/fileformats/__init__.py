"""Problem file formats."""

from pathlib import Path
from typing import Dict, List, Union

from .base import FileFormat
from .prop import PropFormat


_formats: Dict[str, FileFormat] = {}


def register_format(handler: FileFormat) -> None:
    """Register a file format handler under its name."""
    _formats[handler.name.lower()] = handler


def get_format_handler(name_or_path: Union[str, Path]) -> FileFormat:
    """Get a handler by format name or by a file path's extension."""
    key = str(name_or_path).lower()
    if key in _formats:
        return _formats[key]
    suffix = Path(name_or_path).suffix.lower()
    for handler in _formats.values():
        if suffix in handler.extensions:
            return handler
    raise ValueError(f"Unknown file format: {name_or_path}")


def list_formats() -> List[str]:
    return list(_formats.keys())


register_format(PropFormat())

__all__ = ['FileFormat', 'PropFormat', 'register_format', 'get_format_handler', 'list_formats']
