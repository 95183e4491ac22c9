"""Adapters isolating icocheck from the host environment."""

from .file_system import FileSystemAdapter, ShortReadError, default_file_system

__all__ = ["FileSystemAdapter", "ShortReadError", "default_file_system"]
