"""Shared file I/O helpers."""

from .request_files import load_request_file

__all__ = ["load_request_file"]
