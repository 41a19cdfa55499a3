"""Utility helpers for the checker."""

from .fileio import read_json_file, read_source_file, read_yaml_file
from .code import iter_code_files, iter_directories, load_gitignore_patterns

__all__ = [
    "read_json_file",
    "read_source_file",
    "read_yaml_file",
    "iter_code_files",
    "iter_directories",
    "load_gitignore_patterns",
]
