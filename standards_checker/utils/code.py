"""Source tree walking helpers."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Generator, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".js", ".ts", ".jsx", ".tsx")
DEFAULT_IGNORE_PATTERNS = (
    "node_modules",
    ".next",
    ".git",
    "__tests__",
    "__test__",
    "coverage",
    "dist",
    "build",
    ".nyc_output",
    "tmp",
    "temp",
)


def load_gitignore_patterns(root: Path) -> List[str]:
    """Return the non-comment entries of ``root/.gitignore``."""

    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return []
    try:
        lines = gitignore.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.warning("Failed to read .gitignore: %s", exc)
        return []
    patterns = [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]
    logger.debug("Loaded %d patterns from .gitignore", len(patterns))
    return patterns


def is_ignored(relative: str, patterns: Sequence[str]) -> bool:
    """Match ``relative`` (posix, relative to the walk root) against ignore patterns.

    A pattern matches when it matches any single path part or the relative path
    as a whole. A trailing slash marks a directory pattern.
    """

    parts = relative.split("/")
    for raw in patterns:
        pattern = raw.strip().lstrip("/").rstrip("/")
        if not pattern or raw.startswith("!"):
            continue
        if fnmatch.fnmatch(relative, pattern) or fnmatch.fnmatch(relative, f"{pattern}/*"):
            return True
        if "/" not in pattern and any(fnmatch.fnmatch(part, pattern) for part in parts):
            return True
    return False


def _is_hidden(name: str) -> bool:
    return name.startswith(".") and name != ".gitignore"


def is_test_source(name: str) -> bool:
    return ".test" in name or ".spec" in name


def _relative_to(path: Path, base: Path) -> Optional[str]:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return None


class _IgnoreMatcher:
    """Zone patterns match zone-relative paths; ``.gitignore`` entries match project-relative ones."""

    def __init__(
        self,
        root: Path,
        patterns: Sequence[str],
        gitignore: Sequence[str] = (),
        project_root: Optional[Path] = None,
    ) -> None:
        self.root = root
        self.patterns = tuple(DEFAULT_IGNORE_PATTERNS) + tuple(patterns)
        self.gitignore = tuple(gitignore)
        self.project_root = project_root or root

    def __call__(self, path: Path) -> bool:
        if is_ignored(path.relative_to(self.root).as_posix(), self.patterns):
            return True
        if not self.gitignore:
            return False
        relative = _relative_to(path, self.project_root)
        return relative is not None and is_ignored(relative, self.gitignore)


def _walk(root: Path, ignored: _IgnoreMatcher) -> Generator[Tuple[Path, List[str], List[str]], None, None]:
    for current, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current_path = Path(current)
        kept = []
        for name in sorted(dirnames):
            if _is_hidden(name) or ignored(current_path / name):
                continue
            kept.append(name)
        dirnames[:] = kept
        yield current_path, kept, sorted(filenames)


def _log_walk_error(error: OSError) -> None:
    logger.warning("Failed to scan directory %s: %s", error.filename, error.strerror or error)


def iter_code_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ignore_patterns: Sequence[str] = (),
    gitignore: Sequence[str] = (),
    project_root: Optional[Path] = None,
) -> Generator[Path, None, None]:
    """Yield code files beneath ``root``, pruning ignored directories.

    ``ignore_patterns`` are relative to ``root``; ``gitignore`` entries are
    relative to ``project_root`` (defaults to ``root``).
    """

    suffixes = tuple(extensions)
    ignored = _IgnoreMatcher(root, ignore_patterns, gitignore, project_root)
    for current, _dirs, filenames in _walk(root, ignored):
        for name in filenames:
            path = current / name
            if _is_hidden(name) or is_test_source(name) or not name.endswith(suffixes):
                continue
            if ignored(path):
                continue
            yield path


def iter_directories(
    root: Path,
    ignore_patterns: Sequence[str] = (),
    gitignore: Sequence[str] = (),
    project_root: Optional[Path] = None,
) -> Generator[Path, None, None]:
    """Yield every non-ignored directory beneath ``root``."""

    ignored = _IgnoreMatcher(root, ignore_patterns, gitignore, project_root)
    for current, dirs, _files in _walk(root, ignored):
        for name in dirs:
            yield current / name
