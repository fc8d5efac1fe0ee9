"""
Source File Discovery

Walks a directory tree, prunes excluded directories, and yields the files
whose extension has a comment profile. Also provides the streaming line
reader handed to the scanner.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Collection, Iterable, Iterator, Optional, Set

from comment_scanner.core.errors import DiscoveryError, FileReadError

LOGGER_NAME = "comment_scanner.discovery"
logger = logging.getLogger(LOGGER_NAME)

DEFAULT_EXCLUDED_DIRS: Set[str] = {
    ".git",
    ".hg",
    ".svn",
    "__pycache__",
    "node_modules",
    ".venv",
    "venv",
    "dist",
    "build",
    ".idea",
    ".vscode",
    ".mypy_cache",
    ".pytest_cache",
}


# =============================================================================
# Root validation
# =============================================================================

def validate_scan_root(path: Path) -> Path:
    """
    Resolve the scan root and ensure it is an existing directory.

    Raises:
        DiscoveryError if path does not exist or is not a directory
    """
    root = path.resolve()
    if not root.exists():
        raise DiscoveryError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise DiscoveryError(f"Path is not a directory: {root}")
    return root


# =============================================================================
# Directory walking
# =============================================================================

def should_exclude_directory(
    dir_name: str,
    extra_excludes: Optional[Iterable[str]] = None,
) -> bool:
    excludes = set(DEFAULT_EXCLUDED_DIRS)
    if extra_excludes:
        excludes.update(extra_excludes)
    return dir_name in excludes


def is_binary_file(path: Path, sample_size: int = 1024) -> bool:
    """
    Heuristically determine whether a file is binary by looking for null
    bytes in its first few bytes.
    """
    try:
        with path.open("rb") as handle:
            return b"\x00" in handle.read(sample_size)
    except OSError:
        return False


def iter_source_files(
    root: Path,
    extensions: Collection[str],
    *,
    exclude_dirs: Optional[Iterable[str]] = None,
) -> Iterator[Path]:
    """
    Yield files under root whose suffix is one of extensions, in a stable
    (sorted) order.

    Args:
        root: Directory to walk
        extensions: Lower-case suffixes including the dot, e.g. ".py"
        exclude_dirs: Additional directory names to prune
    """
    wanted = {ext.lower() for ext in extensions}
    excludes = list(exclude_dirs or ())

    for current_root, dirs, files in os.walk(root):
        root_path = Path(current_root)

        # Modify dirs in-place to control recursion
        dirs[:] = sorted(
            d for d in dirs
            if not should_exclude_directory(d, excludes)
        )

        for name in sorted(files):
            path = root_path / name
            if path.suffix.lower() not in wanted:
                continue
            if is_binary_file(path):
                logger.info("Skipping binary file %s", path)
                continue
            yield path


# =============================================================================
# Line streaming
# =============================================================================

def iter_lines(path: Path, *, encoding: str = "utf-8") -> Iterator[str]:
    """
    Stream the lines of a text file without loading it whole.

    Raises:
        FileReadError if the file cannot be opened or read
    """
    try:
        with path.open("r", encoding=encoding, errors="ignore") as handle:
            for line in handle:
                yield line
    except OSError as exc:
        raise FileReadError(f"Failed to read file {path}: {exc}") from exc
