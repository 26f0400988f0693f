"""Test script discovery."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import FilesystemError

DEFAULT_TEST_ROOT = Path('test')
SCRIPT_EXTENSION = '.lox'


def discover_scripts(root: Path, extension: str = SCRIPT_EXTENSION) -> list[Path]:
    """Find all script files under a directory tree.

    Args:
        root: Directory to walk recursively.
        extension: File suffix to match, including the dot. Case-sensitive.

    Returns:
        Sorted list of paths, each prefixed by ``root`` as given.

    Raises:
        FilesystemError: If ``root`` is missing, is not a directory, or a
            directory beneath it cannot be listed.
    """
    root = Path(root)
    if not root.exists():
        raise FilesystemError(root, 'does not exist')
    if not root.is_dir():
        raise FilesystemError(root, 'not a directory')

    def _raise(exc: OSError) -> None:
        raise FilesystemError(Path(exc.filename or root), exc.strerror or str(exc)) from exc

    scripts = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for name in filenames:
            path = Path(dirpath) / name
            if path.suffix == extension and path.is_file():
                scripts.append(path)

    return sorted(scripts)
