"""Shared fixtures: build synthetic .unitypackage archives on disk."""

from __future__ import annotations

import io
import os
import sys
import tarfile
from pathlib import Path
from typing import Dict, Optional

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def _add_bytes(tar: tarfile.TarFile, name: str, data: bytes) -> None:
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mode = 0o644
    tar.addfile(info, io.BytesIO(data))


def _add_dir(tar: tarfile.TarFile, name: str) -> None:
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = 0o755
    tar.addfile(info)


def write_package(path: Path, entries: Dict[str, Dict[str, Optional[bytes]]]) -> Path:
    """Write a gzip tar where each key is an entry directory holding the given files.

    Values map file names (``pathname``, ``asset``, ``asset.meta``...) to their
    bytes; a ``None`` value leaves the file out.
    """
    with tarfile.open(path, "w:gz") as tar:
        for entry_id, files in entries.items():
            _add_dir(tar, entry_id)
            for name, data in files.items():
                if data is not None:
                    _add_bytes(tar, f"{entry_id}/{name}", data)
    return path


def asset_entry(pathname: str, data: bytes) -> Dict[str, bytes]:
    return {"pathname": pathname.encode("utf-8") + b"\n00\n", "asset": data}


@pytest.fixture
def make_package(tmp_path):
    """Factory fixture returning the path of a freshly written package."""
    counter = {"n": 0}

    def _make(entries, name: Optional[str] = None) -> Path:
        counter["n"] += 1
        return write_package(tmp_path / (name or f"package{counter['n']}.unitypackage"), entries)

    return _make


@pytest.fixture
def temp_root(tmp_path) -> Path:
    """Dedicated parent for temporary unpack trees so leaks are observable."""
    root = tmp_path / "tmp-root"
    root.mkdir()
    return root
