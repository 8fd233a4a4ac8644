"""
Shared fixtures for scan pipeline tests.
Creates isolated temporary directory trees with controlled contents and modification times.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict, Optional
import sys

# Add src/ to sys.path so the 'namesake' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir):
    """
    Returns a helper writing `content` to temp_dir/<relative path>.
    Parent directories are created; `mtime` pins the modification time.
    """
    def _write(relative: str, content: bytes = b"", mtime: Optional[float] = None) -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def scenario_a(write_file) -> Dict[str, Path]:
    """
    a/x.txt and b/x.txt with identical content, c/y.txt with a unique name.
    b/x.txt is the newer copy.
    """
    return {
        "a_x": write_file("a/x.txt", b"same content", mtime=1_000_000),
        "b_x": write_file("b/x.txt", b"same content", mtime=2_000_000),
        "c_y": write_file("c/y.txt", b"lonely", mtime=1_500_000),
    }


@pytest.fixture
def scenario_b(write_file) -> Dict[str, Path]:
    """a/x.txt and b/x.txt share the name but differ in content."""
    return {
        "a_x": write_file("a/x.txt", b"first version", mtime=1_000_000),
        "b_x": write_file("b/x.txt", b"second version", mtime=2_000_000),
    }


@pytest.fixture
def mixed_tree(write_file) -> Dict[str, Path]:
    """
    Three copies of report.pdf (two identical, one different),
    two identical notes.md, one unique file, nested up to three levels.
    """
    return {
        "report_1": write_file("docs/report.pdf", b"R" * 2048, mtime=1_000_300),
        "report_2": write_file("backup/docs/report.pdf", b"R" * 2048, mtime=1_000_100),
        "report_3": write_file("old/2020/docs/report.pdf", b"X" * 2048, mtime=1_000_200),
        "notes_1": write_file("notes.md", b"todo", mtime=1_000_000),
        "notes_2": write_file("backup/notes.md", b"todo", mtime=1_000_000),
        "unique": write_file("backup/unique.bin", b"\x00\x01", mtime=1_000_000),
    }
