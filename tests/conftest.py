"""Shared fixtures for the filegrid test suite."""

import errno
import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest

from filegrid.model.descriptor import FileDescriptorBuilder
from filegrid.model.entry import RawFileEntry


class RecordingGraph:
    """In-memory DiagramGraph that records every call.

    Vertices inserted in an update only become visible once the outermost
    update ends; a rollback drops them.
    """

    def __init__(self, fail_at: int | None = None) -> None:
        self.calls: list[str] = []
        self.vertices: list[dict] = []
        self._pending: list[dict] = []
        self._depth = 0
        self._fail_at = fail_at

    def begin_update(self) -> None:
        self.calls.append("begin_update")
        self._depth += 1

    def end_update(self) -> None:
        self.calls.append("end_update")
        self._depth -= 1
        if self._depth == 0:
            self.vertices.extend(self._pending)
            self._pending = []

    def rollback_update(self) -> None:
        self.calls.append("rollback_update")
        self._depth -= 1
        self._pending = []

    def insert_vertex(self, label, x, y, width, height, style):
        self.calls.append("insert_vertex")
        if self._fail_at is not None and len(self._pending) == self._fail_at:
            raise RuntimeError("graph is read-only")
        cell = {"label": label, "x": x, "y": y, "width": width, "height": height, "style": style}
        self._pending.append(cell)
        return cell

    def fit(self) -> None:
        self.calls.append("fit")


class FakePicker:
    """DirectoryPicker returning a fixed answer."""

    def __init__(self, path: Path | None) -> None:
        self.path = path
        self.calls = 0

    def pick_directory(self) -> Path | None:
        self.calls += 1
        return self.path


@pytest.fixture
def recording_graph() -> RecordingGraph:
    return RecordingGraph()


@pytest.fixture
def fixed_builder() -> FileDescriptorBuilder:
    """Builder with a locale-independent date formatter."""
    return FileDescriptorBuilder(date_formatter=lambda ms: f"day-{ms // 86_400_000}")


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with four files of known sizes and one subdirectory."""
    (tmp_path / "b_notes.txt").write_bytes(b"x" * 1536)
    (tmp_path / "a_report.final.pdf").write_bytes(b"x" * 10)
    (tmp_path / "d_README").write_bytes(b"")
    (tmp_path / "c_image.png").write_bytes(b"x" * 2048)
    (tmp_path / "subdir").mkdir()
    (tmp_path / "subdir" / "nested.txt").write_bytes(b"nested")
    return tmp_path


def make_entries(count: int) -> list[RawFileEntry]:
    """Create ``count`` raw entries named file0.txt, file1.txt, ..."""
    return [
        RawFileEntry(name=f"file{i}.txt", byte_size=i * 1024, modified_ms=1_700_000_000_000 + i)
        for i in range(count)
    ]


def deny_is_file(monkeypatch, directory: Path) -> None:
    """Make ``is_file`` raise EACCES for the children of ``directory``.

    This is what a directory with read but no search permission does.
    """
    real_is_file = Path.is_file

    def is_file(self, *args, **kwargs):
        if self.parent == directory:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return real_is_file(self, *args, **kwargs)

    monkeypatch.setattr(Path, "is_file", is_file)
