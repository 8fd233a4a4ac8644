"""
Unit tests for FileScannerImpl.
Verifies recursive enumeration, metadata capture, symlink handling and error policy.
"""
import os
import errno
import pytest
from pathlib import Path
from unittest import mock
from namesake.core import FileScannerImpl, TraversalError, Stage


class TestFileScannerImpl:
    """Test enumeration of roots and error handling."""

    def test_scans_all_files_recursively(self, mixed_tree, temp_dir):
        """Every file at every depth is recorded, directories are not."""
        files = FileScannerImpl([str(temp_dir)]).scan()

        assert len(files) == len(mixed_tree)
        assert {f.path for f in files} == {os.path.abspath(p) for p in mixed_tree.values()}
        assert not any(os.path.isdir(f.path) for f in files)

    def test_records_carry_name_size_and_mtime(self, write_file, temp_dir):
        path = write_file("deep/er/file.txt", b"12345", mtime=1_234_567)

        files = FileScannerImpl([str(temp_dir)]).scan()

        assert len(files) == 1
        record = files[0]
        assert record.name == "file.txt"
        assert record.path == os.path.abspath(path)
        assert record.size == 5
        assert record.modified_time == 1_234_567
        assert record.content_hash is None

    def test_paths_are_absolute(self, write_file, temp_dir, monkeypatch):
        write_file("sub/a.txt", b"a")
        monkeypatch.chdir(temp_dir)

        files = FileScannerImpl(["sub"]).scan()

        assert files[0].path == os.path.join(os.getcwd(), "sub", "a.txt")

    def test_empty_files_are_recorded(self, write_file, temp_dir):
        """Zero-byte files are ordinary entries here."""
        write_file("empty.txt", b"")
        files = FileScannerImpl([str(temp_dir)]).scan()
        assert [f.size for f in files] == [0]

    def test_empty_directory(self, temp_dir):
        assert FileScannerImpl([str(temp_dir)]).scan() == []

    def test_file_root_yields_single_record(self, write_file):
        path = write_file("only.txt", b"x")
        files = FileScannerImpl([str(path)]).scan()
        assert [f.name for f in files] == ["only.txt"]

    def test_concatenates_roots(self, write_file, temp_dir):
        write_file("one/a.txt", b"a")
        write_file("two/b.txt", b"b")

        files = FileScannerImpl([str(temp_dir / "one"), str(temp_dir / "two")]).scan()

        assert sorted(f.name for f in files) == ["a.txt", "b.txt"]

    def test_repeated_root_enumerates_twice(self, write_file, temp_dir):
        """Roots are walked as given; de-duplication by path happens in grouping."""
        write_file("a.txt", b"a")
        files = FileScannerImpl([str(temp_dir), str(temp_dir)]).scan()
        assert len(files) == 2
        assert files[0].path == files[1].path

    def test_symlinks_recorded_not_followed(self, write_file, temp_dir):
        """
        Symbolic links (to files and to directories) are entries themselves.
        Linked directories are never descended into.
        """
        write_file("real/inner.txt", b"content")
        try:
            os.symlink(temp_dir / "real" / "inner.txt", temp_dir / "file_link.txt")
            os.symlink(temp_dir / "real", temp_dir / "dir_link", target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")

        files = FileScannerImpl([str(temp_dir)]).scan()
        names = sorted(f.name for f in files)

        assert names == ["dir_link", "file_link.txt", "inner.txt"]

    def test_permission_error_on_entry_is_skipped(self, write_file, temp_dir):
        """An entry whose metadata cannot be read is omitted; the walk continues."""
        blocked = write_file("blocked.txt", b"secret")
        write_file("open.txt", b"public")
        real_stat = os.lstat

        def fake_stat(path):
            if path.endswith("blocked.txt"):
                raise PermissionError(errno.EACCES, "Permission denied", path)
            return real_stat(path)

        with mock.patch.object(FileScannerImpl, "_stat", side_effect=fake_stat):
            files = FileScannerImpl([str(temp_dir)]).scan()

        assert [f.name for f in files] == ["open.txt"]
        assert blocked.exists()

    def test_other_os_error_on_entry_is_fatal(self, write_file, temp_dir):
        write_file("broken.txt", b"x")

        with mock.patch.object(FileScannerImpl, "_stat",
                               side_effect=OSError(errno.EIO, "Input/output error")):
            with pytest.raises(TraversalError) as exc_info:
                FileScannerImpl([str(temp_dir)]).scan()

        assert exc_info.value.path.endswith("broken.txt")

    def test_walk_error_hook(self):
        """Unreadable directories are skipped, other listing failures abort."""
        assert FileScannerImpl._on_walk_error(
            PermissionError(errno.EACCES, "Permission denied", "/locked")) is None

        with pytest.raises(TraversalError) as exc_info:
            FileScannerImpl._on_walk_error(OSError(errno.EIO, "Input/output error", "/bad"))
        assert exc_info.value.path == "/bad"

    @pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                        reason="Needs POSIX permissions enforced for a non-root user")
    def test_unreadable_directory_is_skipped(self, write_file, temp_dir):
        write_file("locked/hidden.txt", b"x")
        write_file("visible.txt", b"y")
        locked = temp_dir / "locked"
        locked.chmod(0)
        try:
            files = FileScannerImpl([str(temp_dir)]).scan()
        finally:
            locked.chmod(0o755)

        assert [f.name for f in files] == ["visible.txt"]

    def test_progress_reports_loading_stage(self, write_file, temp_dir):
        write_file("a.txt", b"a")
        write_file("b/c.txt", b"c")
        calls = []

        FileScannerImpl([str(temp_dir)]).scan(progress_callback=lambda *args: calls.append(args))

        assert calls
        assert all(stage == Stage.LOADING for stage, _, _ in calls)
        assert calls[-1] == (Stage.LOADING, 2, None)
