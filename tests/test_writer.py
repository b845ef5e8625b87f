import os
from pathlib import Path
import stat

import pytest

from springbanner.errors import WriteError
from springbanner.writer import write_banner


def test_write_creates_missing_directories(tmp_path: Path) -> None:
    target = tmp_path / "build" / "classes" / "resources"
    path = write_banner(target, "banner.txt", "\n hi\n")

    assert path == target / "banner.txt"
    assert path.read_bytes() == b"\n hi\n"


def test_write_is_utf8(tmp_path: Path) -> None:
    path = write_banner(tmp_path, "banner.txt", "a\u00a0b ⛏\n")
    assert path.read_bytes() == "a\u00a0b ⛏\n".encode("utf-8")


def test_write_replaces_existing_file(tmp_path: Path) -> None:
    existing = tmp_path / "banner.txt"
    existing.write_text("old banner that is much longer than the new one\n", encoding="utf-8")

    write_banner(tmp_path, "banner.txt", "new\n")
    assert existing.read_text(encoding="utf-8") == "new\n"


def test_write_leaves_no_temp_files(tmp_path: Path) -> None:
    write_banner(tmp_path, "banner.txt", "x\n")
    assert [p.name for p in tmp_path.iterdir()] == ["banner.txt"]


def test_directory_blocked_by_file(tmp_path: Path) -> None:
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(WriteError, match="Failed to create output directory") as excinfo:
        write_banner(blocker / "nested", "banner.txt", "x\n")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_unwritable_target_cleans_up(tmp_path: Path) -> None:
    # A directory in place of the banner file makes the final rename fail
    (tmp_path / "banner.txt").mkdir()

    with pytest.raises(WriteError, match="Failed to write banner file"):
        write_banner(tmp_path, "banner.txt", "x\n")
    assert [p.name for p in tmp_path.iterdir()] == ["banner.txt"]


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.mark.usefixtures("umask_022")
def test_new_file_gets_umask_default_mode(tmp_path: Path) -> None:
    path = write_banner(tmp_path, "banner.txt", "x\n")
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@pytest.mark.usefixtures("umask_022")
def test_existing_file_keeps_its_mode(tmp_path: Path) -> None:
    existing = tmp_path / "banner.txt"
    existing.write_text("old\n", encoding="utf-8")
    existing.chmod(0o640)

    write_banner(tmp_path, "banner.txt", "x\n")
    assert stat.S_IMODE(existing.stat().st_mode) == 0o640
    assert existing.read_text(encoding="utf-8") == "x\n"
