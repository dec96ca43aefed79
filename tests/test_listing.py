import pytest

from rotatelog.archive.errors import DirectoryOpenError
from rotatelog.archive.listing import (
    archive_candidates,
    delete_text_files,
    log_files,
    scan_directory,
    text_files,
)


def test_scan_skips_dot_entries(make_logs, tmp_path):
    make_logs(".hidden.log", "1-1-2020.log", "notes.txt")

    names = [p.name for p in scan_directory(tmp_path)]

    assert names == ["1-1-2020.log", "notes.txt"]
    assert all(p.parent == tmp_path for p in scan_directory(tmp_path))


def test_scan_missing_directory_raises(tmp_path):
    with pytest.raises(DirectoryOpenError) as exc:
        scan_directory(tmp_path / "nope")
    assert "nope" in str(exc.value)


def test_suffix_filters(make_logs, tmp_path):
    paths = make_logs("1-1-2020.log", "2-1-2020.tar.gz", "3-1-2020.gz", "a.txt", "b.log.txt")

    assert [p.name for p in archive_candidates(paths)] == ["1-1-2020.log", "2-1-2020.tar.gz"]
    assert [p.name for p in log_files(paths)] == ["1-1-2020.log"]
    assert [p.name for p in text_files(paths)] == ["a.txt", "b.log.txt"]


def test_delete_text_files(make_logs, tmp_path):
    paths = make_logs("a.txt", "b.txt", "1-1-2020.log")

    res = delete_text_files(paths)

    assert sorted(p.name for p in res.deleted) == ["a.txt", "b.txt"]
    assert [p.name for p in tmp_path.iterdir()] == ["1-1-2020.log"]
