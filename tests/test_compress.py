import shutil
import tarfile

import pytest

from rotatelog.archive.compress import (
    ShellCompressor,
    TarGzCompressor,
    archive_path_for,
    build_compressor,
    compress_logs,
)
from rotatelog.archive.errors import CompressionError
from rotatelog.config import RotateConfig


def test_archive_path_for(tmp_path):
    assert archive_path_for(tmp_path / "1-1-2020.log") == tmp_path / "1-1-2020.tar.gz"


def test_tarfile_compressor_stores_bare_name(tmp_path):
    src = tmp_path / "1-1-2020.log"
    src.write_text("hello\n")

    dest = TarGzCompressor().compress(src)

    assert dest.name == "1-1-2020.tar.gz"
    with tarfile.open(dest, "r:gz") as tar:
        assert tar.getnames() == ["1-1-2020.log"]
        assert tar.extractfile("1-1-2020.log").read() == b"hello\n"


def test_tarfile_compressor_missing_source(tmp_path):
    with pytest.raises(CompressionError):
        TarGzCompressor().compress(tmp_path / "gone.log")
    assert not (tmp_path / "gone.tar.gz").exists()


@pytest.mark.skipif(
    not (shutil.which("tar") and shutil.which("gzip")), reason="tar/gzip not installed"
)
def test_shell_compressor(tmp_path):
    src = tmp_path / "2-3-2021.log"
    src.write_text("data\n")

    dest = ShellCompressor().compress(src)

    with tarfile.open(dest, "r:gz") as tar:
        assert tar.getnames() == ["2-3-2021.log"]


def test_shell_compressor_missing_binary(tmp_path):
    src = tmp_path / "2-3-2021.log"
    src.write_text("data\n")

    with pytest.raises(CompressionError):
        ShellCompressor(tar_bin="definitely-not-a-tar-binary").compress(src)
    assert not (tmp_path / "2-3-2021.tar.gz").exists()


def test_build_compressor_from_config(tmp_path):
    assert isinstance(build_compressor(RotateConfig(output_dir=tmp_path)), TarGzCompressor)

    shell = build_compressor(
        RotateConfig(output_dir=tmp_path, compressor="shell", tar_bin="gtar")
    )
    assert isinstance(shell, ShellCompressor)
    assert shell.tar_bin == "gtar"


class _FailingOn:
    def __init__(self, name):
        self.name = name
        self.inner = TarGzCompressor()

    def compress(self, path):
        if path.name == self.name:
            raise CompressionError(path, "boom")
        return self.inner.compress(path)


def test_compress_logs_skips_failures_and_removes_sources(make_logs, tmp_path):
    paths = make_logs("1-1-2020.log", "2-1-2020.log", "notes.txt")

    res = compress_logs(paths, _FailingOn("1-1-2020.log"))

    assert [p.name for p in res.archived] == ["2-1-2020.tar.gz"]
    assert [p.name for p, _ in res.failures] == ["1-1-2020.log"]
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "1-1-2020.log",
        "2-1-2020.tar.gz",
        "notes.txt",
    ]
