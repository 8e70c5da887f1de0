import io
import subprocess
import sys
from pathlib import Path

import pytest

from prefix_shard import __version__
from prefix_shard.cli import main
from prefix_shard.examples.build_corpus import build_corpus

ROOT = Path(__file__).resolve().parent.parent


def write_input(path, *records: bytes):
    path.write_bytes(b"".join(records))
    return path


def _args(tmp_path, *extra):
    return ["--path", str(tmp_path / "out" / "%"), "--hash-size", "4", *extra]


def test_splits_file(tmp_path):
    (tmp_path / "out").mkdir()
    src = write_input(tmp_path / "in.bin", b"aaaa", b"aaab", b"bbaa")
    assert main(_args(tmp_path, str(src))) == 0
    assert (tmp_path / "out" / "a").read_bytes() == b"aaa" b"aab"


def test_no_strip_prefix(tmp_path):
    (tmp_path / "out").mkdir()
    src = write_input(tmp_path / "in.bin", b"aaaa", b"bbaa")
    assert main(_args(tmp_path, "--no-strip-prefix", str(src))) == 0
    assert (tmp_path / "out" / "b").read_bytes() == b"bbaa"


def test_reads_stdin(tmp_path, monkeypatch):
    (tmp_path / "out").mkdir()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"aaaa" b"bbbb")))
    assert main(_args(tmp_path)) == 0
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["a", "b"]


def test_empty_stdin(tmp_path, monkeypatch):
    (tmp_path / "out").mkdir()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))
    assert main(_args(tmp_path, "-")) == 0
    assert list((tmp_path / "out").iterdir()) == []


def test_too_many_files(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(_args(tmp_path, "a", "b"))
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_invalid_settings_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--path", "%%%%", "--hash-size", "4"])
    assert exc.value.code == 2


def test_buffer_too_small(tmp_path, capsys):
    (tmp_path / "out").mkdir()
    src = write_input(tmp_path / "in.bin", b"aaa1", b"aaa2")
    assert main(_args(tmp_path, "--buffer-size", "2", str(src))) == 1
    assert "buffer too small" in capsys.readouterr().err


def test_missing_input(tmp_path, capsys):
    assert main(_args(tmp_path, str(tmp_path / "nope"))) == 1
    assert "failed to open file" in capsys.readouterr().err


def test_corpus_end_to_end(tmp_path):
    (tmp_path / "out").mkdir()
    src = build_corpus(tmp_path / "corpus.txt", 200, seed=1)
    args = ["--path", str(tmp_path / "out" / "%%"), "--buffer-size", "32",
            "--compress", str(src)]
    assert main(args) == 0
    assert all(p.suffix == ".zst" for p in (tmp_path / "out").iterdir())


def test_module_entry_point():
    r = subprocess.run([sys.executable, "-m", "prefix_shard", "--version"],
                       capture_output=True, text=True, cwd=ROOT)
    assert r.returncode == 0
    assert __version__ in r.stdout


def test_nul_prefix_exits_1(tmp_path, capsys):
    (tmp_path / "out").mkdir()
    src = write_input(tmp_path / "in.bin", b"\x00aaa", b"bbbb")
    assert main(_args(tmp_path, str(src))) == 1
    assert "failed to write file" in capsys.readouterr().err


def test_env_defaults(tmp_path, monkeypatch):
    (tmp_path / "out").mkdir()
    src = write_input(tmp_path / "in.bin", b"aaaa", b"bbbb")
    monkeypatch.setenv("PREFIX_SHARD_PATH", str(tmp_path / "out" / "%"))
    monkeypatch.setenv("PREFIX_SHARD_HASH_SIZE", "4")
    assert main([str(src)]) == 0
    assert (tmp_path / "out" / "b").read_bytes() == b"bbb"


def test_bad_env_hash_size_is_usage_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PREFIX_SHARD_HASH_SIZE", "abc")
    with pytest.raises(SystemExit) as exc:
        main(["-"])
    assert exc.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_bad_env_log_level_is_usage_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PREFIX_SHARD_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        main(_args(tmp_path, "-"))
    assert exc.value.code == 2
    assert "invalid log level 'VERBOSE'" in capsys.readouterr().err


def test_version_ignores_bad_env(monkeypatch):
    monkeypatch.setenv("PREFIX_SHARD_HASH_SIZE", "abc")
    r = subprocess.run([sys.executable, "-m", "prefix_shard", "--version"],
                       capture_output=True, text=True, cwd=ROOT)
    assert r.returncode == 0
