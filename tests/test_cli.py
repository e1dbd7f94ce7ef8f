import pytest

from core.errors import RandomSourceUnavailable
from core.password_utils import AMBIGUOUS_CHARS
from ui import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SPG_MIN_LENGTH", "SPG_MAX_LENGTH", "SPG_DEFAULT_LENGTH", "SPG_MAX_QUANTITY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SPG_LOG_LEVEL", "WARNING")


def test_default_run(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert len(out[0]) == 16
    assert not set(out[0]) & AMBIGUOUS_CHARS


def test_count_and_strength(capsys):
    assert cli.main(["-l", "24", "-n", "3", "--symbols", "--strength"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    for line in lines:
        pw, rating = line.split("\t")
        assert len(pw) == 24
        assert rating.endswith("/100)")


def test_empty_selection(capsys):
    assert cli.main(["--no-lower", "--no-upper", "--no-digits"]) == 2
    assert "select at least one" in capsys.readouterr().err


def test_length_out_of_bounds(capsys):
    assert cli.main(["--length", "4"]) == 2
    assert "between 8 and 128" in capsys.readouterr().err


def test_bad_count(capsys):
    assert cli.main(["--count", "0"]) == 2


def test_missing_random_source(monkeypatch, capsys):
    def broken(*args, **kwargs):
        raise RandomSourceUnavailable()

    monkeypatch.setattr(cli, "generate_batch", broken)
    assert cli.main([]) == 1
    assert "secure random source" in capsys.readouterr().err


def test_default_log_level_keeps_stderr_quiet(monkeypatch, capsys):
    monkeypatch.setenv("SPG_LOG_LEVEL", "INFO")
    assert cli.main(["-n", "2"]) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 2
    assert captured.err == ""
