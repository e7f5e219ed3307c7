"""Tests for scripts/show_env.py"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import show_env


@pytest.fixture
def env_file(tmp_path: Path) -> str:
    path = tmp_path / "app.env"
    path.write_text("SHOW_ENV_A=1\nSHOW_ENV_B=two\n")
    return str(path)


def test_prints_written_keys(env_file, capsys):
    with patch.dict(os.environ, {}, clear=False):
        for key in ("SHOW_ENV_A", "SHOW_ENV_B"):
            os.environ.pop(key, None)
        assert show_env.main(["show_env.py", "-envs", env_file]) == 0

    assert capsys.readouterr().out.splitlines() == ["SHOW_ENV_A=1", "SHOW_ENV_B=two"]


def test_json_selected_keys(env_file, capsys):
    with patch.dict(os.environ, {"SHOW_ENV_A": "old"}, clear=False):
        assert show_env.main(["show_env.py", "-e", env_file, "-o", "--json", "SHOW_ENV_A"]) == 0

    assert json.loads(capsys.readouterr().out) == {"SHOW_ENV_A": "1"}


def test_duplicate_overload_exits_nonzero(capsys):
    assert show_env.main(["show_env.py", "-o", "-eo"]) == 1
    assert "DUPLICATE_OVERLOAD_FLAG" in capsys.readouterr().err


def test_missing_file_exits_nonzero(tmp_path: Path, capsys):
    assert show_env.main(["show_env.py", "-envs", str(tmp_path / "nope.env")]) == 1
    assert "ENV_FILE_LOAD_ERROR" in capsys.readouterr().err


def test_clashing_flag_exits_nonzero(capsys):
    assert show_env.main(["show_env.py", "-output", "out.txt"]) == 1
    assert "FLAG_PARSE_ERROR" in capsys.readouterr().err


def test_unrecognized_flag_exits_nonzero(capsys):
    assert show_env.main(["show_env.py", "--verbose"]) == 1
    assert "unrecognized arguments: --verbose" in capsys.readouterr().err


def test_overload_switched_off(env_file, capsys):
    environ = {"UDOTENV_OVERLOAD_BY_DEFAULT": "true", "SHOW_ENV_A": "old"}
    with patch.dict(os.environ, environ, clear=False):
        assert show_env.main(["show_env.py", "-e", env_file, "-o=false", "--json", "SHOW_ENV_A"]) == 0

    assert json.loads(capsys.readouterr().out) == {"SHOW_ENV_A": "old"}
