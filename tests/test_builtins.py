import io
import os
from unittest import mock

import pytest

from minishell.builtins import echo, env, is_builtin, pwd, unset
from minishell.environment import EnvStore


@pytest.mark.parametrize("name", ["echo", "cd", "pwd", "exit", "unset", "env"])
def test_builtin_names(name):
    assert is_builtin([name, "arg"]) is True


@pytest.mark.parametrize("args", [["ls"], ["export"], ["ECHO"], []])
def test_non_builtins(args):
    assert is_builtin(args) is False


def test_echo_joins_with_spaces_and_newline():
    out = io.StringIO()
    echo(["echo", "hello", "world"], out)
    assert out.getvalue() == "hello world\n"


def test_echo_without_arguments_prints_newline():
    out = io.StringIO()
    echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_echo_n_flag_suppresses_newline():
    out = io.StringIO()
    echo(["echo", "-n", "hi"], out)
    assert out.getvalue() == "hi"


def test_echo_n_flag_anywhere_and_trailing_space_kept():
    out = io.StringIO()
    echo(["echo", "hi", "-n"], out)
    assert out.getvalue() == "hi "
    assert not out.getvalue().endswith("\n")


def test_env_prints_only_variables_with_values():
    store = EnvStore(["A=1", "FLAG", "B=two"])
    out, err = io.StringIO(), io.StringIO()
    env(["env"], store, out, err)
    assert out.getvalue().splitlines() == ["A=1", "B=two"]
    assert err.getvalue() == ""


def test_env_with_argument_reports_error_and_still_prints():
    store = EnvStore(["A=1"])
    out, err = io.StringIO(), io.StringIO()
    env(["env", "extra"], store, out, err)
    assert err.getvalue() == "No such file or directory\n"
    assert out.getvalue().splitlines() == ["A=1"]


def test_pwd_prints_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out, err = io.StringIO(), io.StringIO()
    pwd(out, err)
    assert out.getvalue() == os.getcwd() + "\n"
    assert err.getvalue() == ""


def test_pwd_reports_failure():
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("os.getcwd", side_effect=OSError(2, "gone")):
        pwd(out, err)
    assert out.getvalue() == ""
    assert err.getvalue().startswith("Path not found")
    assert "gone" in err.getvalue()


def test_unset_removes_named_variables():
    store = EnvStore(["A=1", "B=2", "C=3"])
    unset(["unset", "A", "C", "MISSING"], store)
    assert [var.key for var in store] == ["B"]


def test_unset_without_names_changes_nothing():
    store = EnvStore(["A=1"])
    unset(["unset"], store)
    assert len(store) == 1