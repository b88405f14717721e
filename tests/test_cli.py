import io
import sys

from minishell.cli import main, render
from minishell.models import Command, Redirection, TokenType
from minishell.parser import parse


def run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_render_lists_name_args_and_files():
    out = render(parse("cat < in out"))
    assert out == "command=cat\ncommand=cat\nargs=cat\nargs=out\nfile=in id=1\n"


def test_render_ids_follow_token_order():
    command = Command(
        name="x",
        redirections=[
            Redirection(TokenType.GREAT, "a"),
            Redirection(TokenType.LESSLESS, "b"),
            Redirection(TokenType.GREATGREAT, "c"),
        ],
    )
    lines = render([command]).splitlines()
    assert lines[-3:] == ["file=a id=2", "file=b id=3", "file=c id=4"]


def test_render_nameless_command():
    assert render([Command()]) == "command=(null)\ncommand=(null)\n"


def test_render_has_one_command_line_per_command_plus_one():
    out = render(parse("a | b | c"))
    assert sum(line.startswith("command=") for line in out.splitlines()) == 4


def test_render_empty_pipeline():
    assert render([]) == ""


def test_main_prints_parse(monkeypatch, capsys):
    assert run(monkeypatch, "ls -l\nexit\n") == 0
    out = capsys.readouterr().out
    assert "args=ls\nargs=-l\n" in out
    assert out.startswith("minishell>")


def test_main_stops_at_exit(monkeypatch, capsys):
    assert run(monkeypatch, "exit\nls\n") == 0
    assert "command=ls" not in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    assert run(monkeypatch, "echo hi\n") == 0
    assert "args=hi" in capsys.readouterr().out


def test_main_reports_errors_and_continues(monkeypatch, capsys):
    assert run(monkeypatch, "ls |\npwd\nexit\n") == 0
    captured = capsys.readouterr()
    assert captured.err == "minishell: pipe error\n"
    assert "command=pwd" in captured.out
    assert "command=ls" not in captured.out