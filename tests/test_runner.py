import shlex
import sys

from pushswap.runner import PushSwap

_SOLVER = f"{shlex.quote(sys.executable)} -m pushswap.cli"


def test_run():
    ps = PushSwap(_SOLVER)
    ps.run("2 1 3")
    assert ps.commands
    assert ps.commands[0] == "sa"


def test_default_path():
    assert PushSwap().path == "./push_swap"


def test_run_collects_every_line(tmp_path):
    script = tmp_path / "fake.py"
    script.write_text("import sys\nprint('pb')\nprint('ra')\nprint(len(sys.argv) - 1)\n")
    ps = PushSwap(f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}")
    ps.run("5 6 7")
    assert ps.commands == ["pb", "ra", "3"]


def test_sorted_input_gives_no_commands():
    ps = PushSwap(_SOLVER)
    ps.run("1 2 3")
    assert ps.commands == []


def test_run_replaces_previous_commands():
    ps = PushSwap(_SOLVER)
    ps.run("2 1 3")
    assert ps.commands == ["sa"]
    ps.run("1 2 3")
    assert ps.commands == []


def test_missing_program_gives_no_commands(tmp_path):
    ps = PushSwap(shlex.quote(str(tmp_path / "missing")))
    ps.commands = ["stale"]
    ps.run("2 1 3")
    assert ps.commands == []