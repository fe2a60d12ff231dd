import io

from dequeemu.cli import main, render, run_commands
from dequeemu.emulator import DequeEmulator


def test_render_empty():
    lines = render(DequeEmulator()).splitlines()
    assert lines[0] == "size: 0"
    assert "> end" in lines


def test_render_marks_current_row():
    emu = DequeEmulator()
    emu.load_tea()
    lines = render(emu).splitlines()
    marked = [line for line in lines if line.startswith(">")]
    assert len(marked) == 1
    assert "Чай Лунцзин" in marked[0]


def test_run_commands_moves_iterator():
    emu = DequeEmulator()
    out = io.StringIO()
    run_commands(emu, ["tea\n", "inc\n"], out)
    assert emu.model.position == 1
    assert "Эрл Грей" in out.getvalue()


def test_run_commands_sets_fields_and_pushes():
    emu = DequeEmulator()
    run_commands(emu, ["text hello", "push_back", "text world", "push_front"], io.StringIO())
    assert emu.model.items == ["world", "hello"]


def test_run_commands_row_and_resize():
    emu = DequeEmulator()
    out = io.StringIO()
    run_commands(emu, ["cakes", "row 2", "size -3", "resize"], out)
    assert emu.model.items[0] == "Красный бархат"
    assert "error:" in out.getvalue()


def test_unknown_command_reported():
    emu = DequeEmulator()
    out = io.StringIO()
    run_commands(emu, ["bogus"], out)
    assert out.getvalue() == "unknown command: bogus\n"


def test_quit_stops_processing():
    emu = DequeEmulator()
    run_commands(emu, ["quit", "tea"], io.StringIO())
    assert emu.model.items == []


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("tea\nshuffle\nsort\nquit\n"))
    assert main(["--seed", "3"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("size: 0")
    assert "Чай Лунцзин" in output