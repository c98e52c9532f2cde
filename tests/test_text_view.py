import pytest

from linked_list_algorithms.algorithms import find_middle_steps, remove_nth_from_end_steps, reverse_list_steps
from linked_list_algorithms.cli import main
from linked_list_algorithms.text_view import format_step, format_steps

from helpers import snapshot


def test_format_step_with_sentinel():
    steps = list(reverse_list_steps(snapshot(10, 20)))
    text = format_step(steps[0], 0, len(steps))
    assert text.splitlines() == [
        "Step 1/11",
        "10 -> 20 -> None",
        "prev=None, current=0 (10)",
        "> Start reversal. `prev` is null, `current` is at HEAD (index 0).",
    ]


def test_format_markers():
    middle = list(find_middle_steps(snapshot(1, 2, 3)))[-1]
    assert "1 -> [2] -> 3 -> None" in format_step(middle)
    removal = list(remove_nth_from_end_steps(snapshot(1, 2, 3), 1))[-2]
    assert "1 -> 2 -> ~3~ -> None" in format_step(removal)


def test_format_steps_numbers_every_step():
    steps = list(find_middle_steps(snapshot(1, 2, 3, 4)))
    text = format_steps(steps)
    assert "Step 1/5" in text and "Step 5/5" in text


def test_cli_prints_one_step(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["reverse", "10", "20", "30", "--step", "15"]) == 0
    out = capsys.readouterr().out
    assert "Step 15/15" in out
    assert "30 -> 20 -> 10 -> None" in out


def test_cli_remove_nth_invalid_n_is_reported(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["remove-nth", "10", "20", "30", "-n", "5"]) == 0
    out = capsys.readouterr().out
    assert "Step 1/1" in out
    assert "[1, 3]" in out


def test_cli_rejects_n_outside_remove_nth(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["reverse", "1", "2", "-n", "1"])
    assert exc.value.code == 2


def test_cli_rejects_output_outside_matplotlib(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["find-middle", "1", "2", "--output", "x.gif"])
    assert exc.value.code == 2


def test_cli_profile_writes_timing_summary(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["find-middle", "1", "2", "3", "--profile", "--step", "1"]) == 0
    out = capsys.readouterr().out
    assert "cumulative" in out
    assert "Summary by ('file', 'line')" in out
    assert "cli.py:" in out
    assert (tmp_path / "timing.csv").exists()
