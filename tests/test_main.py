import pytest

import main


def _feeder(lines):
    lines = iter(lines)

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError
    return fake_input


def test_one_shot_prints_result(capsys):
    assert main.cli(["3", "4", "+"]) == 0

    assert capsys.readouterr().out == "7\n"


def test_expression_option(capsys):
    assert main.cli(["-e", "300 72 rad cos *", "--precision", "2"]) == 0

    assert capsys.readouterr().out.strip() == "92.71"


def test_one_shot_error_goes_to_stderr(capsys):
    assert main.cli(["-e", "8 0 /"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_list_operators(capsys):
    assert main.cli(["--list_operators"]) == 0

    assert "List of available commands" in capsys.readouterr().out


def test_interactive_session_keeps_stack(capsys):
    code = main.run_interactive(_feeder(["1 2", "+", "foo", "help", "quit", "5"]))

    out = capsys.readouterr().out
    assert code == 0
    assert "Stack: [1.00, 2.00]" in out
    assert "Stack: [3.00]" in out
    assert "Error: Couldn't parse 'foo'" in out
    assert "List of available commands" in out
    assert "Stack: [3.00, 5.00]" not in out


def test_interactive_session_ends_on_eof(capsys):
    code = main.run_interactive(_feeder(["2 SQRT"]))

    assert code == 0
    assert "Stack: [1.41]" in capsys.readouterr().out


def test_interactive_flag_starts_repl(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _feeder(["6 7 *"]))

    assert main.cli(["-i"]) == 0
    assert "Stack: [42.00]" in capsys.readouterr().out


def test_bad_log_level_is_rejected():
    with pytest.raises(SystemExit):
        main.cli(["--log_level", "loud", "1"])


def test_negative_precision_is_rejected(capsys):
    with pytest.raises(SystemExit):
        main.cli(["-e", "3 4 +", "--precision", "-1"])

    assert "must be >= 0" in capsys.readouterr().err


def test_interactive_flag_seeds_stack_with_expression(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _feeder(["+"]))

    assert main.cli(["-i", "3", "4"]) == 0

    out = capsys.readouterr().out
    assert "Stack: [3.00, 4.00]" in out
    assert "Stack: [7.00]" in out
