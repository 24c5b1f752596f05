import string

import pytest

from genpass import cli
from genpass.config import SYMBOLS
from genpass.tui import TerminalSetupError


def test_defaults():
    args = cli.build_parser().parse_args([])
    config = cli.config_from_args(args)

    assert (config.letters, config.uppercase, config.symbols, config.numbers) == (6, 2, 2, 4)
    assert config.entropy_source == "system"
    assert not args.print_only


def test_counts_are_clamped():
    args = cli.build_parser().parse_args(["--letters", "100", "--numbers", "-5"])
    config = cli.config_from_args(args)

    assert config.letters == 64
    assert config.numbers == 0


def test_entropy_options():
    args = cli.build_parser().parse_args(
        ["--entropy", "quantum", "--qubits", "8", "--entropy-rounds", "3"]
    )
    config = cli.config_from_args(args)

    assert config.entropy_source == "quantum"
    assert config.num_qubits == 8
    assert config.entropy_rounds == 3


def test_unknown_entropy_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--entropy", "dice"])
    assert excinfo.value.code == 2


def test_print_mode(capsys):
    code = cli.main(["--print", "--letters", "0", "--uppercase", "0", "--symbols", "3", "--numbers", "5"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[0].startswith("Generated password: ")
    password = out[0][len("Generated password: "):]
    assert len(password) == 8
    assert sum(ch in SYMBOLS for ch in password) == 3
    assert sum(ch in string.digits for ch in password) == 5
    assert out[1] == "Strength: Do not use"


def test_interactive_mode_runs_session(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run", lambda config, controller: calls.append((config, controller)))

    assert cli.main(["--letters", "10"]) == 0

    config, controller = calls[0]
    assert config.letters == 10
    assert controller.state.counts.letters == 10


def test_terminal_setup_failure_exit_code(monkeypatch, capsys):
    def fail(config, controller):
        raise TerminalSetupError("Could not initialise the terminal: no tty")

    monkeypatch.setattr(cli, "run", fail)

    assert cli.main([]) == 1
    assert "no tty" in capsys.readouterr().err


def test_bad_quantum_settings_are_usage_errors(monkeypatch):
    def reject(config=None):
        raise ValueError("Configured num_qubits=99 exceeds backend limit (29).")

    monkeypatch.setattr("genpass.app.make_random_source", reject)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--entropy", "quantum", "--qubits", "99"])
    assert excinfo.value.code == 2
