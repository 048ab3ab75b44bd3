"""
Testing the console game with click's CliRunner.
The secret is pinned by patching get_generator where cli.py looks it up.
"""

import pytest
from click.testing import CliRunner

import codebreaker.cli as cli

from conftest import fixed_generator, sequence_generator

def digits(*guesses):
    """One line per digit, the way the game asks for them."""
    return "".join(f"{d}\n" for guess in guesses for d in guess)

@pytest.fixture
def runner():
    return CliRunner()

def pin_secret(monkeypatch, generator):
    monkeypatch.setattr(cli, "get_generator", lambda source, timeout: generator)

def test_win_on_first_guess(runner, monkeypatch):
    pin_secret(monkeypatch, fixed_generator([1, 2, 3]))

    result = runner.invoke(
        cli.main,
        ["--code-length", "3", "--max-digit", "3"],
        input=digits([1, 2, 3]) + "n\n",
    )

    assert result.exit_code == 0, result.output
    assert "Enter first number of the combination" in result.output
    assert "Result - Black: 3, White: 0" in result.output
    assert "Congratulations, you won!" in result.output
    assert "1 2 3  B: 3 W: 0" in result.output
    assert "End of the game." in result.output

def test_bad_digits_are_asked_again(runner, monkeypatch):
    pin_secret(monkeypatch, fixed_generator([1, 2, 3]))

    result = runner.invoke(
        cli.main,
        ["--code-length", "3", "--max-digit", "3"],
        input="x\n9\n1\n2\n3\nn\n",
    )

    assert result.exit_code == 0, result.output
    assert "Wrong input. Try again." in result.output
    assert "Value must be between 0 and 3." in result.output
    assert "Congratulations, you won!" in result.output

def test_running_out_of_guesses_reveals_code(runner, monkeypatch):
    pin_secret(monkeypatch, fixed_generator([1, 2, 3]))

    # length 3, digits 0..3 -> 6 attempts
    result = runner.invoke(
        cli.main,
        ["--code-length", "3", "--max-digit", "3"],
        input=digits(*([0, 0, 0] for _ in range(6))) + "n\n",
    )

    assert result.exit_code == 0, result.output
    assert "Amount of guesses made: 5 out of 6" in result.output
    assert "You ran out of guesses. Game over." in result.output
    assert "1 2 3" in result.output
    assert "Congratulations" not in result.output

def test_play_again_uses_a_new_secret(runner, monkeypatch):
    pin_secret(monkeypatch, sequence_generator([1, 2, 3], [3, 2, 1]))

    result = runner.invoke(
        cli.main,
        ["--code-length", "3", "--max-digit", "3"],
        input=digits([1, 2, 3]) + "y\n" + digits([1, 2, 3], [3, 2, 1]) + "n\n",
    )

    assert result.exit_code == 0, result.output
    assert result.output.count("Congratulations, you won!") == 2
    assert "Result - Black: 1, White: 2" in result.output

def test_configuration_is_prompted_until_valid(runner, monkeypatch):
    pin_secret(monkeypatch, fixed_generator([0, 0, 0]))

    result = runner.invoke(
        cli.main,
        [],
        input="2\n3\n10\n3\n" + digits([0, 0, 0]) + "n\n",
    )

    assert result.exit_code == 0, result.output
    assert "Set the secret code length (from 3 to 6)" in result.output
    assert "Set the max number used in code (from 3 to 9)" in result.output
    assert "Congratulations, you won!" in result.output

def test_whole_guess_can_be_typed_on_one_line(runner, monkeypatch):
    pin_secret(monkeypatch, fixed_generator([1, 2, 3]))

    result = runner.invoke(
        cli.main,
        ["--code-length", "3", "--max-digit", "3"],
        input="3 2 1\n12\n1,2,3\nn\n",
    )

    assert result.exit_code == 0, result.output
    assert "Result - Black: 1, White: 2" in result.output
    # two digits for a three-digit code is refused and asked again
    assert "Guess must have exactly 3 digits for this game." in result.output
    assert "Congratulations, you won!" in result.output
