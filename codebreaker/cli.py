"""Console front-end: configure, guess digit by digit, play again."""

import logging

import click

from .config import (
    MAX_CODE_LENGTH,
    MAX_MAX_DIGIT,
    MIN_CODE_LENGTH,
    MIN_MAX_DIGIT,
    GameConfig,
    load_settings,
    setup_logging,
)
from .random_client import get_generator
from .session import GameSession
from .types import Code
from .validation import parse_digit, parse_guess

logger = logging.getLogger(__name__)

ORDINALS = ["first", "second", "third", "fourth", "fifth", "sixth"]


def show_history(session: GameSession) -> None:
    click.echo("Latest guesses: ")
    for entry in session.history.entries_newest_first():
        digits = " ".join(str(d) for d in entry.guess)
        click.echo(f"{digits}  B: {entry.black} W: {entry.white}")
    click.echo(f"\nAmount of guesses made: {session.attempts_used} out of {session.max_attempts}")


def read_guess(config: GameConfig) -> Code:
    """
    Ask for the guess one digit per position. The first prompt also takes
    the whole combination on one line ("1 2 3 4", "1,2,3,4" or "1234").
    """
    click.echo(f"\nEnter your guess (number range from 0 (blank) to {config.max_digit})")
    guess: Code = []
    for position in range(config.code_length):
        while True:
            text = click.prompt(
                f"Enter {ORDINALS[position]} number of the combination",
                type=str,
                prompt_suffix=": ",
            )
            parsed = parse_digit(text, config.max_digit)
            if parsed.ok:
                guess.append(parsed.value)
                break
            if position == 0 and len(text.strip()) > 1:
                whole = parse_guess(text, config)
                if whole.ok:
                    return whole.value
                parsed = whole
            click.echo(parsed.error)
    return guess


def play_round(session: GameSession) -> None:
    while not session.is_over:
        show_history(session)
        guess = read_guess(session.config)
        score = session.submit_guess(guess)
        click.echo(f"\nResult - Black: {score.black}, White: {score.white}\n")

    if session.status == "won":
        click.echo("Congratulations, you won!\n")
        show_history(session)
    else:
        click.echo("You ran out of guesses. Game over.")
        click.echo("The code was: ")
        click.echo(" ".join(str(d) for d in session.reveal_secret()))


@click.command(name="codebreaker")
@click.option(
    "--code-length",
    type=click.IntRange(MIN_CODE_LENGTH, MAX_CODE_LENGTH),
    prompt=f"Set the secret code length (from {MIN_CODE_LENGTH} to {MAX_CODE_LENGTH})",
    help="Number of digits in the secret code.",
)
@click.option(
    "--max-digit",
    type=click.IntRange(MIN_MAX_DIGIT, MAX_MAX_DIGIT),
    prompt=f"Set the max number used in code (from {MIN_MAX_DIGIT} to {MAX_MAX_DIGIT})",
    help="Highest digit that can appear in the code.",
)
@click.option(
    "--source",
    type=click.Choice(["local", "random.org"]),
    default=None,
    help="Where the secret digits come from (default: CODEBREAKER_SECRET_SOURCE or local).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging to console")
def main(code_length: int, max_digit: int, source: str, verbose: bool) -> None:
    """Guess the hidden digit code before you run out of attempts."""
    settings = load_settings()
    setup_logging("WARNING", verbose=verbose)

    generator = get_generator(source or settings.secret_source, settings.random_timeout)
    config = GameConfig(code_length=code_length, max_digit=max_digit)
    session = GameSession(config, generator=generator)

    while True:
        play_round(session)
        if not click.confirm("\nPlay again?", default=False):
            break
        logger.debug("Replaying with %s", config)
        session.replay()

    click.echo("End of the game.")


if __name__ == "__main__":
    main()
