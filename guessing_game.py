#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
guessing_game.py

Guess the secret number between 1 and 100. Each guess gets a hint
("Too small!" / "Too big!") until the right number is entered.

Usage:
  python guessing_game.py
"""

import enum
import random
import re
import sys
from typing import Optional

SECRET_MIN = 1
SECRET_MAX = 100
GUESS_MAX = 2**32 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class ParseFailure(ValueError):
    """Guess text is not an unsigned integer. Recovered by re-prompting."""


class IOFailure(OSError):
    """Reading from standard input failed. Fatal."""


class Ordering(enum.Enum):
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


def initialize(rng: Optional[random.Random] = None, show_secret: bool = False) -> int:
    """Draw the secret from [SECRET_MIN, SECRET_MAX].

    ``show_secret`` prints the drawn value; only meant for debugging.
    """
    rng = rng or random
    secret = rng.randint(SECRET_MIN, SECRET_MAX)
    if show_secret:
        print(f"Secret number: {secret}")
    return secret


def read_guess() -> str:
    try:
        return input("Please input your guess: ")
    except (EOFError, OSError, UnicodeDecodeError) as e:
        raise IOFailure(f"stdin closed or unreadable ({e.__class__.__name__})") from e


def parse_guess(raw_line: str) -> int:
    """Convert a raw line to an unsigned 32-bit integer.

    Only ASCII digits with an optional leading ``+`` are accepted, after
    stripping surrounding whitespace. Raises ``ParseFailure`` otherwise.
    """
    text = raw_line.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseFailure(f"not an unsigned integer: {raw_line!r}")
    value = int(text)
    if value > GUESS_MAX:
        raise ParseFailure(f"out of range: {text}")
    return value


def compare(guess: int, secret: int) -> Ordering:
    if guess < secret:
        return Ordering.LESS
    if guess > secret:
        return Ordering.GREATER
    return Ordering.EQUAL


def play_game(secret: Optional[int] = None) -> int:
    """Main game loop. Returns the number of valid guesses it took to win.

    Malformed input is skipped without a message and does not count.
    ``IOFailure`` from the reader is not caught here.
    """
    print("🎲 Guess the number between 1 and 100!")
    if secret is None:
        secret = initialize()

    attempts = 0
    while True:
        raw = read_guess()
        try:
            guess = parse_guess(raw)
        except ParseFailure:
            continue

        attempts += 1
        print(f"You guessed: {guess}")

        result = compare(guess, secret)
        if result is Ordering.LESS:
            print("⬇️ Too small!")
        elif result is Ordering.GREATER:
            print("⬆️ Too big!")
        else:
            print(f"✅ You win! Guessed in {attempts} attempts.")
            return attempts


def main() -> int:
    try:
        play_game()
    except IOFailure as e:
        print(f"[ERROR] Failed to read line: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
