#!/usr/bin/env python3
"""
Candidate label generation.

Index i in [0, base**length) is written in base len(alphabet),
most significant digit first, so the output is deterministic and
ordered by the alphabet.
"""

from enum import Enum


LETTERS = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"


class CharsetMode(Enum):
    """Character class used to build candidates."""
    LETTERS = "letters"
    NUMBERS = "numbers"
    ALPHANUMERIC = "alphanumeric"


_ALPHABETS = {
    CharsetMode.LETTERS: LETTERS,
    CharsetMode.NUMBERS: NUMBERS,
    CharsetMode.ALPHANUMERIC: LETTERS + NUMBERS,
}


def alphabet_for(mode: CharsetMode) -> str:
    return _ALPHABETS[mode]


def mode_from_flags(letters: bool = False, numbers: bool = False) -> CharsetMode:
    """Map --letters/--numbers to a mode. --numbers takes precedence."""
    if numbers:
        return CharsetMode.NUMBERS
    if letters:
        return CharsetMode.LETTERS
    return CharsetMode.ALPHANUMERIC


def combination_count(length: int, mode: CharsetMode) -> int:
    return len(alphabet_for(mode)) ** length


def generate_combinations(length: int, mode: CharsetMode = CharsetMode.ALPHANUMERIC) -> list[str]:
    """
    Generate every string of `length` characters over the mode's alphabet.

    Args:
        length: Number of characters per candidate (>= 1)
        mode: Character class

    Returns:
        len(alphabet) ** length distinct candidates in lexicographic order
    """
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")

    chars = alphabet_for(mode)
    base = len(chars)
    total = base ** length

    combinations = []
    for i in range(total):
        combo = []
        n = i
        for _ in range(length):
            combo.append(chars[n % base])
            n //= base
        combinations.append("".join(reversed(combo)))

    return combinations


def parse_check_list(value: str) -> list[str]:
    """Split a comma separated --check value, trimming each entry."""
    return [item.strip() for item in value.split(",") if item.strip()]
