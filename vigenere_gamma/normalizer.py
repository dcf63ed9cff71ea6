"""
Normalizer — 26-letter English alphabet
=======================================
Every transform in the package works on NormalizedText: uppercase A-Z only,
in the order the letters appeared in the input. Everything else (digits,
punctuation, whitespace, accented or non-Latin letters) is discarded.

Alphabet index:  A=0, B=1, ... Z=25
"""

import string

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)   # 26

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def normalize(text: str) -> str:
    """Uppercase `text` and keep only alphabet letters, preserving order."""
    # uppercase first: "ß" -> "SS" survives, "é" -> "É" is dropped
    return "".join(ch for ch in text.upper() if ch in _INDEX)


def is_ascii_english_or_space(text: str) -> bool:
    """
    True when every non-whitespace character is an ASCII English letter.

    Input gate for callers; normalize() never applies it.
    """
    return all(ch in string.ascii_letters for ch in text if not ch.isspace())


def char_index(ch: str) -> int:
    try:
        return _INDEX[ch]
    except KeyError:
        raise ValueError(f"{ch!r} is not in the alphabet.") from None


def char_by_index(index: int) -> str:
    return ALPHABET[index % ALPHABET_SIZE]
