"""
vigenere_gamma — classroom Vigenère cipher with a step trace
============================================================
Polyalphabetic substitution over the 26-letter English alphabet,
returning every intermediate value so learners can follow the
modular arithmetic letter by letter.

Modules:
    normalizer  — A-Z normalization, alphabet lookups, input gate
    binary      — 5-bit index rendering and the didactic XOR column
    engine      — encrypt / decrypt / random keys / StepRecord
    report      — text tables, timestamped export, .txt loading

Not for protecting anything. See engine.py for why.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .exceptions import CipherError, EmptyInputError, EmptyKeyError, InvalidTextError
from .normalizer import ALPHABET, ALPHABET_SIZE, normalize, is_ascii_english_or_space
from .engine     import (
    StepRecord,
    TransformResult,
    VigenereGammaCipher,
    decrypt,
    encrypt,
    generate_key_for,
    generate_random_key,
)

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "normalize",
    "is_ascii_english_or_space",
    "encrypt",
    "decrypt",
    "generate_random_key",
    "generate_key_for",
    "StepRecord",
    "TransformResult",
    "VigenereGammaCipher",
    "CipherError",
    "EmptyInputError",
    "EmptyKeyError",
    "InvalidTextError",
]
