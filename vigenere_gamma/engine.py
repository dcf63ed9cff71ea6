"""
Cipher Engine — Vigenère "gamma" with a binary trace
====================================================
Classic polyalphabetic substitution over A-Z. The key (the "gamma") is
repeated cyclically under the text and each letter is shifted by the
alphabet index of the key letter beneath it:

    encrypt:  C = (M + K) mod 26
    decrypt:  M = (C - K + 26) mod 26

Every call returns the result text plus one StepRecord per letter, so a
classroom UI can show the arithmetic column by column.

Not secure. Short repeating keys fall to Kasiski/Friedman analysis in
minutes. This is a teaching tool, not a confidentiality layer.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .binary import BINARY_WIDTH, binary_to_number, number_to_binary, xor_binary
from .exceptions import EmptyInputError, EmptyKeyError
from .normalizer import ALPHABET, ALPHABET_SIZE, char_by_index, char_index, normalize

logger = logging.getLogger(__name__)

ENCRYPT = "encrypt"
DECRYPT = "decrypt"

DEFAULT_KEY_LENGTH = 10


@dataclass(frozen=True)
class StepRecord:
    """
    One row of the step table.

    `input_*` is the letter consumed (plaintext when encrypting, ciphertext
    when decrypting), `output_*` the letter produced.

    `xor_bits` / `xor_value` are a didactic side column: the bitwise XOR of
    the two 5-bit indices. They are NOT part of the cipher and do not
    determine `output_char`.
    """

    position:     int
    operation:    str
    input_char:   str
    input_index:  int
    input_binary: str
    key_char:     str
    key_index:    int
    key_binary:   str
    xor_bits:     str
    xor_value:    int
    calculation:  str
    output_char:  str
    output_index: int

    # ── role-named views (plain/cipher side depends on the operation) ────────

    @property
    def plain_char(self) -> str:
        return self.input_char if self.operation == ENCRYPT else self.output_char

    @property
    def plain_index(self) -> int:
        return self.input_index if self.operation == ENCRYPT else self.output_index

    @property
    def plain_binary(self) -> str:
        return number_to_binary(self.plain_index)

    @property
    def cipher_char(self) -> str:
        return self.output_char if self.operation == ENCRYPT else self.input_char

    @property
    def cipher_index(self) -> int:
        return self.output_index if self.operation == ENCRYPT else self.input_index

    @property
    def cipher_binary(self) -> str:
        return number_to_binary(self.cipher_index)


@dataclass(frozen=True)
class TransformResult:
    """Outcome of one encrypt/decrypt call. Unpacks as (result_text, steps)."""

    result_text: str
    steps:       Tuple[StepRecord, ...]
    operation:   str
    source_text: str
    key:         str

    def __iter__(self) -> Iterator:
        return iter((self.result_text, self.steps))


# ── core transform ───────────────────────────────────────────────────────────

def _keystream(key: str, length: int) -> List[int]:
    """Alphabet indices of `key` repeated cyclically to `length`."""
    period = len(key)
    return [char_index(key[i % period]) for i in range(length)]


def _prepare(text: str, key: str, operation: str) -> Tuple[str, str]:
    source = normalize(text)
    gamma  = normalize(key)
    if not source:
        label = "Text" if operation == ENCRYPT else "Ciphertext"
        raise EmptyInputError(f"{label} must contain English letters")
    if not gamma:
        raise EmptyKeyError("Key must contain English letters")
    return source, gamma


def _transform(text: str, key: str, operation: str) -> TransformResult:
    source, gamma = _prepare(text, key, operation)
    stream = _keystream(gamma, len(source))

    out   = []
    steps = []
    for i, (ch, key_idx) in enumerate(zip(source, stream)):
        in_idx  = char_index(ch)
        in_bin  = number_to_binary(in_idx)
        key_bin = number_to_binary(key_idx)
        xor_bits = xor_binary(in_bin, key_bin)

        if operation == ENCRYPT:
            out_idx = (in_idx + key_idx) % ALPHABET_SIZE
            calc = f"({in_idx} + {key_idx}) mod {ALPHABET_SIZE} = {out_idx}"
        else:
            # +26 keeps the operand non-negative before the modulus
            out_idx = (in_idx - key_idx + ALPHABET_SIZE) % ALPHABET_SIZE
            calc = (f"({in_idx} - {key_idx} + {ALPHABET_SIZE}) "
                    f"mod {ALPHABET_SIZE} = {out_idx}")

        out_ch = char_by_index(out_idx)
        out.append(out_ch)
        steps.append(StepRecord(
            position=i + 1,
            operation=operation,
            input_char=ch,
            input_index=in_idx,
            input_binary=in_bin,
            key_char=gamma[i % len(gamma)],
            key_index=key_idx,
            key_binary=key_bin,
            xor_bits=xor_bits,
            xor_value=binary_to_number(xor_bits),
            calculation=calc,
            output_char=out_ch,
            output_index=out_idx,
        ))

    logger.debug(f"{operation}: {len(source)} letters, key period {len(gamma)}")
    return TransformResult(
        result_text="".join(out),
        steps=tuple(steps),
        operation=operation,
        source_text=source,
        key=gamma,
    )


def encrypt(plaintext: str, key: str) -> TransformResult:
    """
    Encrypt `plaintext` under `key`. Both are normalized first.

    Raises EmptyInputError / EmptyKeyError when either has no letters.
    """
    return _transform(plaintext, key, ENCRYPT)


def decrypt(ciphertext: str, key: str) -> TransformResult:
    """Inverse of encrypt(): decrypt(encrypt(P, K).result_text, K) == normalize(P)."""
    return _transform(ciphertext, key, DECRYPT)


# ── keys ─────────────────────────────────────────────────────────────────────

def generate_random_key(length_hint: int = 0) -> str:
    """
    Uniformly random A-Z key. Length is `length_hint` when positive,
    DEFAULT_KEY_LENGTH otherwise.
    """
    length = length_hint if length_hint > 0 else DEFAULT_KEY_LENGTH
    logger.debug(f"Random key: {length} letters")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def generate_key_for(text: str) -> str:
    """Random key as long as the letters in `text` (a one-time-pad style gamma)."""
    return generate_random_key(len(normalize(text)))


# ── key-bound wrapper ────────────────────────────────────────────────────────

class VigenereGammaCipher:
    """
    Vigenère cipher bound to one key.

        v  = VigenereGammaCipher("WORLD")
        ct = v.encrypt("hello").result_text      # "DSCWR"
    """

    ALPHA       = ALPHABET
    BINARY_BITS = BINARY_WIDTH

    def __init__(self, key: str):
        gamma = normalize(key)
        if not gamma:
            raise EmptyKeyError("Key must contain English letters")
        self._key = gamma

    @classmethod
    def random(cls, length: int = DEFAULT_KEY_LENGTH) -> "VigenereGammaCipher":
        return cls(generate_random_key(length))

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> TransformResult:
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> TransformResult:
        return decrypt(ciphertext, self._key)

    def __repr__(self):
        return f"VigenereGammaCipher(period={len(self._key)})"
