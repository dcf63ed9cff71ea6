"""
Binary trace helpers
====================
Fixed-width bit strings for the step table. 26 letters fit in 5 bits
(2^5 = 32), so every alphabet index renders as e.g. 7 -> "00111".

The XOR of two such strings is shown next to each step purely for teaching.
It never feeds back into the cipher output.
"""

BINARY_WIDTH = 5


def number_to_binary(num: int, width: int = BINARY_WIDTH) -> str:
    if num < 0 or num >= 1 << width:
        raise ValueError(f"{num} does not fit in {width} bits.")
    return format(num, f"0{width}b")


def binary_to_number(bits: str) -> int:
    return int(bits, 2)


def xor_binary(bits_a: str, bits_b: str) -> str:
    """Position-by-position XOR: "1" where the bits differ, "0" otherwise."""
    if len(bits_a) != len(bits_b):
        raise ValueError("Bit strings must have the same width.")
    return "".join("0" if a == b else "1" for a, b in zip(bits_a, bits_b))
