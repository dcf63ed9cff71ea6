"""
Report — plain-text rendering, export and file loading
======================================================
Presentation helpers that sit on top of the engine. Nothing here changes
cipher semantics; it only formats a TransformResult, writes the result to a
timestamped file and gates text files before they are fed to encrypt().

Export filename:  cipher-result-<UTC YYYY-MM-DDTHH-MM-SS>.txt
Export encoding:  UTF-8, result text only
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from .engine import DECRYPT, ENCRYPT, TransformResult
from .exceptions import InvalidTextError
from .normalizer import is_ascii_english_or_space

logger = logging.getLogger(__name__)

RESULT_PREFIX   = "cipher-result"
RESULT_ENCODING = "utf-8"
TEXT_SUFFIX     = ".txt"

ENGLISH_ONLY = "must contain only English letters and spaces"


# ── input gates ──────────────────────────────────────────────────────────────

def check_plaintext(text: str) -> str:
    """Strip and validate user plaintext before encryption."""
    text = text.strip()
    if not text:
        raise InvalidTextError("Enter text to encrypt")
    if not is_ascii_english_or_space(text):
        raise InvalidTextError(f"Plaintext {ENGLISH_ONLY}")
    return text


def check_ciphertext(text: str) -> str:
    """Strip and validate ciphertext before decryption."""
    text = text.strip()
    if not text:
        raise InvalidTextError("Enter ciphertext in Plaintext field to decrypt")
    return text


def check_key(text: str, operation: str = ENCRYPT) -> str:
    text = text.strip()
    if not text:
        action = "decryption" if operation == DECRYPT else "encryption"
        raise InvalidTextError(f"Enter key for {action}")
    return text


def load_text(path: Union[str, Path]) -> str:
    """
    Read a .txt file to use as cipher input.

    Raises InvalidTextError for a non-.txt file, undecodable bytes, blank
    content, or content with characters other than English letters and
    whitespace.
    """
    path = Path(path)
    if path.suffix.lower() != TEXT_SUFFIX:
        raise InvalidTextError("Please select a text file (.txt)")
    try:
        content = path.read_text(encoding=RESULT_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidTextError(f"Error reading file: {e}") from e
    if not content.strip():
        raise InvalidTextError("The selected file is empty")
    if not is_ascii_english_or_space(content):
        raise InvalidTextError(f"File {ENGLISH_ONLY}")
    logger.info(f"Loaded {path.name} ({len(content)} chars)")
    return content


# ── export ───────────────────────────────────────────────────────────────────

def result_filename(now: Optional[datetime] = None) -> str:
    """Timestamped export name, seconds precision, ':' and '.' replaced by '-'."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{RESULT_PREFIX}-{now.strftime('%Y-%m-%dT%H-%M-%S')}{TEXT_SUFFIX}"


def save_result(result: TransformResult,
                directory: Union[str, Path] = ".",
                now: Optional[datetime] = None) -> Path:
    """Write result_text to <directory>/cipher-result-<timestamp>.txt."""
    text = result.result_text.strip()
    if not text:
        raise InvalidTextError(
            "No result to download. Please encrypt or decrypt text first.")
    target = Path(directory) / result_filename(now)
    target.write_text(text, encoding=RESULT_ENCODING)
    logger.info(f"Saved {result.operation} result to {target}")
    return target


# ── rendering ────────────────────────────────────────────────────────────────

def render_summary(result: TransformResult) -> str:
    return "\n".join([
        f"Original Text: {result.source_text}",
        f"Key:           {result.key}",
        f"Result:        {result.result_text}",
    ])


def _table(header: List[str], rows: List[List[str]]) -> str:
    widths = [max(len(cell) for cell in col) for col in zip(header, *rows)]

    def line(cells):
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    rule = "-+-".join("-" * w for w in widths)
    return "\n".join([line(header), rule] + [line(r) for r in rows])


def render_steps(result: TransformResult) -> str:
    """Step-by-step modular arithmetic table, one row per letter."""
    if result.operation == ENCRYPT:
        char_col, result_col = "Char (M)", "Result (C)"
    else:
        char_col, result_col = "Char (C)", "Result (M)"
    header = ["#", char_col, "Index", "Binary", "Key (K)", "Key Index",
              "Key Binary", "Calculation", result_col]
    rows = [
        [str(s.position), s.input_char, str(s.input_index), s.input_binary,
         s.key_char, str(s.key_index), s.key_binary, s.calculation,
         f"{s.output_char} ({s.output_index})"]
        for s in result.steps
    ]
    return _table(header, rows)


def render_report(result: TransformResult) -> str:
    title = "Encryption" if result.operation == ENCRYPT else "Decryption"
    return "\n\n".join([
        title,
        render_summary(result),
        "Step-by-step Modular Arithmetic Calculations:",
        render_steps(result),
    ])
