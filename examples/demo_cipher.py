"""
vigenere_gamma — Live Demo
==========================
Run:  python examples/demo_cipher.py

Encrypts HELLO under WORLD, prints the full step table, decrypts it
back, then repeats the round trip with a random key.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_gamma        import VigenereGammaCipher, decrypt, encrypt, generate_key_for
from vigenere_gamma.report import check_ciphertext, check_key, check_plaintext, render_report

LINE = "═" * 70
MSG  = "HELLO"
KEY  = "WORLD"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  vigenere_gamma — Classroom Vigenère Demo")
    print(LINE)

    # ── encrypt ──────────────────────────────────────────────────────────────
    header(f"Encrypt {MSG} with key {KEY}")
    enc = encrypt(check_plaintext(MSG), check_key(KEY, "encrypt"))
    print(render_report(enc))

    # ── decrypt ──────────────────────────────────────────────────────────────
    header(f"Decrypt {enc.result_text} with key {KEY}")
    dec = decrypt(check_ciphertext(enc.result_text), check_key(KEY, "decrypt"))
    print(render_report(dec))
    ok("Round-trip", dec.result_text)

    # ── random key ───────────────────────────────────────────────────────────
    header("Random key, same length as the message")
    text = "Attack at dawn"
    v    = VigenereGammaCipher(generate_key_for(text))
    ct   = v.encrypt(check_plaintext(text)).result_text
    pt   = v.decrypt(ct).result_text
    ok("Key",       v.key)
    ok("Encrypted", ct)
    ok("Decrypted", pt)

    # ── XOR column is cosmetic ───────────────────────────────────────────────
    header("XOR trace vs. cipher index")
    for s in enc.steps:
        ok(f"{s.input_char} ^ {s.key_char}",
           f"{s.xor_bits} = {s.xor_value:2d}   cipher index {s.output_index:2d}")

    print(f"\n{LINE}\n")
