"""
gcm_envelope — Live Demo
========================
Run:  python examples/demo_envelope.py [-v]

Walks a JSON-style API payload through every layer, with a fixed key
and fixed nonce so the output is reproducible, then shows tamper
detection. Pass -v for DEBUG size logging from the library.
"""

import sys, os, time, base64, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gcm_envelope import EnvelopeCipher, AuthenticationFailed

LINE  = "═" * 70
KEY   = bytes.fromhex("d50ec22b016bc0a3fbaaf99816ec397714a7dfb992e847c491d83656324f5cda")
NONCE = "1035db"
MSG   = ('{ url: "/v1/direct_credit/payee/inquiry", base64: "eyJyZXFSZWZObyI6IjE3NDE4'
         'MzM0NjUiLCJwYXllZUNvZGUiOiIiLCJ0b0JhbmtCaWNDb2RlIjoiIiwidG9BY2NvdW50Tm8iOiIifQ==", }')

def header(layer, name):
    print(f"\n{LINE}")
    print(f"  Layer {layer} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format=' %(name)s: %(message)s')

    env = EnvelopeCipher()

    print(f"\n{LINE}")
    print(f"  gcm_envelope — {env!r}")
    print(LINE)
    print(f"  Message: {MSG[:60]}...\n")

    # ── LAYER 1 ──────────────────────────────────────────────────────────────
    header(1, "KEYS")
    ok("Random key",   f"{len(env.generate_key())} bytes")
    ok("Random nonce", env.generate_nonce().decode("ascii"))
    ok("Demo key",     KEY.hex()[:32] + "...")
    ok("Demo nonce",   NONCE)

    # ── LAYER 2 ──────────────────────────────────────────────────────────────
    header(2, "CORE — AES-256-GCM")
    t0 = time.perf_counter()
    ct, nonce, tag = env.encrypt(MSG, KEY, NONCE)
    pt = env.decrypt(ct, KEY, nonce, tag)
    elapsed = time.perf_counter() - t0
    ok("Ciphertext (base64)",       base64.b64encode(ct).decode()[:40] + "...")
    ok("Ciphertext+tag (base64)",   base64.b64encode(ct + tag).decode()[:40] + "...")
    ok("Nonce",                     f"{nonce.decode()} (hex {nonce.hex()})")
    ok("Tag",                       tag.hex())
    ok("Round-trip",                f"{elapsed*1000:.2f} ms")
    ok("Decrypted",                 pt.decode()[:40] + "...")

    # ── LAYER 3 ──────────────────────────────────────────────────────────────
    header(3, "BUFFER — nonce || tag || ciphertext")
    blob = env.encode_to_buffer(MSG, KEY, NONCE)
    ok("Blob size", f"{len(blob)} bytes (nonce=6 + tag=16 + data={len(blob) - 22})")
    ok("Header",    f"{blob[:6].decode()} | {blob[6:22].hex()}")
    ok("Decrypted", env.decode_from_buffer(blob, KEY).decode()[:40] + "...")

    # ── LAYER 4 ──────────────────────────────────────────────────────────────
    header(4, "TEXT — base64")
    text = env.encode_to_text(MSG, KEY, NONCE)
    ok("Text",      text[:48] + "...")
    ok("Decrypted", env.decode_from_text(text, KEY).decode()[:40] + "...")

    # ── TAMPER ───────────────────────────────────────────────────────────────
    header("!", "TAMPER DETECTION")
    bad = bytearray(blob)
    bad[-1] ^= 0x01
    try:
        env.decode_from_buffer(bytes(bad), KEY)
        print("  ✗  tampered blob decrypted")
        sys.exit(1)
    except AuthenticationFailed as e:
        ok("Rejected", str(e))

    print(f"\n{LINE}\n")
