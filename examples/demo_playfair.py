"""
playfair_studio  |  Live Demo
=============================
Run:  python examples/demo_playfair.py

Walks one message through every stage: key square, pairs, per-pair
steps, ciphertext, round trip, spacing, and file export.
"""

import sys, os, tempfile
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_studio        import PlayfairCipher, run_cipher
from playfair_studio.render import (
    format_key_square, format_pairs, format_steps,
    render_key_square_png, export_result,
)

LINE = "═" * 70
KEY  = "KRIPTOGRAFI"
MSG  = "Hello world, meet me at the library"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  playfair_studio  |  Demo")
print(LINE)
print(f"  Key     : {KEY}")
print(f"  Message : {MSG}")

# ── key square ───────────────────────────────────────────────────────────────
header("Key square")
cipher = PlayfairCipher(KEY)
print("  " + format_key_square(cipher.key_square).replace("\n", "\n  "))

# ── encrypt ──────────────────────────────────────────────────────────────────
header("Encrypt")
enc = cipher.run(MSG, "encrypt")
ok("Pairs", format_pairs(enc.pairs))
print("  " + format_steps(enc.steps).replace("\n", "\n  "))
ok("Ciphertext", enc.result)

# ── decrypt ──────────────────────────────────────────────────────────────────
header("Decrypt")
dec = cipher.decrypt(enc.result)
ok("Plaintext (filler-padded)", dec)

# ── spacing ──────────────────────────────────────────────────────────────────
header("Keep spaces (best effort)")
spaced = run_cipher(MSG, KEY, "encrypt", keep_spaces=True)
ok("Spaced ciphertext", spaced.result)

# ── export ───────────────────────────────────────────────────────────────────
header("Export")
out_dir = tempfile.mkdtemp(prefix="playfair-")
path = export_result(enc.result, "encrypt", out_dir)
ok("Result written", str(path))
png = render_key_square_png(enc.matrix)
png_path = os.path.join(out_dir, "key-square.png")
with open(png_path, "wb") as f:
    f.write(png)
ok("Key square image", f"{png_path} ({len(png)} bytes)")
print(f"\n{LINE}\n")
