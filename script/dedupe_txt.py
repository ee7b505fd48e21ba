"""
Clean up a dictionary word list.

Features:
- Lowercases every word and drops blank/whitespace-only lines.
- Removes duplicates, preserving original order (stable dedupe).
- Optional --length filter (keep only words of exactly N letters).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in data/svenska6.txt --length 6 --sort
"""

import argparse
from pathlib import Path

from wordle_helper.datasets.io import read_lines, unique_preserve_order, write_lines


def clean_words(lines: list[str], length: int | None = None, sort: bool = False) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    if length is not None:
        words = [w for w in words if len(w) == length]
    out = unique_preserve_order(words)
    return sorted(out) if sort else out


def main():
    ap = argparse.ArgumentParser(description="Lowercase, dedupe and length-filter a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--length", type=int, help="keep only words with this many letters")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, length=args.length, sort=args.sort)
    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
