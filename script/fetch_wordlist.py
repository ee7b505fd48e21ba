"""
Download a word list and write a clean dictionary file for one language/length.

What it does:
- Downloads the page or plain-text file at --url.
- HTML pages are reduced to their visible text; plain text is used as is.
- Keeps tokens of exactly --length letters drawn from the language's alphabet.
- Lowercases, de-duplicates while preserving source order, and writes the file
  the helper loads for that (language, length), e.g. data/svenska6.txt.

Usage:
    python -m script.fetch_wordlist --language swedish --length 6 --url <word list url>
    # or alphabetically sorted:
    python -m script.fetch_wordlist --language english --length 5 --url <url> --sort
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from wordle_helper.datasets import dictionary_path, write_lines
from wordle_helper.datasets.io import unique_preserve_order
from wordle_helper.engine import get_profile, parse_language

TOKEN_RE = re.compile(r"[^\W\d_]+")


def extract_words(text: str, length: int, alphabet: str, html: bool = False) -> list[str]:
    if html:
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    words = [t.lower() for t in TOKEN_RE.findall(text)]
    words = [w for w in words if len(w) == length and all(ch in alphabet for ch in w)]
    return unique_preserve_order(words)


def fetch_words(url: str, length: int, alphabet: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    html = "html" in r.headers.get("Content-Type", "")
    return extract_words(r.text, length, alphabet, html=html)


def main():
    ap = argparse.ArgumentParser(description="Build a dictionary file from a downloaded word list")
    ap.add_argument("--language", required=True, help="swedish or english")
    ap.add_argument("--length", type=int, required=True, help="word length (5 or 6)")
    ap.add_argument("--url", required=True)
    ap.add_argument("--data-dir", default="data")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    language = parse_language(args.language)
    out = dictionary_path(language, args.length, args.data_dir)

    words = fetch_words(args.url, args.length, get_profile(language).alphabet)
    if args.sort:
        words = sorted(words)

    write_lines(words, out)
    print(f"Wrote {len(words)} words -> {out}")


if __name__ == "__main__":
    main()
