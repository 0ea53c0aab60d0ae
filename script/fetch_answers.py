"""
Build a candidate-secret list from a page of past daily answers.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Keeps the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order, and writes to file.

Usage:
    python -m script.fetch_answers --out packages/datasets/data/answers.txt
    python -m script.fetch_answers --sort --out packages/datasets/data/answers.txt
"""

import argparse
import logging
import re

import requests
from bs4 import BeautifulSoup

from packages.datasets import write_words
from packages.engine import is_well_formed

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")

log = logging.getLogger(__name__)


def parse_answers(html: str) -> list[str]:
    """Extract answers from the page HTML, unique, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(2).lower() for m in ROW_RE.finditer(text)]
    return [w for w in dict.fromkeys(words) if is_well_formed(w)]


def fetch_answers(url: str = URL, timeout: float = 30.0) -> list[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    answers = parse_answers(r.text)
    log.info("parsed %d answers from %s", len(answers), url)
    return answers


def main():
    ap = argparse.ArgumentParser(description="Fetch past daily answers as a candidate-secret list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/answers.txt")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    path = write_words(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {path}")


if __name__ == "__main__":
    main()
