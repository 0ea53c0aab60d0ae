from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine import MalformedWordError, normalize_word


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list (one word per line), normalized to lowercase.

    Blank lines are skipped.  Any other line that is not a 5-letter word
    raises MalformedWordError naming the file and line number.
    """
    out: List[str] = []
    for lineno, raw in enumerate(read_lines(p), start=1):
        if not raw.strip():
            continue
        try:
            out.append(normalize_word(raw))
        except MalformedWordError as e:
            raise MalformedWordError(raw, f"{p}:{lineno}: {e.reason}") from e
    return out


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write words one per line to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
