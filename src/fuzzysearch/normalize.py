from __future__ import annotations
from typing import Any, Iterable, List, Optional, Tuple


def to_text(value: Any) -> Optional[str]:
    """
    Coerce a field value to text for tokenizing.
    Rules:
      * None means "field absent" -> None
      * str is used as is
      * bytes are decoded as UTF-8 (undecodable bytes replaced)
      * anything else (numbers, bools, nested data) goes through str()
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def tokenize(text: str) -> List[str]:
    """Split on any whitespace run and lowercase every token."""
    return [tok.lower() for tok in text.split()]


def split_terms(phrase: str) -> Tuple[str, ...]:
    """Search phrase -> ordered tuple of lowercase terms (empty for a blank phrase)."""
    return tuple(tokenize(phrase))


def normalize_words(words: Iterable[str]) -> frozenset[str]:
    """Lowercase and de-duplicate a word list (used for skip words)."""
    out: set[str] = set()
    for w in words:
        out.update(tokenize(w))
    return frozenset(out)
