import re

_DISALLOWED = re.compile(r'[^a-z0-9 ]')


def normalize_text(text: str) -> str:
    """
    Normalize ingredient or claim text for matching.
    - Lowercase
    - Remove every character outside [a-z0-9 ] (tabs and newlines included)
    - Trim surrounding whitespace

    Inner whitespace is not collapsed: "sodium  benzoate" stays as is, so that
    resolution is reproducible against the configured tables.
    """
    if not text:
        return ""

    text = text.lower()
    text = _DISALLOWED.sub('', text)

    return text.strip()


def contains_word(text: str, word: str) -> bool:
    """True if `word` equals `text` or appears in it bounded by spaces or string ends."""
    return (
        text == word
        or f" {word} " in text
        or text.startswith(f"{word} ")
        or text.endswith(f" {word}")
    )
