def normalize(text: str) -> str:
    """
    Canonical form used for words and submitted answers:
    trimmed and uppercased, with Turkish dotted capital I folded to plain I
    so "kedi", "KEDI" and "KEDİ" all compare equal.
    """
    # U+0307 is the combining dot that a decomposed dotted i keeps through upper()
    return text.strip().upper().replace("İ", "I").replace("\u0307", "")


def is_canonical(word: str) -> bool:
    """Return True if the word is a non-empty alphabetic token in canonical form."""
    return bool(word) and word.isalpha() and normalize(word) == word


def is_correct_answer(user_answer: str, word: str) -> bool:
    """Exact match after normalization. `word` must already be canonical."""
    return normalize(user_answer) == word
