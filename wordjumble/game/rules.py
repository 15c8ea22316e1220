import re
from wordjumble.game.models import LengthFilter

WORD_PATTERN = re.compile(r"[a-z]+")
ADJACENT_REPEAT = re.compile(r"(\w)\1+")

def normalize(token: str) -> str:
    """
    Single normalization step applied to every token entering the core.
    """
    return token.strip().lower()

def accept(token: str, length_filter: LengthFilter | None = None) -> bool:
    """
    Decides whether a token is a usable dictionary word once normalized:
    letters a-z only, and a length the filter permits.
    """
    token = normalize(token)
    if not WORD_PATTERN.fullmatch(token):
        return False
    if length_filter is not None and not length_filter.permits(len(token)):
        return False
    return True

def anagram_key(word: str) -> str:
    return "".join(sorted(word))

def has_adjacent_repeat(word: str) -> bool:
    # No words like ii, ooo or aaa
    return ADJACENT_REPEAT.search(word) is not None

def is_scrambleable(word: str) -> bool:
    """
    True when at least one permutation of the word differs from it.
    """
    return len(set(word)) > 1
