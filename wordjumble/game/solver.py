import logging
from typing import Iterable, List
from wordjumble.game.errors import InvalidInputError
from wordjumble.game.models import LengthFilter
from wordjumble.game.rules import WORD_PATTERN, accept, anagram_key, normalize

logger = logging.getLogger(__name__)

WILDCARD = "?"

def _candidates(tokens: Iterable[str], length: int, length_filter: LengthFilter | None = None):
    """
    Yields each accepted word of the given length once, in source order.
    """
    seen = set()
    for token in tokens:
        word = normalize(token)
        if len(word) != length or word in seen:
            continue
        if not accept(word, length_filter):
            continue
        seen.add(word)
        yield word

def solve_word(scrambled: str, tokens: Iterable[str], length_filter: LengthFilter | None = None) -> List[str]:
    """
    Returns every dictionary word made of exactly the letters of `scrambled`.
    An empty list means the letters spell nothing in the dictionary.
    """
    word = normalize(scrambled)
    if not WORD_PATTERN.fullmatch(word):
        raise InvalidInputError(f"No word to solve: {scrambled!r} is not alphabetic")

    key = anagram_key(word)
    matches = [
        candidate for candidate in _candidates(tokens, len(word), length_filter)
        if anagram_key(candidate) == key
    ]
    logger.debug(f"solve_word({word!r}) -> {len(matches)} matches")
    return matches

def solve_crossword(pattern: str, tokens: Iterable[str]) -> List[str]:
    """
    Solves an incomplete word as needed for a crossword. `pattern` uses
    '?' for unknown letters, e.g. 'c?m?l'.
    """
    pattern = normalize(pattern)
    if any(ch != WILDCARD and not ("a" <= ch <= "z") for ch in pattern):
        raise InvalidInputError(f"Pattern {pattern!r} may only contain letters a-z and '{WILDCARD}'")

    fixed = [(i, ch) for i, ch in enumerate(pattern) if ch != WILDCARD]
    matches = [
        candidate for candidate in _candidates(tokens, len(pattern))
        if all(candidate[i] == ch for i, ch in fixed)
    ]
    logger.debug(f"solve_crossword({pattern!r}) -> {len(matches)} matches")
    return matches
