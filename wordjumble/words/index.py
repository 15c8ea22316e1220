import logging
from collections import defaultdict
from typing import Iterable
from wordjumble.game.models import LengthFilter
from wordjumble.game.rules import accept, anagram_key, normalize

logger = logging.getLogger(__name__)

AnagramIndex = dict[str, list[str]]

def build_index(tokens: Iterable[str], length_filter: LengthFilter | None = None) -> AnagramIndex:
    """
    Groups every accepted token under its anagram key.
    Words within a key keep the order they were first seen in the source.
    """
    index: dict[str, list[str]] = defaultdict(list)
    accepted = 0
    for token in tokens:
        word = normalize(token)
        if not accept(word, length_filter):
            continue
        index[anagram_key(word)].append(word)
        accepted += 1

    logger.debug(f"Indexed {accepted} words under {len(index)} anagram keys")
    return dict(index)

def unique_words(index: AnagramIndex) -> list[str]:
    """
    Words that only "unjumble" one way, sorted.
    """
    return sorted(words[0] for words in index.values() if len(words) == 1)
