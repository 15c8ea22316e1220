import logging
import random
from wordjumble.game.errors import InvalidInputError, NoEligibleWordsError
from wordjumble.game.models import PuzzleEntry
from wordjumble.game.rules import has_adjacent_repeat, is_scrambleable
from wordjumble.game.scrambler import DEFAULT_MAX_ATTEMPTS, scramble
from wordjumble.words.index import AnagramIndex, unique_words

logger = logging.getLogger(__name__)

def candidate_pool(index: AnagramIndex) -> list[str]:
    """
    Unique words that are safe to put in a puzzle: no doubled letters
    and at least one permutation different from the word.
    """
    return [
        word for word in unique_words(index)
        if not has_adjacent_repeat(word) and is_scrambleable(word)
    ]

def select_words(index: AnagramIndex, count: int, rng: random.Random | None = None) -> list[str]:
    """
    Draws `count` words uniformly at random, with replacement, from the
    candidate pool.
    """
    if count < 1:
        raise InvalidInputError(f"Word count must be positive, got {count}")

    rng = rng or random.Random()
    pool = candidate_pool(index)
    if not pool:
        raise NoEligibleWordsError("No unique words available for the current length filter")

    logger.debug(f"Drawing {count} words from a pool of {len(pool)}")
    return [rng.choice(pool) for _ in range(count)]

def create_jumble(
    index: AnagramIndex,
    count: int,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> list[PuzzleEntry]:
    rng = rng or random.Random()
    words = select_words(index, count, rng)
    return [
        PuzzleEntry(scrambled=scramble(word, rng, max_attempts), solution=word)
        for word in words
    ]
