import random
from wordjumble.game.errors import DegenerateScrambleError, InvalidInputError
from wordjumble.game.rules import accept, is_scrambleable, normalize

DEFAULT_MAX_ATTEMPTS = 1000

def scramble(word: str, rng: random.Random | None = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> str:
    """
    Returns a random permutation of the word's letters that is guaranteed
    to differ from the word itself.
    """
    rng = rng or random.Random()
    word = normalize(word)
    if not accept(word):
        raise InvalidInputError(f"Cannot scramble {word!r}: expected letters a-z only")
    if not is_scrambleable(word):
        raise DegenerateScrambleError(f"Every permutation of {word!r} is identical to it")

    letters = list(word)
    for _ in range(max_attempts):
        rng.shuffle(letters)
        jumbled = "".join(letters)
        if jumbled != word:
            return jumbled

    raise DegenerateScrambleError(f"Could not scramble {word!r} in {max_attempts} attempts")
