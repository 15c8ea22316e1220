import logging
import random
from typing import List
from wordjumble.game.models import JumbleConfig, LengthFilter, Puzzle
from wordjumble.game.scrambler import scramble
from wordjumble.game.solver import solve_crossword, solve_word
from wordjumble.words.bank import WordList
from wordjumble.words.selector import create_jumble

logger = logging.getLogger(__name__)

class JumbleEngine:
    """
    Creates and solves Jumble puzzles against one word list.
    """
    
    def __init__(self, word_list: WordList, config: JumbleConfig | None = None, rng: random.Random | None = None):
        self.word_list = word_list
        self.config = config or JumbleConfig()
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: JumbleConfig, rng: random.Random | None = None):
        return cls(WordList.from_file(config.dictionary), config, rng)

    def create_puzzle(self, count: int | None = None) -> Puzzle:
        count = self.config.num_words if count is None else count
        index = self.word_list.index(self.config.length_filter)
        entries = create_jumble(index, count, self.rng, self.config.max_scramble_attempts)
        logger.debug(f"Created puzzle with {len(entries)} words")
        return Puzzle(entries=entries, config=self.config)

    def scramble(self, word: str) -> str:
        return scramble(word, self.rng, self.config.max_scramble_attempts)

    def solve_word(self, scrambled: str, length_filter: LengthFilter | None = None) -> List[str]:
        return solve_word(scrambled, self.word_list.tokens, length_filter)

    def solve_crossword(self, pattern: str) -> List[str]:
        return solve_crossword(pattern, self.word_list.tokens)
