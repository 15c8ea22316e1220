from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, PositiveInt

DEFAULT_DICTIONARY = "/usr/share/dict/words"

class LengthFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow: frozenset[PositiveInt] = frozenset()  # Empty = every length allowed
    deny: frozenset[PositiveInt] = frozenset()   # Empty = no length denied

    def permits(self, length: int) -> bool:
        if self.allow and length not in self.allow:
            return False
        return length not in self.deny

class JumbleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    num_words: PositiveInt = 5                    # Words per puzzle
    dictionary: str = DEFAULT_DICTIONARY          # One word per line, or a JSON array
    length_filter: LengthFilter = Field(default_factory=LengthFilter)
    max_scramble_attempts: PositiveInt = 1000     # Shuffles before giving up on a word

class PuzzleEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    scrambled: str
    solution: str

    def __str__(self) -> str:
        return f"{self.scrambled} ({self.solution})"

class Puzzle(BaseModel):
    entries: list[PuzzleEntry]
    config: JumbleConfig
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def solutions(self) -> list[str]:
        return [entry.solution for entry in self.entries]
