import json
import logging
import threading
from pathlib import Path
from typing import Iterable
from wordjumble.game.errors import ResourceUnavailableError
from wordjumble.game.models import LengthFilter
from wordjumble.words.index import AnagramIndex, build_index

logger = logging.getLogger(__name__)

class WordList:
    """
    Holds the raw word source and caches the anagram index built from it.
    Cached indexes are never mutated after they are built, so one WordList
    can be shared between engines.
    """
    
    def __init__(self, words: Iterable[str]):
        self.tokens = tuple(words)
        # LengthFilter -> AnagramIndex
        self._indexes: dict[LengthFilter, AnagramIndex] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, filepath: str | Path):
        """
        Loads a dictionary file: a JSON array of strings for .json files,
        otherwise one word per line.
        """
        path = Path(filepath)
        try:
            if path.suffix == ".json":
                with open(path, 'r', encoding='utf-8') as f:
                    words = json.load(f)
                if not isinstance(words, list):
                    raise ResourceUnavailableError(f"{path} must contain a JSON array of words")
                words = [w for w in words if isinstance(w, str)]
            else:
                with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                    words = f.read().splitlines()
        except OSError as e:
            raise ResourceUnavailableError(f"Cannot open {path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResourceUnavailableError(f"Cannot parse {path}: {e}") from e

        logger.debug(f"Loaded {len(words)} tokens from {path}")
        return cls(words)

    def __len__(self) -> int:
        return len(self.tokens)

    def index(self, length_filter: LengthFilter | None = None) -> AnagramIndex:
        length_filter = length_filter or LengthFilter()
        with self._lock:
            if length_filter not in self._indexes:
                self._indexes[length_filter] = build_index(self.tokens, length_filter)
            return self._indexes[length_filter]
