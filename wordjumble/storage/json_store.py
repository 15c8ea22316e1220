import json
from pathlib import Path
from typing import List
from wordjumble.game.models import Puzzle

class JsonStorage:
    """
    Saves generated puzzles as JSON files and reads them back.
    """
    
    def __init__(self, base_path: str = "puzzles"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def save_puzzle(self, puzzle: Puzzle) -> Path:
        filename = f"puzzle_{puzzle.timestamp.strftime('%Y%m%d_%H%M%S_%f')}.json"
        file_path = self.base_path / filename
        with open(file_path, 'w') as f:
            f.write(puzzle.model_dump_json(indent=2))
        return file_path

    def load_all_puzzles(self) -> List[Puzzle]:
        puzzles = []
        for file in sorted(self.base_path.glob("puzzle_*.json")):
            with open(file, 'r') as f:
                data = json.load(f)
                puzzles.append(Puzzle.model_validate(data))
        return puzzles
