import json
import random
import pytest
from wordjumble.game.engine import JumbleEngine
from wordjumble.game.errors import InvalidInputError, NoEligibleWordsError, ResourceUnavailableError
from wordjumble.game.models import JumbleConfig, LengthFilter
from wordjumble.storage.json_store import JsonStorage
from wordjumble.words.bank import WordList

def test_create_puzzle_uses_configured_count(words):
    engine = JumbleEngine(WordList(words), JumbleConfig(num_words=4), random.Random(7))
    puzzle = engine.create_puzzle()

    assert len(puzzle.entries) == 4
    for entry in puzzle.entries:
        assert entry.solution in {"lamp", "monkey", "zebra"}
        assert entry.scrambled != entry.solution
        assert sorted(entry.scrambled) == sorted(entry.solution)

def test_create_puzzle_count_override(words):
    engine = JumbleEngine(WordList(words), rng=random.Random(1))
    assert len(engine.create_puzzle(count=2).entries) == 2
    with pytest.raises(InvalidInputError):
        engine.create_puzzle(count=0)

def test_create_puzzle_respects_length_filter(words):
    config = JumbleConfig(length_filter=LengthFilter(deny={4, 5}))
    engine = JumbleEngine(WordList(words), config, random.Random(5))
    assert engine.create_puzzle().solutions == ["monkey"] * 5

def test_create_puzzle_with_no_eligible_words(words):
    config = JumbleConfig(length_filter=LengthFilter(allow={3}))
    engine = JumbleEngine(WordList(words), config)
    with pytest.raises(NoEligibleWordsError):
        engine.create_puzzle()

def test_engine_round_trip(words):
    engine = JumbleEngine(WordList(words), rng=random.Random(42))
    for word in ["lamp", "monkey", "zebra"]:
        assert engine.solve_word(engine.scramble(word)) == [word]

def test_engine_solve_crossword(words):
    engine = JumbleEngine(WordList(words))
    assert engine.solve_crossword("c?m?l") == ["camel"]

def test_from_config_loads_dictionary(words_path):
    engine = JumbleEngine.from_config(JumbleConfig(dictionary=str(words_path)))
    assert engine.solve_word("tra") == ["rat", "art", "tar"]

def test_from_config_missing_dictionary(tmp_path):
    with pytest.raises(ResourceUnavailableError):
        JumbleEngine.from_config(JumbleConfig(dictionary=str(tmp_path / "nope.txt")))

def test_word_list_from_json(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["Listen", "silent", "lamp", 7]))
    word_list = WordList.from_file(path)

    assert len(word_list) == 3
    assert word_list.index() == {"eilnst": ["listen", "silent"], "almp": ["lamp"]}

@pytest.mark.parametrize("content", ["{not json", '{"words": ["a"]}'])
def test_word_list_rejects_bad_json(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content)
    with pytest.raises(ResourceUnavailableError):
        WordList.from_file(path)

def test_word_list_rejects_undecodable_json(tmp_path):
    path = tmp_path / "words.json"
    path.write_bytes(b'["caf\xe9"]')
    with pytest.raises(ResourceUnavailableError):
        WordList.from_file(path)

def test_word_list_caches_index_per_filter(words):
    word_list = WordList(words)
    first = word_list.index()

    assert word_list.index() is first
    assert word_list.index(LengthFilter()) is first
    assert word_list.index(LengthFilter(allow={3})) == {"art": ["rat", "art", "tar"]}
    assert word_list.index(LengthFilter(allow={3})) is word_list.index(LengthFilter(allow={3}))

def test_storage_round_trip(tmp_path, words):
    engine = JumbleEngine(WordList(words), JumbleConfig(num_words=3), random.Random(8))
    puzzle = engine.create_puzzle()
    storage = JsonStorage(str(tmp_path / "puzzles"))

    path = storage.save_puzzle(puzzle)
    assert path.exists()

    loaded = storage.load_all_puzzles()
    assert len(loaded) == 1
    assert loaded[0].entries == puzzle.entries
    assert loaded[0].config == puzzle.config
