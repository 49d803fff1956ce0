import pygame

from glide.game import NameEntry
from glide.storage import MAX_NAME_LENGTH, ScoreStore


def key(code: int, char: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=code, unicode=char)


def type_text(entry: NameEntry, text: str) -> None:
    for char in text:
        entry.handle_key(key(ord(char.lower()), char))


def test_prompt_prefilled_and_edited_before_saving(tmp_path):
    store = ScoreStore(tmp_path / "scores.json")
    entry = NameEntry(store, "Ada")
    entry.open(420)

    entry.handle_key(key(pygame.K_BACKSPACE))
    entry.handle_key(key(pygame.K_BACKSPACE))
    type_text(entry, "lan")
    assert entry.text == "Alan"
    assert store.entries == []

    assert entry.handle_key(key(pygame.K_RETURN, "\r"))
    assert not entry.active
    assert entry.saved is not None
    assert store.entries[0].name == "Alan"
    assert store.entries[0].score == 420
    assert store.last_name == "Alan"


def test_prompt_swallows_game_keys_while_typing(tmp_path):
    store = ScoreStore(tmp_path / "scores.json")
    entry = NameEntry(store, "")
    entry.open(10)
    for code, char in ((pygame.K_r, "r"), (pygame.K_q, "q"), (pygame.K_c, "c"), (pygame.K_SPACE, " ")):
        assert entry.handle_key(key(code, char))
    assert entry.text == "rqc "
    assert entry.active


def test_name_length_is_capped(tmp_path):
    entry = NameEntry(ScoreStore(tmp_path / "scores.json"), "")
    entry.open(1)
    type_text(entry, "x" * (MAX_NAME_LENGTH + 5))
    assert len(entry.text) == MAX_NAME_LENGTH


def test_blank_name_saved_as_default(tmp_path):
    store = ScoreStore(tmp_path / "scores.json")
    entry = NameEntry(store, "Bo")
    entry.open(5)
    entry.handle_key(key(pygame.K_BACKSPACE))
    entry.handle_key(key(pygame.K_BACKSPACE))
    entry.handle_key(key(pygame.K_RETURN, "\r"))
    assert store.entries[0].name == "Player"


def test_escape_discards_score(tmp_path):
    store = ScoreStore(tmp_path / "scores.json")
    entry = NameEntry(store, "Ada")
    entry.open(99)
    assert entry.handle_key(key(pygame.K_ESCAPE))
    assert not entry.active
    assert entry.saved is None
    assert store.entries == []


def test_c_clears_leaderboard_after_prompt_closes(tmp_path):
    path = tmp_path / "scores.json"
    store = ScoreStore(path)
    store.add_score("Old", 700, when=1.0)
    entry = NameEntry(store, "Ada")
    entry.open(50)
    entry.handle_key(key(pygame.K_RETURN, "\r"))
    assert len(store.entries) == 2

    assert entry.handle_key(key(pygame.K_c, "c"))
    assert store.entries == []
    assert ScoreStore(path).entries == []


def test_closed_prompt_leaves_other_keys_to_game(tmp_path):
    entry = NameEntry(ScoreStore(tmp_path / "scores.json"), "Ada")
    assert not entry.handle_key(key(pygame.K_r, "r"))
    assert not entry.handle_key(key(pygame.K_SPACE, " "))
    assert entry.text == "Ada"
