import pytest

from shufflekey.config.character_sets import (
    available_character_sets,
    get_character_set,
    load_character_sets,
)


def test_builtin_sets():
    assert len(get_character_set("en")) == 52
    assert len(get_character_set("tr")) == 58
    assert get_character_set("number") == list("0123456789")
    assert {"en", "tr", "number"} <= set(available_character_sets())


def test_builtin_sets_are_duplicate_free():
    for name in ("en", "tr", "number"):
        symbols = get_character_set(name)
        assert len(symbols) == len(set(symbols))


def test_unknown_set_returns_none():
    assert get_character_set("klingon") is None


def test_returned_sets_are_copies():
    symbols = get_character_set("number")
    symbols.append("X")
    assert get_character_set("number") == list("0123456789")


def test_yaml_overlay_adds_and_replaces_sets(tmp_path):
    path = tmp_path / "character_sets.yaml"
    path.write_text(
        'hex: "0123456789abcdef"\n'
        "faces: ['🙂', '🙃']\n"
        "number: '01'\n"
        "broken: 5\n",
        encoding="utf-8",
    )

    sets = load_character_sets(str(path))
    assert sets["hex"] == list("0123456789abcdef")
    assert sets["faces"] == ["🙂", "🙃"]
    assert sets["number"] == ["0", "1"]
    assert "broken" not in sets
    assert len(sets["en"]) == 52


def test_yaml_overlay_must_be_mapping(tmp_path):
    path = tmp_path / "character_sets.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_character_sets(str(path))


def test_missing_overlay_uses_builtins(tmp_path):
    sets = load_character_sets(str(tmp_path / "absent.yaml"))
    assert sorted(sets) == ["en", "number", "tr"]
