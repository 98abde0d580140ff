import pytest

from pyleague.matching import (
    NAME_ALIASES,
    alias_for,
    build_alias_table,
    defense_matches,
    franchise_name,
    name_keys,
    normalize_name,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Cam Ward", "cam ward"),
        ("D'Andre Swift Jr.", "dandre swift"),
        ("Ja-Marr Chase", "ja marr chase"),
        ("Amon-Ra St. Brown", "amon ra st brown"),
        ("Kenneth Walker III", "kenneth walker"),
        ("Patrick Mahomes II", "patrick mahomes"),
        ("Michael Pittman Jr", "michael pittman"),
        ("Marvin Jones Sr.", "marvin jones"),
        ("  Josh    Allen  ", "josh allen"),
    ],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


def test_normalize_only_strips_whole_suffix_tokens():
    assert normalize_name("Jrue Holiday") == "jrue holiday"
    assert normalize_name("Ivory Siiman") == "ivory siiman"
    assert normalize_name("Sri Ivanov") == "sri ivanov"


@pytest.mark.parametrize(
    "raw",
    ["D'Andre Swift Jr.", "Ja-Marr Chase", "Odell Beckham Jr. ", "A.J. Brown", "Denver D/ST", ""],
)
def test_normalize_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_alias_table_is_symmetric():
    assert NAME_ALIASES
    for key, value in NAME_ALIASES.items():
        assert NAME_ALIASES[value] == key


def test_alias_lookup_is_single_hop():
    assert alias_for("josh palmer") == "joshua palmer"
    assert alias_for("joshua palmer") == "josh palmer"
    assert alias_for("josh allen") is None


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        NAME_ALIASES["new name"] = "other name"  # type: ignore[index]


def test_build_alias_table_normalizes_pairs():
    table = build_alias_table([("Gabe Davis", "Gabriel Davis")])
    assert dict(table) == {"gabe davis": "gabriel davis", "gabriel davis": "gabe davis"}


def test_build_alias_table_rejects_conflicts():
    with pytest.raises(ValueError):
        build_alias_table([("a b", "c d"), ("a b", "e f")])
    with pytest.raises(ValueError):
        build_alias_table([("Jr.", "Sr")])


def test_name_keys_includes_alias():
    assert name_keys("Hollywood Brown") == ("hollywood brown", "marquise brown")
    assert name_keys("Josh Allen") == ("josh allen",)
    assert name_keys("Hollywood Brown", aliases={}) == ("hollywood brown",)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Denver D/ST", "denver"),
        ("New York Jets d/st", "new york jets"),
        ("Broncos", "broncos"),
    ],
)
def test_franchise_name(raw, expected):
    assert franchise_name(raw) == expected


def test_defense_matches_franchise_or_team_code():
    assert defense_matches("Denver Broncos", "Denver D/ST", "DEN")
    assert defense_matches("DEN", "Denver D/ST", "DEN")
    assert not defense_matches("Dallas Cowboys", "Denver D/ST", "DEN")


def test_defense_matches_ignores_empty_team_code():
    assert not defense_matches("Dallas Cowboys", "Denver D/ST", "")
    assert not defense_matches("Dallas Cowboys", "Denver D/ST", "   ")
