"""Mini README: Tests for level label parsing and ranking."""

from __future__ import annotations

from bimshot.classification import LevelRanking, StatusRecord, level_number


def test_level_number_reads_trailing_token() -> None:
    assert level_number("Nivel 7") == 7
    assert level_number("Nivel 12") == 12
    assert level_number("Sotano -1") == -1
    assert level_number("Cubierta") == 0
    assert level_number("") == 0
    assert level_number(None) == 0


def test_ranking_orders_numerically_not_lexically() -> None:
    records = [
        StatusRecord(id="a", level="Nivel 9"),
        StatusRecord(id="b", level="Nivel 10"),
        StatusRecord(id="c", level="Nivel 2"),
        StatusRecord(id="d", level="Nivel 9"),
    ]
    ranking = LevelRanking.from_records(records)
    assert ranking.levels == ("Nivel 10", "Nivel 9", "Nivel 2")
    assert ranking.highest == "Nivel 10"


def test_ranking_ignores_missing_levels() -> None:
    ranking = LevelRanking.from_records([StatusRecord(id="a"), StatusRecord(id="b", level="")])
    assert ranking.levels == ()
    assert ranking.highest is None
    assert not ranking.contains(None)


def test_ties_keep_first_seen_label() -> None:
    ranking = LevelRanking.from_records(
        [StatusRecord(id="a", level="Terraza"), StatusRecord(id="b", level="Cubierta")]
    )
    assert ranking.highest == "Terraza"


def test_level_number_without_separator() -> None:
    assert level_number("Nivel7") == 7
    assert level_number("N-7") == -7
    assert level_number("Nivel 2.5 ") == 2.5
    assert level_number("Nivel 1_000") == 0
    assert level_number(7) == 0
    assert level_number(["Nivel 2"]) == 0
