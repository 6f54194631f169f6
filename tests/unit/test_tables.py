import logging

import pytest

from frontlines_map.records import MatchResult, Player, PointOfInterest, StartingClaim
from frontlines_map.tables import (
    CampaignTables,
    parse_match_results,
    parse_outcome,
    parse_pois,
    parse_roster,
    parse_starting_territories,
    player_affiliations,
    player_colors,
    poi_lookup,
    starting_owners,
)
from frontlines_map.types import MatchOutcome
from tests.test_utils import make_roster


def test_parse_roster_skips_header_and_blank_rows() -> None:
    rows = [
        ["Player Name", "Color", "Maps"],
        ["Oracle", "#E6194B", "TGA"],
        ["", "", ""],
        [None, "#3CB44B", "Both"],
        ["Kori", " #3CB44B ", " Both "],
    ]
    assert parse_roster(rows) == (
        Player("Oracle", "#E6194B", "TGA"),
        Player("Kori", "#3CB44B", "Both"),
    )


def test_parse_roster_keeps_names_verbatim() -> None:
    rows = [["Sam ", "#000000", "TGA"], ["sam", "#FFFFFF", "TGA"]]
    players = parse_roster(rows, header=False)
    assert [p.name for p in players] == ["Sam ", "sam"]


def test_parse_pois_canonicalizes_and_skips_invalid() -> None:
    rows = [
        ["Territory", "Map", "Name"],
        [" c4 ", "TGA", "Ruined Chapel"],
        ["Z4", "TGA", "Off the map"],
        ["A10", "TGA", "Too far down"],
        ["B8", "Westgate", ""],
    ]
    assert parse_pois(rows) == (PointOfInterest("C4", "TGA", "Ruined Chapel"),)


def test_parse_starting_territories() -> None:
    rows = [
        ["Territory", "Owner", "Map"],
        ["a1", "Oracle", "TGA"],
        ["A2", "", "TGA"],
        ["bad", "Oracle", "TGA"],
        ["D6", "Justin", "Westgate"],
    ]
    assert parse_starting_territories(rows) == (
        StartingClaim("A1", "Oracle", "TGA"),
        StartingClaim("D6", "Justin", "Westgate"),
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        ("P1 Win", MatchOutcome.P1_WIN),
        (" P2 Win ", MatchOutcome.P2_WIN),
        ("Draw", MatchOutcome.DRAW),
        ("draw", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_outcome(value: object, expected: object) -> None:
    assert parse_outcome(value) == expected


def test_parse_match_results_keeps_order_and_extras() -> None:
    rows = [
        ["Date", "Player 1", "Player 2", "Result", "Location", "Claimed Territory",
         "Glory P1", "Glory P2", "Exploration", "Mission Played"],
        ["2025-01-04", "Oracle", "Kori", "P1 Win", "TGA", "c3", 3, 1, "Yes", "Hold"],
        ["2025-01-05", "Kori", "Oracle", "Forfeit", "TGA"],
        [None, None, None, None, None, None],
        ["2025-01-06", "Sarah", "Kori", "Draw", "Westgate", ""],
    ]
    results = parse_match_results(rows)
    assert len(results) == 3
    assert results[0] == MatchResult(
        player1="Oracle",
        player2="Kori",
        outcome=MatchOutcome.P1_WIN,
        map_id="TGA",
        claimed_territory="c3",
        date="2025-01-04",
        extras=(3, 1, "Yes", "Hold"),
    )
    assert results[1].outcome is None
    assert results[1].claimed_territory == ""
    assert results[2].outcome == MatchOutcome.DRAW


def test_winner_property() -> None:
    p1 = MatchResult("A", "B", MatchOutcome.P1_WIN, "TGA", "A1")
    p2 = MatchResult("A", "B", MatchOutcome.P2_WIN, "TGA", "A1")
    draw = MatchResult("A", "B", MatchOutcome.DRAW, "TGA", "A1")
    unknown = MatchResult("A", "B", None, "TGA", "A1")
    empty = MatchResult("", "B", MatchOutcome.P1_WIN, "TGA", "A1")
    assert p1.winner == "A"
    assert p2.winner == "B"
    assert draw.winner is None
    assert unknown.winner is None
    assert empty.winner is None


def test_missing_tables_are_empty() -> None:
    tables = CampaignTables.from_rows()
    assert tables == CampaignTables()
    assert tables.roster == ()
    assert tables.match_results == ()


def test_player_colors_last_row_wins_and_drops_malformed(
    caplog: pytest.LogCaptureFixture,
) -> None:
    roster = make_roster(
        [
            ("Alice", "#FF0000", "TGA"),
            ("Alice", "#00FF00", "TGA"),
            ("Bob", "#0000FF", "TGA"),
            ("Bob", "blue", "TGA"),
            ("Cara", "", "TGA"),
        ]
    )
    with caplog.at_level(logging.WARNING, logger="frontlines_map.tables"):
        colors = player_colors(roster)
    assert dict(colors) == {"Alice": "#00FF00"}
    assert "Bob" in caplog.text


def test_lookups_filter_by_map() -> None:
    pois = (
        PointOfInterest("A2", "TGA", "Well"),
        PointOfInterest("A2", "Westgate", "Gate"),
    )
    claims = (
        StartingClaim("A1", "Oracle", "TGA"),
        StartingClaim("C3", "Sammy", "Westgate"),
    )
    assert dict(poi_lookup(pois, "Westgate")) == {"A2": "Gate"}
    assert dict(starting_owners(claims, "TGA")) == {"A1": "Oracle"}
    assert dict(starting_owners(claims, "Nowhere")) == {}
    roster = make_roster([("Kori", "#3CB44B", "Both")])
    assert dict(player_affiliations(roster)) == {"Kori": "Both"}
