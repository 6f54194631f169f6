from frontlines_map.config import DEFAULT_CONFIG
from frontlines_map.renderer.legend import LegendEntry, build_legend, summarize_roster
from tests.test_utils import make_roster


ROSTER = make_roster(
    [
        ("Oracle", "#E6194B", "TGA"),
        ("Kori", "#3CB44B", "Both"),
        ("Sammy", "#DCBEFF", "Westgate"),
        ("addsey", "#469990", "Both"),
        ("Nomad", "#000075", "Elsewhere"),
    ]
)


def names(entries) -> list:
    return [e.name for e in entries]


def test_both_players_appear_on_every_map() -> None:
    for map_id in DEFAULT_CONFIG.maps:
        legend = names(build_legend(ROSTER, map_id))
        assert "Kori" in legend
        assert "addsey" in legend
        assert "Nomad" not in legend


def test_single_map_players_only_on_their_map() -> None:
    assert "Oracle" in names(build_legend(ROSTER, "TGA"))
    assert "Oracle" not in names(build_legend(ROSTER, "Westgate"))
    assert "Sammy" in names(build_legend(ROSTER, "Westgate"))
    assert "Sammy" not in names(build_legend(ROSTER, "TGA"))


def test_legend_sorted_by_name() -> None:
    assert names(build_legend(ROSTER, "TGA")) == ["addsey", "Kori", "Oracle"]


def test_legend_sorts_accented_names_alphabetically() -> None:
    roster = make_roster(
        [("Zed", "#FF0000", "TGA"), ("Émile", "#00FF00", "TGA"), ("Bob", "#0000FF", "TGA")]
    )
    assert names(build_legend(roster, "TGA")) == ["Bob", "Émile", "Zed"]


def test_legend_case_only_tie_puts_lowercase_first() -> None:
    roster = make_roster([("Alice", "#FF0000", "TGA"), ("alice", "#00FF00", "TGA")])
    assert names(build_legend(roster, "TGA")) == ["alice", "Alice"]


def test_legend_uses_supplied_colors() -> None:
    roster = make_roster([("Ann", "#FF0000", "TGA")])
    legend = build_legend(roster, "TGA", colors={"Ann": "#00FF00"})
    assert legend == (LegendEntry("Ann", "#00FF00", "#00B200"),)


def test_legend_entry_colors() -> None:
    roster = make_roster([("Ann", "#FF0000", "TGA"), ("Ben", "oops", "TGA")])
    assert build_legend(roster, "TGA") == (
        LegendEntry("Ann", "#FF0000", "#B20000"),
        LegendEntry("Ben", "#CCCCCC", "#8E8E8E"),
    )


def test_duplicate_names_collapse_to_last_row() -> None:
    roster = make_roster([("Ann", "#FF0000", "TGA"), ("Ann", "#00FF00", "Westgate")])
    assert build_legend(roster, "TGA") == ()
    assert build_legend(roster, "Westgate") == (
        LegendEntry("Ann", "#00FF00", "#00B200"),
    )


def test_empty_roster() -> None:
    assert build_legend((), "TGA") == ()


def test_summarize_roster() -> None:
    summary = summarize_roster(ROSTER)
    assert summary["TGA"] == ("Oracle",)
    assert summary["Westgate"] == ("Sammy",)
    assert summary["Both"] == ("Kori", "addsey")
    assert set(summary.keys()) == {"TGA", "Westgate", "Both"}
