from typing import Iterable, Optional, Sequence, Tuple

from frontlines_map.config import CampaignConfig
from frontlines_map.records import MatchResult, Player, PointOfInterest, StartingClaim
from frontlines_map.tables import CampaignTables
from frontlines_map.types import MatchOutcome


SCENARIO_CONFIG = CampaignConfig(maps=("X", "Y"))


def make_result(
    territory: str = "",
    outcome: Optional[MatchOutcome] = MatchOutcome.P1_WIN,
    player1: str = "Alice",
    player2: str = "Bob",
    map_id: str = "X",
) -> MatchResult:
    return MatchResult(
        player1=player1,
        player2=player2,
        outcome=outcome,
        map_id=map_id,
        claimed_territory=territory,
    )


def make_claims(
    territories: Iterable[str], winner: str = "Alice", map_id: str = "X"
) -> Tuple[MatchResult, ...]:
    """One P1 win per territory, in the given order."""
    return tuple(make_result(t, player1=winner, map_id=map_id) for t in territories)


def make_roster(
    entries: Sequence[Tuple[str, str, str]],
) -> Tuple[Player, ...]:
    return tuple(Player(name=n, color=c, affiliation=a) for n, c, a in entries)


def make_scenario_tables() -> CampaignTables:
    """Starting A1 -> Alice, POI at D4, one win claiming b2 and one draw."""
    return CampaignTables(
        roster=make_roster([("Alice", "#FF0000", "X"), ("Bob", "#00FF00", "X")]),
        pois=(PointOfInterest(territory="D4", map_id="X", name="Shrine"),),
        starting_territories=(StartingClaim(territory="A1", owner="Alice", map_id="X"),),
        match_results=(
            make_result("b2", MatchOutcome.P1_WIN, "Alice", "Bob"),
            make_result("a1", MatchOutcome.DRAW, "Bob", "Alice"),
        ),
    )
