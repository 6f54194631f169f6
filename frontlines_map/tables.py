"""Tolerant ingestion of raw input tables.

The host data store hands over each table as an ordered collection of rows
(sequences of cell values, optionally preceded by a header row). The parsers
here turn those rows into record tuples and never raise on bad data: rows
that cannot be used are skipped and logged at DEBUG level.

Column order per table:

* Player roster: ``name, color, affiliation``
* POI definitions: ``territory, map, name``
* Starting territories: ``territory, owner, map``
* Match results: ``date, player1, player2, outcome, map, claimed_territory,
  *extras``

Player names are identity keys and are kept verbatim. Territory labels are
canonicalized through :mod:`frontlines_map.coords`. Other text cells (map
ids, affiliations, outcomes, colors) are stripped of surrounding whitespace.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from frontlines_map.colors import is_hex_color
from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig
from frontlines_map.coords import canonical_label
from frontlines_map.records import MatchResult, Player, PointOfInterest, StartingClaim
from frontlines_map.types import MapID, MatchOutcome, PlayerName, TerritoryLabel


logger = logging.getLogger(__name__)

Row = Sequence[Any]
Rows = Iterable[Row]


def _raw(row: Row, index: int) -> Any:
    return row[index] if index < len(row) else None


def _name(row: Row, index: int) -> str:
    value = _raw(row, index)
    return "" if value is None else str(value)


def _text(row: Row, index: int) -> str:
    return _name(row, index).strip()


def _is_blank(row: Row) -> bool:
    return all(value is None or str(value).strip() == "" for value in row)


def _data_rows(rows: Optional[Rows], header: bool) -> Iterable[Tuple[int, Row]]:
    """Enumerate non-blank data rows with their position in the table."""
    if rows is None:
        return
    for index, row in enumerate(rows):
        if header and index == 0:
            continue
        if row is None or _is_blank(row):
            continue
        yield index, row


def parse_outcome(value: Any) -> Optional[MatchOutcome]:
    """Map a table outcome cell to :class:`MatchOutcome` (``None`` if unknown)."""
    if value is None:
        return None
    try:
        return MatchOutcome(str(value).strip())
    except ValueError:
        return None


def parse_roster(rows: Optional[Rows], header: bool = True) -> Tuple[Player, ...]:
    players = []
    for index, row in _data_rows(rows, header):
        name = _name(row, 0)
        if name == "":
            logger.debug("Roster row %d skipped: missing name", index)
            continue
        players.append(
            Player(name=name, color=_text(row, 1), affiliation=_text(row, 2))
        )
    return tuple(players)


def parse_pois(
    rows: Optional[Rows],
    config: CampaignConfig = DEFAULT_CONFIG,
    header: bool = True,
) -> Tuple[PointOfInterest, ...]:
    pois = []
    for index, row in _data_rows(rows, header):
        territory = canonical_label(_raw(row, 0), config.grid)
        if territory is None:
            logger.debug("POI row %d skipped: invalid territory %r", index, _raw(row, 0))
            continue
        name = _text(row, 2)
        if name == "":
            logger.debug("POI row %d skipped: missing name", index)
            continue
        pois.append(PointOfInterest(territory=territory, map_id=_text(row, 1), name=name))
    return tuple(pois)


def parse_starting_territories(
    rows: Optional[Rows],
    config: CampaignConfig = DEFAULT_CONFIG,
    header: bool = True,
) -> Tuple[StartingClaim, ...]:
    claims = []
    for index, row in _data_rows(rows, header):
        territory = canonical_label(_raw(row, 0), config.grid)
        if territory is None:
            logger.debug(
                "Starting row %d skipped: invalid territory %r", index, _raw(row, 0)
            )
            continue
        owner = _name(row, 1)
        if owner == "":
            logger.debug("Starting row %d skipped: missing owner", index)
            continue
        claims.append(StartingClaim(territory=territory, owner=owner, map_id=_text(row, 2)))
    return tuple(claims)


def parse_match_results(
    rows: Optional[Rows], header: bool = True
) -> Tuple[MatchResult, ...]:
    """Parse the event log, preserving row order.

    Rows are kept even when their outcome is unknown or the territory is
    missing; the resolver decides whether an event changes anything.
    """
    results = []
    for _, row in _data_rows(rows, header):
        results.append(
            MatchResult(
                date=_raw(row, 0),
                player1=_name(row, 1),
                player2=_name(row, 2),
                outcome=parse_outcome(_raw(row, 3)),
                map_id=_text(row, 4),
                claimed_territory=_name(row, 5),
                extras=tuple(row[6:]),
            )
        )
    return tuple(results)


@dataclass(frozen=True)
class CampaignTables:
    """All four input tables, already parsed.

    Missing tables are empty tuples, which resolve to an all-neutral map with
    an empty legend.
    """

    roster: Tuple[Player, ...] = ()
    pois: Tuple[PointOfInterest, ...] = ()
    starting_territories: Tuple[StartingClaim, ...] = ()
    match_results: Tuple[MatchResult, ...] = ()

    @classmethod
    def from_rows(
        cls,
        roster: Optional[Rows] = None,
        pois: Optional[Rows] = None,
        starting_territories: Optional[Rows] = None,
        match_results: Optional[Rows] = None,
        config: CampaignConfig = DEFAULT_CONFIG,
        header: bool = True,
    ) -> "CampaignTables":
        return cls(
            roster=parse_roster(roster, header),
            pois=parse_pois(pois, config, header),
            starting_territories=parse_starting_territories(
                starting_territories, config, header
            ),
            match_results=parse_match_results(match_results, header),
        )


def player_colors(roster: Iterable[Player]) -> PMap[PlayerName, str]:
    """Name -> color lookup. Later rows win; malformed colors are dropped."""
    colors: Dict[PlayerName, str] = {}
    for player in roster:
        if not is_hex_color(player.color):
            logger.warning(
                "Player %r has malformed color %r; using neutral",
                player.name,
                player.color,
            )
            colors.pop(player.name, None)
            continue
        colors[player.name] = player.color
    return pmap(colors)


def player_affiliations(roster: Iterable[Player]) -> PMap[PlayerName, str]:
    return pmap({player.name: player.affiliation for player in roster})


def poi_lookup(
    pois: Iterable[PointOfInterest], map_id: MapID
) -> PMap[TerritoryLabel, str]:
    """Territory -> POI name for one map."""
    return pmap({poi.territory: poi.name for poi in pois if poi.map_id == map_id})


def starting_owners(
    claims: Iterable[StartingClaim], map_id: MapID
) -> PMap[TerritoryLabel, PlayerName]:
    """Starting snapshot (territory -> owner) for one map."""
    return pmap(
        {claim.territory: claim.owner for claim in claims if claim.map_id == map_id}
    )
