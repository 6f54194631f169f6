"""frontlines_map
=================

Territory control for grid-map tabletop campaigns.

Current ownership of every territory is derived by replaying an append-only
log of match results over each map's starting snapshot; the result is then
turned into a renderable description of the map (cell colors, POI glyphs,
tooltips, border emphasis and a player legend).

Typical use::

    from frontlines_map.tables import CampaignTables
    from frontlines_map.view import build_map_views

    tables = CampaignTables.from_rows(roster=..., pois=..., ...)
    views = build_map_views(tables)

Everything here is pure: reading tables from a data store and applying the
result to a visual surface belong to the host integration.
"""
