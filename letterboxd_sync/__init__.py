"""
Letterboxd diary -> Notion database sync.

This package holds the library code used by the sync script in `scripts/`.
Entrypoints (CLI scripts) should live outside this package and import from
`letterboxd_sync` rather than the other way around.
"""
