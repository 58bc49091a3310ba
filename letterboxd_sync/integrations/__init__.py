"""
External system integrations (Letterboxd RSS, TMDb, Notion).

Each external API gets its own subpackage so clients stay decoupled from the
pipeline code in `letterboxd_sync.ingestion` and from scripts.
"""
