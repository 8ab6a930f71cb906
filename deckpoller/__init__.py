"""Incremental ingestion of Magic Online tournament deck lists."""
