"""Content presentation resolver."""
