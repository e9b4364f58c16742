"""HTTP API for the family tree."""
