"""HTTP API for data translation."""
