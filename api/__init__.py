"""HTTP API for Civica."""
