"""HerSafety HTTP API."""
