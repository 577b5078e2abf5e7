"""HTTP API for the pool ledger."""
