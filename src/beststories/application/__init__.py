"""Application layer: ports and read-only queries."""
