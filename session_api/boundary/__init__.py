"""Boundary adapters (database)."""
