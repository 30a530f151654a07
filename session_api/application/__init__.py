"""Application layer: use-case services and helpers."""
