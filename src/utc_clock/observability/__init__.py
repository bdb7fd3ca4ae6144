"""Observability – structured logging driven by the active clock."""
