"""Catalogue bounded context: the in-memory product catalogue."""
