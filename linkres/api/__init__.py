"""Linkres API layer."""
