"""Hyperlink resolution engine for dashboard link descriptors."""
