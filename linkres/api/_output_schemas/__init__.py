"""Output schemas for every API command; importing registers them."""

from . import config, link

__all__ = ["config", "link"]
