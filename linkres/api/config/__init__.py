"""Configuration models and commands."""
