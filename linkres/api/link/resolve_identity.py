"""Default owner-key to identity-name mapping."""

IDENTITY_SEPARATOR = "~;~"


def resolve_identity(owner_key: str) -> str:
    """Return the user name part of a ``name~;~organization`` owner key."""
    return owner_key.split(IDENTITY_SEPARATOR, 1)[0]
