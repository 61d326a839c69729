"""Descriptor bookkeeping names that are never sent as navigable state."""

RESERVED_PARAMETER_NAMES = frozenset({"drillfrom", "__principal__", "_USER_", "_ROLES_", "_GROUPS_"})
