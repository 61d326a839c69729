"""Link kind enum."""

from enum import Enum


class LinkKind(str, Enum):
    WEB = "web"
    ARCHIVE = "archive"
    DRILL = "drill"
    VIEWSHEET = "viewsheet"
    MESSAGE = "message"

    @classmethod
    def from_code(cls, code: int) -> "LinkKind":
        """Map a legacy bitmask value to a kind.

        Combined flags and unknown values fall back to WEB.
        """
        return _CODES.get(code, cls.WEB)

    @classmethod
    def coerce(cls, value: "LinkKind | int | str | None") -> "LinkKind":
        """Accept an enum member, a legacy code or a kind name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or value is None:
            return cls.WEB
        if isinstance(value, int):
            return cls.from_code(value)
        text = str(value).strip()
        if text.isdigit():
            return cls.from_code(int(text))
        try:
            return cls(text.lower())
        except ValueError:
            return cls.WEB


_CODES: dict[int, LinkKind] = {
    1: LinkKind.WEB,
    2: LinkKind.ARCHIVE,
    4: LinkKind.DRILL,
    8: LinkKind.VIEWSHEET,
    16: LinkKind.MESSAGE,
}
