from .LinkKind import LinkKind

SELF_FRAMES = ("self", "_self")


def _normalize_target_frame(frame_name: str | None, kind: LinkKind, preview: bool = False) -> str:
    """Map a raw frame hint to ``_self``, ``_blank`` or a named frame.

    Viewsheet links express same-window intent as ``""`` so the viewer picks
    its own default target.
    """
    frame = frame_name or ""

    if frame.strip().lower() in SELF_FRAMES:
        return "" if kind is LinkKind.VIEWSHEET else "_self"

    if frame.strip():
        return frame

    return "previewTab" if preview else "_blank"
