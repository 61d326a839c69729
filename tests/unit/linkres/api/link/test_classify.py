"""Unit tests for classify."""

import pytest

from linkres.api.link.classify import classify
from linkres.api.link.LinkDescriptor import LinkDescriptor
from linkres.api.link.LinkKind import LinkKind


@pytest.mark.parametrize(
    ("kind", "target", "expected"),
    [
        (LinkKind.WEB, "example.com", LinkKind.WEB),
        (LinkKind.ARCHIVE, "example.com", LinkKind.WEB),
        (LinkKind.DRILL, "example.com", LinkKind.WEB),
        (LinkKind.MESSAGE, "message:refresh", LinkKind.MESSAGE),
        (LinkKind.VIEWSHEET, "not a coordinate", LinkKind.VIEWSHEET),
        (LinkKind.WEB, "1^128^__NULL__^Sales/Overview", LinkKind.VIEWSHEET),
        (LinkKind.MESSAGE, "4^5^alice~;~org^Board", LinkKind.VIEWSHEET),
        (LinkKind.WEB, "12^5^owner^path", LinkKind.WEB),
        (LinkKind.WEB, "1^123456^owner^path", LinkKind.WEB),
        (LinkKind.WEB, "1^5^^path", LinkKind.WEB),
        (LinkKind.WEB, "1^5^owner^", LinkKind.WEB),
        (LinkKind.WEB, None, LinkKind.WEB),
    ],
)
def test_classify(kind, target, expected):
    assert classify(LinkDescriptor(kind=kind, raw_target=target)) is expected


def test_classify_coordinate_rest_may_contain_carets():
    assert classify(LinkDescriptor(raw_target="1^5^owner^a^b")) is LinkKind.VIEWSHEET
