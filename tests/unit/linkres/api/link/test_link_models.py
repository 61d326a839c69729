"""Unit tests for LinkKind, parameters, descriptors and sessions."""

import pytest
from pydantic import ValidationError

from linkres.api.link.LinkDescriptor import LinkDescriptor
from linkres.api.link.LinkKind import LinkKind
from linkres.api.link.LinkSession import LinkSession
from linkres.api.link.RuntimeParameterBinding import RuntimeParameterBinding
from linkres.api.link.StaticParameter import StaticParameter


@pytest.mark.parametrize(
    ("code", "kind"),
    [
        (1, LinkKind.WEB),
        (2, LinkKind.ARCHIVE),
        (4, LinkKind.DRILL),
        (8, LinkKind.VIEWSHEET),
        (16, LinkKind.MESSAGE),
        (9, LinkKind.WEB),
        (0, LinkKind.WEB),
        (1024, LinkKind.WEB),
    ],
)
def test_kind_from_legacy_code(code, kind):
    assert LinkKind.from_code(code) is kind


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (LinkKind.MESSAGE, LinkKind.MESSAGE),
        ("Viewsheet", LinkKind.VIEWSHEET),
        (" message ", LinkKind.MESSAGE),
        ("bogus", LinkKind.WEB),
        (None, LinkKind.WEB),
        (True, LinkKind.WEB),
        (16, LinkKind.MESSAGE),
        ("8", LinkKind.VIEWSHEET),
        (" 16 ", LinkKind.MESSAGE),
        ("24", LinkKind.WEB),
    ],
)
def test_kind_coerce(value, kind):
    assert LinkKind.coerce(value) is kind


def test_descriptor_accepts_legacy_kind_codes():
    assert LinkDescriptor(kind=16, raw_target="message:go").kind is LinkKind.MESSAGE
    assert LinkDescriptor(kind=24, raw_target="x").kind is LinkKind.WEB
    assert LinkDescriptor(kind="archive", raw_target="x").kind is LinkKind.ARCHIVE
    assert LinkDescriptor.model_validate_json('{"kind": "8", "raw_target": "x"}').kind is LinkKind.VIEWSHEET


def test_descriptor_defaults():
    descriptor = LinkDescriptor()
    assert descriptor.kind is LinkKind.WEB
    assert descriptor.raw_target is None
    assert descriptor.static_parameters == ()
    assert descriptor.disable_prompting is False


def test_descriptor_is_frozen():
    descriptor = LinkDescriptor(raw_target="example.com")
    with pytest.raises(ValidationError):
        descriptor.raw_target = "other.com"


def test_descriptor_forbids_unknown_fields():
    with pytest.raises(ValidationError):
        LinkDescriptor(raw_target="example.com", colour="red")


def test_descriptor_static_parameters_from_dicts():
    descriptor = LinkDescriptor(
        raw_target="example.com",
        static_parameters=[{"name": "rid", "type": "integer", "value": 42}],
    )
    assert descriptor.static_parameters == (StaticParameter(name="rid", type="integer", value="42"),)


@pytest.mark.parametrize(("value", "expected"), [(42, "42"), (True, "true"), (False, "false"), (None, ""), ("x", "x")])
def test_parameter_values_are_stringified(value, expected):
    assert StaticParameter(name="p", value=value).value == expected
    assert RuntimeParameterBinding(name="p", value=value).value == expected


def test_parameter_requires_name():
    with pytest.raises(ValidationError):
        StaticParameter(name="", value="x")
    with pytest.raises(ValidationError):
        RuntimeParameterBinding(name="", value="x")


def test_binding_parse():
    assert RuntimeParameterBinding.parse("user=alice") == RuntimeParameterBinding(name="user", value="alice")
    assert RuntimeParameterBinding.parse("expr=a=b").value == "a=b"
    assert RuntimeParameterBinding.parse("empty=").value == ""


@pytest.mark.parametrize("text", ["novalue", "=x", "  =x"])
def test_binding_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        RuntimeParameterBinding.parse(text)


def test_session_defaults():
    session = LinkSession()
    assert session.link_uri == ""
    assert session.run_id is None
    assert session.embedded is False
    assert session.report_parameters == ()
