"""Unit tests for link cmd_resolve, cmd_classify and cmd_decode."""

import json

import pytest

from linkres.api.link.cmd_classify import cmd_classify
from linkres.api.link.cmd_decode import cmd_decode
from linkres.api.link.cmd_resolve import cmd_resolve
from linkres.api.validate_output import validate_output

WEB_DESCRIPTOR = json.dumps(
    {
        "kind": "web",
        "raw_target": "example.com/report?id=$(rid)",
        "static_parameters": [{"name": "rid", "value": "42"}],
        "label": "Report",
    }
)


class TestCmdResolve:
    def test_resolves_inline_descriptor(self, linkres_home, run_cmd):
        result = run_cmd(cmd_resolve, WEB_DESCRIPTOR, bindings=["user=alice"])
        assert result.success
        assert result.output["resolved"] is True
        assert result.output["url"] == "//example.com/report?id=42&user=alice"
        assert result.output["parameters"] == {"user": "alice"}
        assert result.output["label"] == "Report"
        assert result.output["target_frame"] == "_blank"
        assert result.result == "Resolved web link"
        assert validate_output(cmd_resolve, result.output) == result.output

    def test_resolves_descriptor_file(self, linkres_home, tmp_path, run_cmd):
        path = tmp_path / "link.json"
        path.write_text(json.dumps({"raw_target": "1^128^__NULL__^Sales/Board"}))

        result = run_cmd(cmd_resolve, str(path))
        assert result.success
        assert result.output["kind"] == "viewsheet"
        assert result.output["url"] == "https://bi.example.com/app/viewer/view/global/Sales%2FBoard"

    def test_run_id_and_report_parameters(self, linkres_home, run_cmd):
        descriptor = json.dumps(
            {
                "raw_target": "1^128^__NULL__^Board",
                "send_selection_parameters": True,
                "send_report_parameters": True,
            }
        )
        result = run_cmd(cmd_resolve, descriptor, run_id="r1", report_parameters=["year=2024"])
        assert result.output["url"] == (
            "https://bi.example.com/app/viewer/view/global/Board?hyperlinkSourceId=r1&year=2024"
        )

    def test_repeated_bindings(self, linkres_home, run_cmd):
        result = run_cmd(cmd_resolve, '{"raw_target": "e.com"}', bindings=["n=a", "n=b"])
        assert result.output["parameters"] == {"n": ["a", "b"]}

    def test_unresolvable_descriptor_warns(self, linkres_home, run_cmd):
        result = run_cmd(cmd_resolve, '{"raw_target": "$(missing)"}')
        assert result.success
        assert result.output["resolved"] is False
        assert result.output["url"] == ""
        assert result.output["warnings"] == ["Descriptor did not resolve to a link"]
        assert validate_output(cmd_resolve, result.output) == result.output

    @pytest.mark.parametrize(
        ("descriptor", "message"),
        [
            ("{not json", "Invalid descriptor JSON"),
            ('{"raw_target": "e.com", "colour": "red"}', "Invalid descriptor: colour"),
            ("/nonexistent/link.json", "Descriptor file does not exist"),
        ],
    )
    def test_bad_descriptor(self, linkres_home, run_cmd, descriptor, message):
        result = run_cmd(cmd_resolve, descriptor)
        assert not result.success
        assert message in result.output["errors"][0]
        assert result.output["resolved"] is False

    def test_bad_binding(self, linkres_home, run_cmd):
        result = run_cmd(cmd_resolve, '{"raw_target": "e.com"}', bindings=["novalue"])
        assert not result.success
        assert "novalue" in result.output["errors"][0]

    def test_missing_config(self, tmp_path, monkeypatch, run_cmd):
        monkeypatch.setenv("LINKRES_HOME", str(tmp_path))
        result = run_cmd(cmd_resolve, '{"raw_target": "e.com"}')
        assert not result.success
        assert "Configuration file not found" in result.output["errors"][0]

    def test_identity_failure(self, linkres_home, run_cmd, monkeypatch):
        def failing(*args, **kwargs):
            raise RuntimeError("Failed to resolve owner 'ghost' of viewsheet link")

        monkeypatch.setattr(f"{cmd_resolve.__module__}.resolve", failing)
        result = run_cmd(cmd_resolve, '{"raw_target": "4^1^ghost^Board"}')
        assert not result.success
        assert "ghost" in result.output["errors"][0]
        assert result.output["resolved"] is False


class TestCmdClassify:
    def test_declared_kind(self, run_cmd):
        result = run_cmd(cmd_classify, '{"kind": "message", "raw_target": "message:go"}')
        assert result.success
        assert result.output["declared_kind"] == "message"
        assert result.output["kind"] == "message"
        assert result.output["warnings"] == []

    def test_coordinate_overrides_declared_kind(self, run_cmd):
        result = run_cmd(cmd_classify, '{"kind": 1, "raw_target": "1^5^o^Board"}')
        assert result.output["declared_kind"] == "web"
        assert result.output["kind"] == "viewsheet"
        assert "overridden" in result.output["warnings"][0]
        assert validate_output(cmd_classify, result.output) == result.output

    def test_invalid_descriptor(self, run_cmd):
        result = run_cmd(cmd_classify, '{"raw_target": "e.com", "bogus": 1}')
        assert not result.success
        assert "Invalid descriptor: bogus" in result.output["errors"][0]
        assert result.output["kind"] == ""


class TestCmdDecode:
    def test_decodes_query(self, run_cmd):
        result = run_cmd(cmd_decode, "//e.com/r?n=a&n=b&q=a%26b%20c")
        assert result.success
        assert result.output["base"] == "//e.com/r"
        assert result.output["parameters"] == {"n": ["a", "b"], "q": "a&b c"}
        assert result.result == "Decoded 2 parameter(s)"
        assert validate_output(cmd_decode, result.output) == result.output

    def test_no_query(self, run_cmd):
        result = run_cmd(cmd_decode, "https://e.com/")
        assert result.output["parameters"] == {}
        assert result.output["base"] == "https://e.com/"
