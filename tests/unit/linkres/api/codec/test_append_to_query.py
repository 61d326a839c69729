"""Unit tests for append_to_query."""

from linkres.api.codec.append_to_query import append_to_query


def test_append_adds_question_mark():
    assert append_to_query("http://example.com/a", "x", "1") == "http://example.com/a?x=1"


def test_append_after_trailing_question_mark():
    assert append_to_query("http://example.com/a?", "x", "1") == "http://example.com/a?x=1"


def test_append_to_existing_query():
    assert append_to_query("http://example.com/a?y=2", "x", "1") == "http://example.com/a?y=2&x=1"


def test_append_encodes_name_and_value():
    assert append_to_query("u", "first name", "a&b=c") == "u?first%20name=a%26b%3Dc"


def test_append_repeated_name():
    url = append_to_query("u", "n", "a")
    url = append_to_query(url, "n", "b")
    assert url == "u?n=a&n=b"
