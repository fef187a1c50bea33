import pytest

from envoysync.interpolate import InterpolationError, interpolate
from envoysync.parsing import Entry


def test_simple_reference():
    entries = [Entry("BASE", "/home/user"), Entry("PATH", "${BASE}/bin")]
    got = interpolate(entries)
    assert got[1].value == "/home/user/bin"


def test_dollar_syntax():
    entries = [Entry("HOST", "localhost"), Entry("URL", "http://$HOST:8080")]
    got = interpolate(entries)
    assert got[1].value == "http://localhost:8080"


def test_missing_var_silent():
    entries = [Entry("URL", "http://${MISSING_HOST}:8080")]
    got = interpolate(entries, fail_on_missing=False)
    assert got[0].value == "http://:8080"


def test_missing_var_error():
    entries = [Entry("URL", "http://${MISSING_HOST}:8080")]
    with pytest.raises(InterpolationError) as info:
        interpolate(entries, fail_on_missing=True)
    assert info.value.key == "URL"
    assert info.value.variable == "MISSING_HOST"


def test_chained_references():
    entries = [
        Entry("PROTO", "https"),
        Entry("HOST", "example.com"),
        Entry("BASE_URL", "${PROTO}://${HOST}"),
        Entry("API_URL", "${BASE_URL}/api/v1"),
    ]
    got = interpolate(entries)
    assert got[3].value == "https://example.com/api/v1"


def test_no_references():
    got = interpolate([Entry("PLAIN", "just a plain value")])
    assert got[0].value == "just a plain value"


def test_later_definitions_not_visible_to_earlier():
    entries = [Entry("A", "$B"), Entry("B", "value")]
    got = interpolate(entries)
    assert [e.value for e in got] == ["", "value"]


def test_keys_preserved_in_order():
    entries = [Entry("X", "1"), Entry("Y", "$X$X")]
    got = interpolate(entries)
    assert got == [Entry("X", "1"), Entry("Y", "11")]