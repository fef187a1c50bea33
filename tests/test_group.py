import pytest

from envoysync.group import group_by
from envoysync.mask import is_secret
from envoysync.parsing import Entry


def sample():
    return [
        Entry("DB_HOST", "localhost"),
        Entry("DB_PORT", "5432"),
        Entry("APP_ENV", "production"),
        Entry("APP_SECRET", "secret"),
        Entry("STANDALONE", ""),
        Entry("API_KEY", "placeholder"),
    ]


def as_map(groups):
    return {g.key: g.entries for g in groups}


def test_group_by_prefix():
    groups = group_by(sample(), "prefix", "_")
    mapping = as_map(groups)
    assert len(mapping["DB"]) == 2
    assert len(mapping["APP"]) == 2
    assert len(mapping["API"]) == 1
    assert len(mapping["(no prefix)"]) == 1
    assert [g.key for g in groups] == ["(no prefix)", "API", "APP", "DB"]


def test_group_by_secret():
    mapping = as_map(group_by(sample(), "secret", "_"))
    assert mapping["secrets"]
    assert mapping["non-secrets"]
    assert all(is_secret(e.key) for e in mapping["secrets"])


def test_group_by_secret_keeps_empty_buckets():
    groups = group_by([Entry("PORT", "1")], "secret")
    assert [(g.key, len(g.entries)) for g in groups] == [("non-secrets", 1), ("secrets", 0)]


def test_group_by_empty():
    mapping = as_map(group_by(sample(), "empty", "_"))
    assert len(mapping["empty"]) == 1
    assert len(mapping["non-empty"]) == 5


def test_group_by_unknown_strategy():
    with pytest.raises(ValueError):
        group_by(sample(), "unknown", "_")


def test_group_by_default_delimiter():
    groups = group_by(sample(), "prefix", "")
    assert len(groups) == 4