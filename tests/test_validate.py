import pytest

from envoysync.validate import (
    ValidationFailed,
    ValidationIssue,
    ValidationResult,
    validate_against_schema,
    validate_keys,
)


def test_against_schema_all_present():
    env = {"DB_HOST": "localhost", "DB_PORT": "5432"}
    result = validate_against_schema(env, {"DB_HOST": "", "DB_PORT": ""})
    assert result.ok()


def test_against_schema_missing_key():
    result = validate_against_schema(
        {"DB_HOST": "localhost"}, {"DB_HOST": "", "DB_PORT": ""}
    )
    assert not result.ok()
    assert result.errors == [ValidationIssue("DB_PORT", "missing required key")]


def test_against_schema_empty_value():
    env = {"DB_HOST": "", "DB_PORT": "5432"}
    result = validate_against_schema(env, {"DB_HOST": "", "DB_PORT": ""})
    assert result.errors == [ValidationIssue("DB_HOST", "value is empty")]


def test_validate_keys_no_empty():
    assert validate_keys({"FOO": "bar", "BAZ": "qux"}).ok()


def test_validate_keys_with_empty():
    result = validate_keys({"FOO": "", "BAR": "value"})
    assert not result.ok()
    assert result.errors[0].key == "FOO"


def test_validation_issue_str():
    issue = ValidationIssue("MY_KEY", "missing required key")
    assert str(issue) == 'key "MY_KEY": missing required key'


def test_result_str_joins_issues():
    result = ValidationResult()
    result.add("A", "x")
    result.add("B", "y")
    assert str(result) == 'key "A": x; key "B": y'


def test_raise_for_errors():
    result = validate_keys({"FOO": " "})
    with pytest.raises(ValidationFailed, match="FOO") as info:
        result.raise_for_errors()
    assert info.value.result is result


def test_raise_for_errors_when_ok():
    result = ValidationResult()
    assert result.raise_for_errors() is None
    assert str(result) == ""