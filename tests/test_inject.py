import os

import pytest

from envoysync.inject import InjectError, inject


@pytest.fixture
def env_guard():
    saved: dict[str, str | None] = {}

    def guard(*names: str) -> None:
        for name in names:
            saved.setdefault(name, os.environ.get(name))

    yield guard

    for name, value in saved.items():
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value


def test_sets_env_vars(env_guard):
    env_guard("INJECT_FOO", "INJECT_BAZ")
    os.environ.pop("INJECT_FOO", None)
    os.environ.pop("INJECT_BAZ", None)

    result = inject({"INJECT_FOO": "bar", "INJECT_BAZ": "qux"})

    assert len(result.injected) == 2
    assert os.environ["INJECT_FOO"] == "bar"
    assert os.environ["INJECT_BAZ"] == "qux"


def test_injected_in_sorted_order(env_guard):
    env_guard("INJECT_Z", "INJECT_M", "INJECT_A")
    for name in ("INJECT_Z", "INJECT_M", "INJECT_A"):
        os.environ.pop(name, None)

    result = inject({"INJECT_Z": "1", "INJECT_M": "2", "INJECT_A": "3"})

    assert result.injected == ["INJECT_A", "INJECT_M", "INJECT_Z"]


def test_skips_existing_without_overwrite(env_guard):
    env_guard("INJECT_EXISTING")
    os.environ["INJECT_EXISTING"] = "original"

    result = inject({"INJECT_EXISTING": "new"}, overwrite=False)

    assert result.skipped == ["INJECT_EXISTING"]
    assert result.injected == []
    assert os.environ["INJECT_EXISTING"] == "original"


def test_overwrite_existing(env_guard):
    env_guard("INJECT_OVR")
    os.environ["INJECT_OVR"] = "old"

    result = inject({"INJECT_OVR": "new"}, overwrite=True)

    assert result.injected == ["INJECT_OVR"]
    assert os.environ["INJECT_OVR"] == "new"


def test_filter_keys(env_guard):
    env_guard("INJECT_A", "INJECT_B")
    os.environ.pop("INJECT_A", None)
    os.environ.pop("INJECT_B", None)

    result = inject({"INJECT_A": "1", "INJECT_B": "2"}, keys=["INJECT_A"])

    assert result.injected == ["INJECT_A"]
    assert os.environ.get("INJECT_B", "") == ""


def test_empty_entries():
    result = inject({})
    assert result.injected == []
    assert result.skipped == []


def test_failure_raises_with_partial_result(env_guard):
    env_guard("INJECT_A_OK", "INJECT_NUL")
    os.environ.pop("INJECT_A_OK", None)
    os.environ.pop("INJECT_NUL", None)

    with pytest.raises(InjectError) as info:
        inject({"INJECT_A_OK": "1", "INJECT_NUL": "a\x00b"})

    assert info.value.key == "INJECT_NUL"
    assert info.value.result.injected == ["INJECT_A_OK"]
    assert "INJECT_NUL" in str(info.value)