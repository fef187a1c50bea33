import pytest

from envoysync.parsing import Entry
from envoysync.patch import PatchError, PatchOp, PatchResult
from envoysync.patch import patch as apply_patch


def patch_entries():
    return [
        Entry("APP_ENV", "development"),
        Entry("DB_PASSWORD", "secret"),
        Entry("PORT", "8080"),
    ]


def test_set_existing_key():
    out, results = apply_patch(
        patch_entries(), [PatchOp(key="PORT", op="set", value="9090")]
    )
    assert results[0].applied is True
    assert Entry("PORT", "9090") in out
    assert len(out) == 3


def test_set_new_key():
    out, _ = apply_patch(
        patch_entries(), [PatchOp(key="NEW_KEY", op="set", value="hello")]
    )
    assert out[-1] == Entry("NEW_KEY", "hello")


def test_delete_existing_key():
    out, results = apply_patch(patch_entries(), [PatchOp(key="APP_ENV", op="delete")])
    assert results[0].applied is True
    assert all(e.key != "APP_ENV" for e in out)
    assert len(out) == 2


def test_delete_missing_key():
    _, results = apply_patch(patch_entries(), [PatchOp(key="MISSING", op="delete")])
    assert results == [PatchResult("delete", "MISSING", False, "key not found")]


def test_rename_key():
    out, results = apply_patch(
        patch_entries(), [PatchOp(key="PORT", op="rename", new_key="HTTP_PORT")]
    )
    assert results[0].applied is True
    keys = [e.key for e in out]
    assert "PORT" not in keys
    assert "HTTP_PORT" in keys


def test_rename_missing_key():
    _, results = apply_patch(
        patch_entries(), [PatchOp(key="NOPE", op="rename", new_key="OTHER")]
    )
    assert results[0].applied is False
    assert results[0].reason == "key not found"


def test_rename_empty_new_key():
    with pytest.raises(PatchError):
        apply_patch(patch_entries(), [PatchOp(key="PORT", op="rename", new_key="")])


def test_unknown_op():
    with pytest.raises(PatchError):
        apply_patch(patch_entries(), [PatchOp(key="X", op="upsert")])


def test_original_unmodified():
    original = patch_entries()
    apply_patch(
        original,
        [PatchOp(key="PORT", op="set", value="1"), PatchOp(key="APP_ENV", op="delete")],
    )
    assert original == patch_entries()


def test_ops_applied_in_sequence():
    out, results = apply_patch(
        patch_entries(),
        [
            PatchOp(key="PORT", op="rename", new_key="HTTP_PORT"),
            PatchOp(key="HTTP_PORT", op="set", value="80"),
        ],
    )
    assert [r.applied for r in results] == [True, True]
    assert out[2] == Entry("HTTP_PORT", "80")