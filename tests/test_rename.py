from envoysync.rename import bulk_rename, rename_entry


def base_entries():
    return {
        "APP_HOST": "localhost",
        "APP_PORT": "8080",
        "DB_PASS": "secret",
    }


def test_rename_entry_success():
    updated, res = rename_entry(base_entries(), "APP_HOST", "SERVICE_HOST", False)
    assert res.renamed
    assert res.reason == "ok"
    assert "APP_HOST" not in updated
    assert updated["SERVICE_HOST"] == "localhost"


def test_rename_entry_old_key_missing():
    updated, res = rename_entry(base_entries(), "MISSING_KEY", "NEW_KEY", False)
    assert not res.renamed
    assert "not found" in res.reason
    assert "NEW_KEY" not in updated


def test_rename_entry_conflict_no_overwrite():
    updated, res = rename_entry(base_entries(), "APP_HOST", "APP_PORT", False)
    assert not res.renamed
    assert "already exists" in res.reason
    assert updated["APP_HOST"] == "localhost"
    assert updated["APP_PORT"] == "8080"


def test_rename_entry_conflict_with_overwrite():
    updated, res = rename_entry(base_entries(), "APP_HOST", "APP_PORT", True)
    assert res.renamed
    assert "APP_HOST" not in updated
    assert updated["APP_PORT"] == "localhost"


def test_rename_entry_same_key():
    updated, res = rename_entry(base_entries(), "APP_HOST", "APP_HOST", False)
    assert not res.renamed
    assert "identical" in res.reason
    assert updated["APP_HOST"] == "localhost"


def test_rename_entry_original_unmodified():
    orig = base_entries()
    rename_entry(orig, "APP_HOST", "SERVICE_HOST", False)
    assert orig["APP_HOST"] == "localhost"
    assert "SERVICE_HOST" not in orig


def test_bulk_rename_all_succeed():
    renames = [("APP_HOST", "SERVICE_HOST"), ("APP_PORT", "SERVICE_PORT")]
    updated, results = bulk_rename(base_entries(), renames, False)
    assert len(results) == 2
    assert results[0].renamed
    assert results[1].renamed
    assert updated["SERVICE_HOST"] == "localhost"
    assert updated["SERVICE_PORT"] == "8080"


def test_bulk_rename_partial_failure():
    renames = [("APP_HOST", "SERVICE_HOST"), ("NONEXISTENT", "OTHER")]
    updated, results = bulk_rename(base_entries(), renames, False)
    assert results[0].renamed
    assert not results[1].renamed
    assert updated["SERVICE_HOST"] == "localhost"
    assert "OTHER" not in updated


def test_bulk_rename_is_sequential():
    renames = [("APP_HOST", "MIDDLE"), ("MIDDLE", "FINAL")]
    updated, results = bulk_rename(base_entries(), renames)
    assert [r.renamed for r in results] == [True, True]
    assert updated["FINAL"] == "localhost"
    assert "MIDDLE" not in updated