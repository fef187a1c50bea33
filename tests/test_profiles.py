import pytest

from envoysync.profiles import ProfileNotFoundError, list_profiles, load_profile


def test_load_profile_dotenv_suffix(tmp_path):
    (tmp_path / "dev.env").write_text("APP_ENV=dev\nDEBUG=true\n")
    profile = load_profile(tmp_path, "dev")
    assert profile.name == "dev"
    assert profile.entries == {"APP_ENV": "dev", "DEBUG": "true"}


def test_load_profile_env_dot_prefix(tmp_path):
    (tmp_path / ".env.staging").write_text("APP_ENV=staging\n")
    profile = load_profile(tmp_path, "staging")
    assert profile.entries["APP_ENV"] == "staging"


def test_suffix_form_preferred(tmp_path):
    (tmp_path / "qa.env").write_text("SOURCE=suffix\n")
    (tmp_path / ".env.qa").write_text("SOURCE=prefix\n")
    assert load_profile(tmp_path, "qa").entries["SOURCE"] == "suffix"


def test_load_profile_not_found(tmp_path):
    with pytest.raises(ProfileNotFoundError, match="prod"):
        load_profile(tmp_path, "prod")


def test_load_profile_invalid_file(tmp_path):
    (tmp_path / "bad.env").write_text("NOEQUALS\n")
    with pytest.raises(ValueError):
        load_profile(tmp_path, "bad")


def test_list_profiles_multiple(tmp_path):
    (tmp_path / "dev.env").write_text("X=1")
    (tmp_path / ".env.staging").write_text("X=2")
    (tmp_path / ".env").write_text("X=0")
    (tmp_path / "README.md").write_text("")
    assert sorted(list_profiles(tmp_path)) == ["dev", "staging"]


def test_list_profiles_ignores_directories_and_duplicates(tmp_path):
    (tmp_path / "dev.env").write_text("X=1")
    (tmp_path / ".env.dev").write_text("X=2")
    (tmp_path / "sub.env").mkdir()
    assert list_profiles(tmp_path) == ["dev"]


def test_list_profiles_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_profiles(tmp_path / "absent")