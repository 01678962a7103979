import pytest

from bitbucket_webhooks.config import Settings, load_settings
from bitbucket_webhooks.errors import ConfigError

FIELDS = ("BASE_URL", "TOKEN", "USERNAME", "APP_PASSWORD", "TIMEOUT", "OWNER", "REPO")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for field in FIELDS:
        monkeypatch.delenv(f"BITBUCKET_{field}", raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings == Settings()
        assert settings.base_url == "https://api.bitbucket.org"
        assert settings.timeout == 30.0

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("token: abc\nowner: alice\nrepo: repo1\ntimeout: 5\n")
        settings = load_settings(path)
        assert settings.token == "abc"
        assert settings.owner == "alice"
        assert settings.timeout == 5.0

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("owner: alice\nrepo: repo1\n")
        monkeypatch.setenv("BITBUCKET_OWNER", "bob")
        monkeypatch.setenv("BITBUCKET_TIMEOUT", "2.5")

        settings = load_settings(path)

        assert settings.owner == "bob"
        assert settings.repo == "repo1"
        assert settings.timeout == 2.5

    def test_empty_env_value_is_ignored(self, tmp_path, monkeypatch):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("owner: alice\n")
        monkeypatch.setenv("BITBUCKET_OWNER", "")
        assert load_settings(path).owner == "alice"

    def test_unknown_file_keys_ignored(self, tmp_path):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("owner: alice\ncolour: blue\n")
        assert load_settings(path).owner == "alice"

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("BITBUCKET_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            load_settings()

    def test_invalid_file_value(self, tmp_path):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("timeout: later\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_file_must_be_mapping(self, tmp_path):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "bitbucket.yaml"
        path.write_text("owner: [unclosed\n")
        with pytest.raises(ConfigError):
            load_settings(path)
