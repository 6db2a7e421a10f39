import pytest
from pydantic import ValidationError

from commits_since_tag.infrastructure.config import Settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_USER", "octocat")
    monkeypatch.setenv("GITHUB_TOKEN", "s3cret")
    monkeypatch.setenv("ISOLATE_REPO_FAILURES", "false")

    settings = Settings(_env_file=None)

    assert settings.github_user == "octocat"
    assert settings.github_token.get_secret_value() == "s3cret"
    assert "s3cret" not in repr(settings)
    assert settings.isolate_repo_failures is False
    assert settings.github_api_url == "https://api.github.com"


def test_settings_require_token(monkeypatch):
    monkeypatch.setenv("GITHUB_USER", "octocat")
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
