import pytest
from pydantic import ValidationError

from treehole.core.config import Settings


@pytest.mark.parametrize("raw", ["treehole", "/treehole/", " /treehole "])
def test_path_prefix_is_normalized(raw):
    settings = Settings(PATH_PREFIX=raw)

    assert settings.PATH_PREFIX == "/treehole"
    assert settings.api_prefix == "/treehole/api"


def test_empty_path_prefix_rejected():
    with pytest.raises(ValidationError):
        Settings(PATH_PREFIX="/")


def test_cors_origins_list():
    assert Settings(CORS_ORIGINS="*").cors_origins_list == ["*"]
    assert Settings(CORS_ORIGINS="http://a.test, http://b.test").cors_origins_list == [
        "http://a.test",
        "http://b.test",
    ]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PATH_PREFIX", "/239210302")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.PATH_PREFIX == "/239210302"
    assert settings.PORT == 8080
