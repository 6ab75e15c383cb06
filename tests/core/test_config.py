from accounts_api.core.config import Settings, get_settings


def test_profile_limit_defaults():
    settings = Settings()
    assert settings.STATUS_DESCRIPTION_MAX_LENGTH == 32
    assert settings.BIO_MAX_LENGTH == 512


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BIO_MAX_LENGTH", "1024")
    monkeypatch.setenv("DB_ECHO_LOG", "true")

    settings = Settings()
    assert settings.BIO_MAX_LENGTH == 1024
    assert settings.DB_ECHO_LOG is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
