"""
Unit tests for environment-driven settings.
"""
from greeter.core.config import Settings


def test_defaults(settings):
    assert settings.host == "0.0.0.0"
    assert settings.port == 4000
    assert settings.log_level == "INFO"
    assert settings.users_csv is None


def test_environment_overrides(clean_env):
    clean_env.setenv("GREETER_HOST", "127.0.0.1")
    clean_env.setenv("GREETER_PORT", "8080")
    clean_env.setenv("GREETER_LOG_LEVEL", "debug")
    clean_env.setenv("GREETER_USERS_CSV", "data/users.csv")

    settings = Settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.users_csv == "data/users.csv"


def test_empty_users_csv_means_unset(clean_env):
    clean_env.setenv("GREETER_USERS_CSV", "")

    assert Settings().users_csv is None
