import pytest
from swaggerize.logging.config import LoggingSettings
from swaggerize.logging.level import LogLevel


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Clear relevant env vars before each test
    keys = [
        "SWAGGERIZE_LOGGING_LEVEL",
        "SWAGGERIZE_LOGGING_JSON_FORMAT",
        "SWAGGERIZE_LOGGING_INCLUDE_TIMESTAMP",
        "SWAGGERIZE_LOGGING_INCLUDE_LEVEL",
        "SWAGGERIZE_LOGGING_CONSOLE_ENABLED",
        "SWAGGERIZE_LOGGING_FILE_ENABLED",
        "SWAGGERIZE_LOGGING_FILE_PATH",
    ]
    for key in keys:
        monkeypatch.delenv(key, raising=False)


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, LoggingSettings()),
        ({"LEVEL": "debug"}, LoggingSettings(level="DEBUG")),
        ({"JSON_FORMAT": "true"}, LoggingSettings(json_format=True)),
        ({"INCLUDE_TIMESTAMP": "false"}, LoggingSettings(include_timestamp=False)),
        ({"CONSOLE_ENABLED": "false"}, LoggingSettings(console_enabled=False)),
        (
            {"FILE_ENABLED": "true", "FILE_PATH": "/tmp/swaggerize.log"},
            LoggingSettings(file_enabled=True, file_path="/tmp/swaggerize.log"),
        ),
    ],
)
def test_logging_settings_env(monkeypatch, env, expected):
    for k, v in env.items():
        monkeypatch.setenv(f"SWAGGERIZE_LOGGING_{k}", v)
    settings = LoggingSettings.load()
    for field in LoggingSettings.model_fields:
        assert getattr(settings, field) == getattr(expected, field)


def test_logging_settings_type_validation():
    with pytest.raises(ValueError):
        LoggingSettings.model_validate({"json_format": "notabool"})
    with pytest.raises(ValueError):
        LoggingSettings.model_validate({"level": 123})
    with pytest.raises(ValueError):
        LoggingSettings.model_validate({"level": "LOUD"})


def test_logging_settings_defaults():
    settings = LoggingSettings()
    assert settings.level is LogLevel.INFO
    assert settings.json_format is False
    assert settings.include_timestamp is True
    assert settings.include_level is True
    assert settings.console_enabled is True
    assert settings.file_enabled is False
    assert settings.file_path is None
