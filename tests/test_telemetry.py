import pytest

from lazy_transform.runtime import telemetry
from lazy_transform.runtime.telemetry import TelemetrySettings


def test_settings_defaults_without_environment() -> None:
    settings = TelemetrySettings.from_env({})

    assert settings.logger_name == "lazy_transform"
    assert settings.level == "WARNING"
    assert settings.console is True
    assert settings.trace_steps is False


def test_settings_read_prefixed_variables() -> None:
    settings = TelemetrySettings.from_env(
        {
            "LAZY_TRANSFORM_LOG_LEVEL": "debug",
            "LAZY_TRANSFORM_DISABLE_CONSOLE": "yes",
            "LAZY_TRANSFORM_TRACE_STEPS": "1",
            "LAZY_TRANSFORM_LOG_BUFFER_SIZE": "64",
            "TRACE_STEPS": "0",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.trace_steps is True
    assert settings.buffer_size == 64


def test_settings_reject_bad_buffer_size() -> None:
    with pytest.raises(ValueError):
        TelemetrySettings.from_env({"LAZY_TRANSFORM_LOG_BUFFER_SIZE": "lots"})


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_trace_steps_follows_settings() -> None:
    try:
        telemetry.configure(settings=TelemetrySettings(trace_steps=True))
        assert telemetry.trace_steps_enabled() is True
    finally:
        telemetry.configure(settings=TelemetrySettings.from_env({}))
    assert telemetry.trace_steps_enabled() is False
