import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from lambda_connect.config import Settings, load_settings
from lambda_connect.log import LoguruLogger, configure_logging, default_logger


@pytest.fixture
def records():
    captured: list[dict] = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(sink_id)


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.logger_name == "lambda-connect"
    assert settings.log_level == "INFO"
    assert settings.log_serialize is True


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAMBDA_CONNECT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LAMBDA_CONNECT_LOG_SERIALIZE", "false")
    monkeypatch.setenv("LAMBDA_CONNECT_LOGGER_NAME", "orders-api")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_serialize is False
    assert default_logger(settings).name == "orders-api"


def test_explicit_overrides_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAMBDA_CONNECT_LOG_LEVEL", "DEBUG")
    assert load_settings(log_level="ERROR", log_serialize=None).log_level == "ERROR"


def test_invalid_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_fields_are_bound_as_extra(records) -> None:
    LoguruLogger().info({"request": {"path": "/users"}}, "Request")

    assert len(records) == 1
    record = records[0]
    assert record["message"] == "Request"
    assert record["level"].name == "INFO"
    assert record["extra"]["name"] == "lambda-connect"
    assert record["extra"]["request"] == {"path": "/users"}


def test_debug_level(records) -> None:
    LoguruLogger("svc").debug({"middleware": "parse"}, "MiddlewareBefore")
    assert records[0]["level"].name == "DEBUG"
    assert records[0]["extra"] == {"name": "svc", "middleware": "parse"}


def test_warn_keeps_exception(records) -> None:
    try:
        raise KeyError("user_id")
    except KeyError as exc:
        error = exc

    LoguruLogger().warn(error, "Unexpected error")

    record = records[0]
    assert record["level"].name == "WARNING"
    assert record["exception"] is not None
    assert record["exception"].value is error
    assert record["extra"]["error"] == "KeyError('user_id')"


def test_warn_accepts_plain_fields(records) -> None:
    LoguruLogger().warn({"attempt": 2}, "Slow step")
    assert records[0]["extra"]["attempt"] == 2
    assert records[0]["exception"] is None


@pytest.mark.parametrize("serialize", [True, False])
def test_configure_logging_installs_one_sink(serialize: bool) -> None:
    try:
        sink_id = configure_logging(Settings(log_level="WARNING", log_serialize=serialize))
        assert isinstance(sink_id, int)
        logger.remove(sink_id)
    finally:
        logger.add(sys.stderr)
