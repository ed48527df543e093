"""Configuration tests."""

import pytest
import structlog
from prometheus_client import REGISTRY

from rui.core import AppParams, DataParseError, InvalidFormatError, LogContext, get_logger, report_error
from rui.core.config import Settings
from rui.core.logging_config import add_session_context, clip_long_values


@pytest.mark.unit
def test_settings_defaults(settings):
    """Test default settings load correctly."""
    assert settings.host == "localhost"
    assert settings.port == 8080
    assert settings.socket_path == "/ws"
    assert settings.socket_auto_close == 0
    assert settings.default_language == "en"
    assert settings.enable_metrics is True


@pytest.mark.unit
def test_settings_from_environment(settings):
    """Test RUI_ variables override defaults."""
    assert settings.getter_timeout == 0.05
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_settings_validation():
    """Test settings validation."""
    settings = Settings(port=9000)
    assert settings.port == 9000

    # Port out of range
    with pytest.raises(Exception):
        Settings(port=70000)

    # Non-positive getter timeout
    with pytest.raises(Exception):
        Settings(getter_timeout=0)


@pytest.mark.unit
def test_app_params_from_settings(settings):
    """Test application parameters inherit the settings."""

    def factory():
        return None

    params = AppParams.from_settings(factory, settings)
    assert params.content_factory is factory
    assert params.getter_timeout == settings.getter_timeout
    assert params.title == settings.title


@pytest.mark.unit
def test_data_parse_error_text():
    """Test parse errors carry their position."""
    error = DataParseError("unexpected end", line=3, column=7)
    assert isinstance(error, InvalidFormatError)
    assert str(error) == "unexpected end (line 3, column 7)"
    assert error.context == {"line": 3, "column": 7}


@pytest.mark.unit
def test_report_error_counts():
    """Test reported errors are counted by kind."""
    labels = {"error_type": "invalid_format"}
    before = REGISTRY.get_sample_value("rui_errors_total", labels) or 0
    report_error(InvalidFormatError("bad value", value="x"))
    assert REGISTRY.get_sample_value("rui_errors_total", labels) == before + 1


@pytest.mark.unit
def test_log_context():
    """Test log context binds and unbinds."""
    logger = get_logger(__name__)
    with LogContext(session_id=7) as context:
        logger.debug("inside_context")
        assert context.context == {"session_id": 7}


@pytest.mark.unit
def test_nested_log_context_restores_outer_fields():
    """Test an inner block restores the fields bound by the outer one."""
    structlog.contextvars.clear_contextvars()
    with LogContext(session_id=1, command="click-event"):
        with LogContext(command="answer", view_id="id000002"):
            assert structlog.contextvars.get_contextvars() == {
                "session_id": 1,
                "command": "answer",
                "view_id": "id000002",
            }
        assert structlog.contextvars.get_contextvars() == {"session_id": 1, "command": "click-event"}
    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.unit
def test_log_context_rejects_unknown_fields():
    """Test only session fields can be bound."""
    with pytest.raises(TypeError):
        LogContext(user="root")


@pytest.mark.unit
def test_session_context_processor():
    """Test session fields follow the event name and empty ones are dropped."""
    event_dict = {"event": "event_view_not_found", "html_id": "id9", "command": "click-event", "view_id": None}
    result = add_session_context(None, "debug", event_dict)
    assert list(result) == ["event", "command", "html_id"]


@pytest.mark.unit
def test_long_values_are_clipped():
    """Test long string fields are shortened with their full length noted."""
    processor = clip_long_values(10)
    result = processor(None, "info", {"event": "x" * 20, "answer": "a" * 25, "count": 30})
    assert result["answer"] == "aaaaaaaaaa... (25 chars)"
    assert result["event"] == "x" * 20
    assert result["count"] == 30
