"""Pytest configuration and fixtures."""

import pytest

from refshift.utils.logging import logger


@pytest.fixture
def captured_logs():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def warnings_logged(captured_logs):
    """Messages of WARNING records only."""

    def _messages():
        return [r["message"] for r in captured_logs if r["level"].name == "WARNING"]

    return _messages


@pytest.fixture
def form_component():
    """Class component with one string ref and one usage."""
    return """class Form extends React.Component {
  componentDidMount() {
    this.refs.input.focus();
  }

  render() {
    return <input ref="input" />;
  }
}
"""
