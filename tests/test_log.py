"""
Logging tests - LOG() respects the connected state's verbosity
"""

import pytest
from loguru import logger

from richtag.lib.log import LOG, state_connectToLogger, state_disconnect
from richtag.lib.parser import parse
from richtag.models import ProgramState


@pytest.fixture
def messages():
    captured = []
    sink_id = logger.add(captured.append, format="{message}")
    yield captured
    logger.remove(sink_id)


class TestVerbosity:
    """Messages appear only at or below the state's verbosity"""

    def test_silent_without_state(self, messages):
        LOG("nobody listening", level=1)
        assert messages == []

    def test_level_filtering(self, messages):
        token = state_connectToLogger(ProgramState(verbosity=2))
        try:
            LOG("normal", level=1)
            LOG("verbose", level=2)
            LOG("debug", level=3)
        finally:
            state_disconnect(token)

        text = "".join(messages)
        assert "normal" in text
        assert "verbose" in text
        assert "debug" not in text

    def test_parser_traces_dispositions(self, messages):
        """At verbosity 3 every tag disposition is logged"""
        token = state_connectToLogger(ProgramState(verbosity=3))
        try:
            parse("<red>x<nope>")
        finally:
            state_disconnect(token)

        text = "".join(messages)
        assert "color-open" in text
        assert "unrecognized" in text
