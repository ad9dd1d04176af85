"""Tests for the shared debug manager."""

import logging

from connect4_rules.debug import debug, DebugLevel, LOGGER_NAME
from connect4_rules.game.state import create_game


class TestDebugManager:
    """Tests for level and component filtering."""

    def test_moves_logged_at_debug(self, caplog):
        debug.configure(level=DebugLevel.DEBUG)
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        create_game().apply_move(3)
        assert "[state] Player ONE placed at (5, 3)" in caplog.text

    def test_level_filters_messages(self, caplog):
        debug.configure(level=DebugLevel.WARNING)
        debug.info("hidden", "state")
        debug.warning("shown", "state")
        assert "hidden" not in caplog.text
        assert "[state] shown" in caplog.text

    def test_component_filter(self, caplog):
        debug.configure(level=DebugLevel.INFO, components=["rules"])
        debug.info("from rules", "rules")
        debug.info("from state", "state")
        assert "from rules" in caplog.text
        assert "from state" not in caplog.text

    def test_disabled(self, caplog):
        debug.configure(enabled=False)
        debug.error("nothing")
        assert "nothing" not in caplog.text

    def test_game_end_logged_at_info(self, caplog):
        debug.configure(level=DebugLevel.INFO)
        state = create_game()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            state.apply_move(column)
        assert "Player ONE wins" in caplog.text

    def test_set_from_string(self):
        assert debug.set_from_string("trace") is True
        assert debug.level == DebugLevel.TRACE
        assert debug.set_from_string("loud") is False
        assert debug.level == DebugLevel.TRACE

    def test_timer(self):
        debug.start_timer("t")
        assert debug.end_timer("t") >= 0.0
        assert debug.end_timer("t") is None

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "game.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(log_file))
        debug.info("written to file", "cli")
        debug.configure(log_file="")
        assert "[cli] written to file" in log_file.read_text()
