"""
Unit tests for the optbridge logger.
"""

import logging

from optbridge.core.models.config import LoggingConfig
from optbridge.services.logging import OptBridgeLogger


class TestOptBridgeLogger:
    def test_defaults_warn_on_stderr(self, capsys):
        logger = OptBridgeLogger(name="optbridge.test.defaults")

        logger.debug("hidden")
        logger.warning("Option name must be a string")

        err = capsys.readouterr().err
        assert "optbridge.test.defaults [WARNING] Option name must be a string" in err
        assert "hidden" not in err

    def test_level_from_config(self, capsys):
        logger = OptBridgeLogger(LoggingConfig(level="DEBUG"), name="optbridge.test.debug")

        logger.debug("visible %s", "now")

        assert logger.level == logging.DEBUG
        assert "visible now" in capsys.readouterr().err

    def test_file_output(self, tmp_path, capsys):
        log_file = tmp_path / "logs" / "optbridge.log"
        logger = OptBridgeLogger(
            LoggingConfig(console=False, file=True),
            name="optbridge.test.file",
            log_file=log_file,
        )

        logger.warning("shown %s", "warning")

        assert "[WARNING] optbridge.test.file: shown warning" in log_file.read_text()
        assert capsys.readouterr().err == ""

    def test_silent_when_all_outputs_disabled(self, capsys):
        logger = OptBridgeLogger(LoggingConfig(console=False), name="optbridge.test.silent")

        logger.warning("nowhere")

        assert capsys.readouterr().err == ""

    def test_rebuilding_replaces_handlers(self, capsys):
        OptBridgeLogger(name="optbridge.test.rebuild")
        logger = OptBridgeLogger(name="optbridge.test.rebuild")

        logger.warning("once")

        assert capsys.readouterr().err.count("once") == 1
