"""Tests for logging bootstrap."""
import logging

from firebase_authentication.logging import _get_log_level, bootstrap_logging

INI = """
[loggers]
keys=root

[handlers]
keys=console

[formatters]
keys=simple

[logger_root]
level=WARNING
handlers=console

[handler_console]
class=StreamHandler
level=WARNING
formatter=simple
args=(sys.stderr,)

[formatter_simple]
format=%(levelname)s: %(name)s: %(message)s
"""


class TestBootstrapLogging:

    def test_log_level_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv('LOG_LEVEL', raising=False)
        assert _get_log_level() == 'INFO'

    def test_invalid_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'chatty')
        assert _get_log_level() == 'INFO'

    def test_ini_file_with_log_level_override(self, monkeypatch, tmp_path):
        config_path = tmp_path / 'logging.ini'
        config_path.write_text(INI)
        monkeypatch.setenv('LOGGING_CONFIG', str(config_path))
        monkeypatch.setenv('LOG_LEVEL', 'debug')

        root_logger = logging.getLogger()
        previous_level = root_logger.level
        try:
            bootstrap_logging(__name__)
            assert root_logger.level == logging.DEBUG
            assert logging.getLogger('firebase_authentication').level == logging.DEBUG
        finally:
            root_logger.setLevel(previous_level)
            logging.getLogger('firebase_authentication').setLevel(logging.NOTSET)
