import logging

import pytest

from paramhub import config


class TestParseLogLevel:
    @pytest.mark.parametrize("name,level", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Warning ", logging.WARNING),
        ("critical", logging.CRITICAL),
    ])
    def test_known_levels(self, name, level):
        assert config.parse_log_level(name) == level

    @pytest.mark.parametrize("name", ["INFOO", "", "basicConfig", "NOTSET"])
    def test_unknown_level_is_a_config_error(self, name):
        with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
            config.parse_log_level(name)


class TestConfigureLogging:
    def test_file_handler_only_when_log_file_set(self, tmp_path):
        root = logging.getLogger()
        before = list(root.handlers)
        try:
            config.configure_logging(logging.WARNING, "")
            added = [h for h in root.handlers if h not in before]
            assert [type(h) for h in added] == [logging.StreamHandler]

            log_file = tmp_path / "paramhub.log"
            config.configure_logging(logging.WARNING, str(log_file))
            added = [h for h in root.handlers if h not in before]
            assert any(isinstance(h, logging.FileHandler) for h in added)
            assert all(h.level == logging.WARNING for h in added)
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(config.LOG_LEVEL)


class TestMain:
    def test_runs_on_configured_host_and_port(self, monkeypatch):
        from paramhub import app as app_module

        calls = []
        monkeypatch.setattr(app_module.app, "run", lambda **kwargs: calls.append(kwargs))
        app_module.main()

        assert calls == [{
            "host": config.PARAMHUB_HOST,
            "port": config.PARAMHUB_PORT,
            "debug": config.LOG_LEVEL == logging.DEBUG,
        }]
