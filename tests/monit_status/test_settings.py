"""
Tests for StatusConfig loading and saving.
"""

import pytest
import yaml

from monit_status.config.settings import StatusConfig
from monit_status.exceptions import ConfigError
from monit_status.models import FormatVersion


class TestStatusConfig:
    def test_defaults(self):
        config = StatusConfig()
        assert config.format_version is FormatVersion.V2
        assert config.api.status_path == "/_status"
        assert config.logging.console_level == "INFO"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = StatusConfig.from_file(tmp_path / "absent.yml")
        assert config == StatusConfig()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "etc" / "config.yml"
        config = StatusConfig(format_version=1)
        config.logging.use_json = True
        config.save(path)

        assert yaml.safe_load(path.read_text())["format_version"] == 1

        loaded = StatusConfig.from_file(path)
        assert loaded.format_version is FormatVersion.V1
        assert loaded.logging.use_json is True

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("api:\n  status_path: /status.json\nlogging:\n  console_level: debug\n")
        config = StatusConfig.from_file(path)
        assert config.api.status_path == "/status.json"
        assert config.logging.console_level == "DEBUG"
        assert config.format_version is FormatVersion.V2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert StatusConfig.from_file(path) == StatusConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "format_version: 7\n",
            "logging:\n  console_level: LOUD\n",
            "- not\n- a mapping\n",
            "format_version: [unclosed\n",
        ],
    )
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / "config.yml"
        path.write_text(content)
        with pytest.raises(ConfigError):
            StatusConfig.from_file(path)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MONIT_STATUS_FORMAT_VERSION", "1")
        monkeypatch.setenv("MONIT_STATUS_LOG_LEVEL", "warning")
        monkeypatch.setenv("MONIT_STATUS_LOG_JSON", "true")
        monkeypatch.setenv("MONIT_STATUS_STATUS_PATH", "/status")
        config = StatusConfig.from_env()
        assert config.format_version is FormatVersion.V1
        assert config.logging.console_level == "WARNING"
        assert config.logging.use_json is True
        assert config.api.status_path == "/status"

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("MONIT_STATUS_FORMAT_VERSION", "5")
        with pytest.raises(ConfigError):
            StatusConfig.from_env()

    def test_process_engine_from_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("process_engine: false\n")
        assert StatusConfig.from_file(path).process_engine is False
        assert StatusConfig().process_engine is True

    def test_process_engine_from_env(self, monkeypatch):
        monkeypatch.setenv("MONIT_STATUS_PROCESS_ENGINE", "false")
        assert StatusConfig.from_env().process_engine is False

    def test_apply_to_disables_process_engine(self, runtime):
        applied = StatusConfig(process_engine=False).apply_to(runtime)
        assert applied.process_engine is False
        assert applied.server == runtime.server
        assert runtime.process_engine is True

    def test_apply_to_keeps_runtime_without_engine(self, runtime):
        runtime = runtime.model_copy(update={"process_engine": False})
        assert StatusConfig().apply_to(runtime) is runtime
