from aura.config import Config


class TestConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AURA_DATABASE__URL", raising=False)
        config = Config()

        assert config.database.url == "sqlite+aiosqlite:///./aura.db"
        assert config.database.auto_migrate is True
        assert config.docker.url is None

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("AURA_DATABASE__URL", "postgresql+asyncpg://db/aura")
        monkeypatch.setenv("AURA_LOGGING__LEVEL", "DEBUG")

        config = Config()

        assert config.database.url == "postgresql+asyncpg://db/aura"
        assert config.logging.level == "DEBUG"

    def test_yaml_file(self, monkeypatch, tmp_path):
        config_file = tmp_path / "aura.yaml"
        config_file.write_text("docker:\n  url: tcp://docker:2375\nserver:\n  name: Test\n")
        monkeypatch.setenv("AURA_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.docker.url == "tcp://docker:2375"
        assert config.server.name == "Test"

    def test_env_beats_yaml(self, monkeypatch, tmp_path):
        config_file = tmp_path / "aura.yaml"
        config_file.write_text("database:\n  echo: false\n")
        monkeypatch.setenv("AURA_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("AURA_DATABASE__ECHO", "true")

        assert Config().database.echo is True

    def test_log_file_from_env(self, monkeypatch):
        monkeypatch.setenv("AURA_LOG_FILE", "/tmp/aura.log")
        assert Config().logging.file == "/tmp/aura.log"
