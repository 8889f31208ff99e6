"""
Unit tests for database, completion and orchestrator configuration
"""

import pytest

from boardroom.config.completion import CompletionConfig, ContextWindowMode, OrchestratorConfig
from boardroom.config.database import DatabaseConfig, PostgreSQLConfig


COMPLETION_ENV = [
    "OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_MODEL",
    "COMPLETION_TIMEOUT", "COMPLETION_CONFIG_PATH"
]

ORCHESTRATOR_ENV = ["CONTEXT_MESSAGE_LIMIT", "CONTEXT_WINDOW_MODE", "PERSONA_CALL_TIMEOUT"]

POSTGRES_ENV = [
    "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB", "POSTGRES_USER",
    "POSTGRES_PASSWORD", "POSTGRES_SCHEMA", "DB_POOL_MIN_SIZE", "DB_POOL_MAX_SIZE",
    "DB_COMMAND_TIMEOUT"
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in COMPLETION_ENV + ORCHESTRATOR_ENV + POSTGRES_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestPostgreSQLConfig:
    """Test PostgreSQL configuration"""

    def test_from_env_defaults(self, clean_env):
        """Test creating config from environment with defaults"""
        config = PostgreSQLConfig.from_env()

        assert config.host == "localhost"
        assert config.port == 5432
        assert config.database == "boardroom"
        assert config.user == "boardroom_user"
        assert config.schema == "boardroom"
        assert config.pool_min_size == 5
        assert config.pool_max_size == 20

    def test_from_env_custom_values(self, clean_env):
        """Test creating config with custom environment values"""
        clean_env.setenv("POSTGRES_HOST", "db.internal")
        clean_env.setenv("POSTGRES_PORT", "5433")
        clean_env.setenv("POSTGRES_SCHEMA", "app")
        clean_env.setenv("DB_POOL_MAX_SIZE", "30")

        config = PostgreSQLConfig.from_env()

        assert config.host == "db.internal"
        assert config.port == 5433
        assert config.schema == "app"
        assert config.pool_max_size == 30

    def test_pool_config(self):
        """Test asyncpg pool arguments carry the command timeout"""
        config = PostgreSQLConfig(
            host="localhost",
            port=5432,
            database="test_db",
            user="test_user",
            password="test_pass",
            command_timeout=15.0
        )

        pool_config = config.get_pool_config()

        assert pool_config["command_timeout"] == 15.0
        assert (pool_config["min_size"], pool_config["max_size"]) == (5, 20)
        assert pool_config["password"] == "test_pass"
        assert "schema" not in pool_config

    def test_health_check_config_hides_credentials(self, clean_env):
        clean_env.setenv("POSTGRES_PASSWORD", "secret")

        assert DatabaseConfig().get_health_check_config() == {
            "postgresql": {
                "host": "localhost",
                "port": 5432,
                "database": "boardroom",
                "schema": "boardroom"
            }
        }


class TestCompletionConfig:
    """Test completion client configuration"""

    def test_from_env_defaults(self, clean_env):
        config = CompletionConfig.from_env()

        assert config.api_key == ""
        assert config.base_url == "https://api.openai.com/v1"
        assert config.model == "gpt-4o-mini"
        assert config.request_timeout == 30.0
        assert config.is_configured is False

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-test")
        clean_env.setenv("OPENAI_BASE_URL", "http://localhost:11434/v1/")
        clean_env.setenv("OPENAI_MODEL", "llama3")
        clean_env.setenv("COMPLETION_TIMEOUT", "12.5")

        config = CompletionConfig.from_env()

        assert config.is_configured is True
        assert config.chat_completions_url == "http://localhost:11434/v1/chat/completions"
        assert config.model == "llama3"
        assert config.request_timeout == 12.5

    def test_yaml_file_with_env_override(self, clean_env, tmp_path):
        """Test YAML values apply and environment variables win"""
        config_file = tmp_path / "completion.yaml"
        config_file.write_text(
            "completion:\n"
            "  base_url: https://gateway.example.com/v1\n"
            "  model: gpt-4o\n"
            "  request_timeout: 45\n"
            "  unknown_key: ignored\n"
        )
        clean_env.setenv("COMPLETION_CONFIG_PATH", str(config_file))
        clean_env.setenv("OPENAI_MODEL", "gpt-4o-mini")

        config = CompletionConfig.from_env()

        assert config.base_url == "https://gateway.example.com/v1"
        assert config.model == "gpt-4o-mini"
        assert config.request_timeout == 45.0

    def test_yaml_empty_completion_section(self, clean_env, tmp_path):
        """Test an empty `completion:` key falls back to defaults"""
        config_file = tmp_path / "completion.yaml"
        config_file.write_text("completion:\n")
        clean_env.setenv("COMPLETION_CONFIG_PATH", str(config_file))

        config = CompletionConfig.from_env()

        assert config.base_url == "https://api.openai.com/v1"
        assert config.model == "gpt-4o-mini"
        assert config.request_timeout == 30.0

    def test_yaml_non_mapping_section_rejected(self, clean_env, tmp_path):
        config_file = tmp_path / "completion.yaml"
        config_file.write_text("completion: gpt-4o\n")
        clean_env.setenv("COMPLETION_CONFIG_PATH", str(config_file))

        with pytest.raises(ValueError):
            CompletionConfig.from_env()


class TestOrchestratorConfig:
    """Test orchestrator configuration"""

    def test_from_env_defaults(self, clean_env):
        config = OrchestratorConfig.from_env()

        assert config.context_message_limit == 10
        assert config.context_window_mode == ContextWindowMode.EARLIEST
        assert config.persona_call_timeout == 30.0

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("CONTEXT_MESSAGE_LIMIT", "20")
        clean_env.setenv("CONTEXT_WINDOW_MODE", "LATEST")
        clean_env.setenv("PERSONA_CALL_TIMEOUT", "12")

        config = OrchestratorConfig.from_env()

        assert config.context_message_limit == 20
        assert config.context_window_mode == ContextWindowMode.LATEST
        assert config.persona_call_timeout == 12.0

    @pytest.mark.parametrize("value", ["none", "0", "-1", ""])
    def test_timeout_disabled(self, clean_env, value):
        clean_env.setenv("PERSONA_CALL_TIMEOUT", value)

        assert OrchestratorConfig.from_env().persona_call_timeout is None

    def test_invalid_window_mode(self, clean_env):
        clean_env.setenv("CONTEXT_WINDOW_MODE", "middle")

        with pytest.raises(ValueError):
            OrchestratorConfig.from_env()
