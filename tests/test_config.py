from model_catalog import config
from model_catalog.config import (
    PROVIDER_CATALOGUE,
    get_api_key,
    get_base_url,
    has_api_key,
)


class TestProviderCatalogue:
    def test_has_expected_providers(self):
        for prov in ["openai", "openrouter", "gemini", "ollama", "mistral", "deepseek", "xai", "groq"]:
            assert prov in PROVIDER_CATALOGUE, f"Missing provider: {prov}"

    def test_keys_are_lowercase(self):
        assert all(k == k.lower() for k in PROVIDER_CATALOGUE)


class TestGetApiKey:
    def test_missing_key(self):
        assert get_api_key("openai") is None
        assert has_api_key("openai") is False

    def test_reads_catalogue_env_var(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert get_api_key("openai") == "sk-test"
        assert has_api_key("OpenAI") is True

    def test_empty_value_counts_as_missing(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "")
        assert get_api_key("groq") is None

    def test_unknown_provider_uses_conventional_env_var(self, monkeypatch):
        monkeypatch.setenv("ACME_API_KEY", "acme-key")
        assert get_api_key("Acme") == "acme-key"


class TestGetBaseUrl:
    def test_catalogue_default(self):
        assert get_base_url("openai") == "https://api.openai.com/v1"

    def test_case_insensitive(self):
        assert get_base_url("GEMINI") == get_base_url("gemini")

    def test_env_override_strips_trailing_slash(self, monkeypatch):
        monkeypatch.setenv("OPENAI_BASE_URL", "http://proxy.local/v1/")
        assert get_base_url("openai") == "http://proxy.local/v1"

    def test_unknown_provider(self):
        assert get_base_url("acme") is None

    def test_unknown_provider_with_override(self, monkeypatch):
        monkeypatch.setenv("ACME_BASE_URL", "https://acme.example/v1")
        assert get_base_url("acme") == "https://acme.example/v1"


class TestSettings:
    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("X_FLAG", "no")
        assert config._env_bool("X_FLAG", True) is False
        monkeypatch.setenv("X_FLAG", "YES")
        assert config._env_bool("X_FLAG", False) is True
        monkeypatch.setenv("X_FLAG", "maybe")
        assert config._env_bool("X_FLAG", True) is True

    def test_defaults(self):
        s = config.Settings()
        assert s.discovery_timeout > 0
        assert s.catalog_max_providers > 0

    def test_initialize_provider_env_vars_does_not_override(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=from-dotenv\nGROQ_API_KEY=groq-dotenv\n")
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        # register GROQ_API_KEY so monkeypatch removes it again on teardown
        monkeypatch.setenv("GROQ_API_KEY", "")
        monkeypatch.delenv("GROQ_API_KEY")
        config.initialize_provider_env_vars(str(env_file))
        assert get_api_key("openai") == "from-env"
        assert get_api_key("groq") == "groq-dotenv"
