"""
tests/unit/test_gateway_config.py

Environment-based configuration and gateway bootstrap.
"""

import pytest

from inference import ChatCompletionBackend, OllamaModelBackend, StaticTemplateBackend
from infra.bootstrap import bootstrap_gateway
from infra.config import GatewayConfig
from infra.registry import ModelSelection, ProviderDescriptor, TransportKind, build_registry
from scholar.errors import ConfigurationError


class TestGatewayConfigFromEnv:
    def test_defaults_without_env(self, no_ai_env):
        config = GatewayConfig.from_env()
        assert config.groq_api_key == ""
        assert config.ollama_model == "llama3.1"
        assert config.max_tokens == 3000
        assert config.top_p == 0.8
        assert config.timeout_s == 60.0
        assert config.failover is False
        assert config.has_ai_provider() is False
        assert config.configured_providers() == []

    def test_reads_credentials_and_knobs(self, no_ai_env):
        no_ai_env.setenv("GROQ_API_KEY", "gsk_test")
        no_ai_env.setenv("OLLAMA_HOST", "http://localhost:11434")
        no_ai_env.setenv("AI_MAX_TOKENS", "1500")
        no_ai_env.setenv("AI_TIMEOUT_S", "20")
        no_ai_env.setenv("AI_FAILOVER", "TRUE")

        config = GatewayConfig.from_env()
        assert config.configured_providers() == ["groq", "ollama"]
        assert config.max_tokens == 1500
        assert config.timeout_s == 20.0
        assert config.failover is True

    def test_malformed_numbers_use_defaults(self, no_ai_env):
        no_ai_env.setenv("AI_MAX_TOKENS", "lots")
        no_ai_env.setenv("AI_TOP_P", "")
        config = GatewayConfig.from_env()
        assert config.max_tokens == 3000
        assert config.top_p == 0.8

    def test_placeholder_key_is_not_a_provider(self, no_ai_env):
        no_ai_env.setenv("OPENAI_API_KEY", "your_openai_api_key_here")
        assert GatewayConfig.from_env().has_ai_provider() is False


class TestCreateBackend:
    def test_backend_per_transport(self):
        config = GatewayConfig(groq_api_key="gsk_test", ollama_host="http://localhost:11434", gemini_api_key="gem")
        backends = {d.name: config.create_backend(d) for d in build_registry(config)}

        assert isinstance(backends["groq"], ChatCompletionBackend)
        assert backends["groq"].base_url == "https://api.groq.com/openai/v1"
        assert isinstance(backends["gemini"], ChatCompletionBackend)
        assert backends["gemini"].base_url.startswith("https://generativelanguage.googleapis.com")
        assert isinstance(backends["ollama"], OllamaModelBackend)
        assert isinstance(backends["template"], StaticTemplateBackend)

    def test_unknown_hosted_provider_raises(self):
        descriptor = ProviderDescriptor(
            name="mystery",
            transport=TransportKind.HOSTED_API,
            cost_class="paid",
            priority=10,
            models=ModelSelection("a", "b", "c"),
        )
        with pytest.raises(ConfigurationError):
            GatewayConfig().create_backend(descriptor)


class TestBootstrap:
    def test_bootstrap_from_env_without_credentials(self, no_ai_env):
        gateway = bootstrap_gateway()
        assert gateway.active.name == "template"

    def test_bootstrap_with_explicit_config(self):
        gateway = bootstrap_gateway(GatewayConfig(openai_api_key="sk-test", failover=True))
        assert gateway.active.name == "openai"
        assert gateway.failover is True

    def test_each_bootstrap_is_independent(self, no_ai_env):
        assert bootstrap_gateway() is not bootstrap_gateway()


class TestServerConfig:
    def test_validate_warns_without_provider(self, no_ai_env):
        from config import Config

        assert Config.validate() is False

    def test_validate_passes_with_provider(self, no_ai_env):
        from config import Config

        no_ai_env.setenv("GEMINI_API_KEY", "gem-test")
        assert Config.validate() is True
