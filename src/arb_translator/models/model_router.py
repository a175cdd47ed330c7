"""Provider model routing for the ARB translator."""

import re
from typing import Any, Dict

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from ..errors import UnsupportedModelError
from .translation import REQUEST_TIMEOUT

# Model name prefixes per provider family
PROVIDER_PREFIXES = {
    "google": ("gemini-",),
    "anthropic": ("claude-",),
    "openai": ("gpt-",),
}

# o1, o3-mini, o4-mini...; these reject a custom temperature
OPENAI_REASONING_MODEL = re.compile(r"^o\d")


def provider_for_model(model_name: str) -> str:
    """
    Resolve the provider family of a model name.

    Args:
        model_name: Provider model identifier, e.g. "gemini-2.5-flash"

    Returns:
        One of "google", "anthropic" or "openai"

    Raises:
        UnsupportedModelError: If no provider serves the model
    """
    name = (model_name or "").strip().lower()
    for provider, prefixes in PROVIDER_PREFIXES.items():
        if name.startswith(prefixes):
            return provider
    if OPENAI_REASONING_MODEL.match(name):
        return "openai"
    raise UnsupportedModelError(f"Unsupported model: {model_name}")


class ModelRouter:
    """Router for selecting and initializing provider chat models."""

    def __init__(self):
        self._model_cache: Dict[str, BaseChatModel] = {}

    def get_model(self, model_name: str, api_key: str, **kwargs) -> BaseChatModel:
        """
        Get a chat model instance for the model name.

        Args:
            model_name: Name of the model to use
            api_key: Credential for the model's provider
            **kwargs: Additional model configuration parameters

        Returns:
            Initialized chat model

        Raises:
            UnsupportedModelError: If the model is not supported
        """
        cache_key = f"{model_name}_{hash(api_key)}_{hash(str(sorted(kwargs.items())))}"
        if cache_key in self._model_cache:
            return self._model_cache[cache_key]

        model = self._create_model(model_name, api_key, **kwargs)
        self._model_cache[cache_key] = model
        return model

    def _create_model(self, model_name: str, api_key: str, **kwargs) -> BaseChatModel:
        """Create a new model instance."""
        provider = provider_for_model(model_name)
        model_name = model_name.strip().lower()

        default_configs = {
            "temperature": kwargs.pop("temperature", 0.1),
            "timeout": kwargs.pop("timeout", REQUEST_TIMEOUT),
        }

        if provider == "google":
            return self._create_gemini_model(model_name, api_key, default_configs, **kwargs)
        elif provider == "anthropic":
            return self._create_anthropic_model(model_name, api_key, default_configs, **kwargs)
        return self._create_openai_model(model_name, api_key, default_configs, **kwargs)

    def _create_gemini_model(self, model_name: str, api_key: str, default_configs: dict, **kwargs: Any) -> ChatGoogleGenerativeAI:
        """Create a Google Gemini model instance."""
        # Retries are owned by the batch translator
        return ChatGoogleGenerativeAI(
            google_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            timeout=default_configs["timeout"],
            max_retries=0,
            **kwargs
        )

    def _create_anthropic_model(self, model_name: str, api_key: str, default_configs: dict, **kwargs: Any) -> ChatAnthropic:
        """Create an Anthropic (Claude) model instance."""
        return ChatAnthropic(
            anthropic_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_tokens=kwargs.pop("max_tokens", 8000),
            default_request_timeout=default_configs["timeout"],
            max_retries=0,
            **kwargs
        )

    def _create_openai_model(self, model_name: str, api_key: str, default_configs: dict, **kwargs: Any) -> ChatOpenAI:
        """Create an OpenAI model instance."""
        if not OPENAI_REASONING_MODEL.match(model_name):
            kwargs["temperature"] = default_configs["temperature"]
        return ChatOpenAI(
            openai_api_key=api_key,
            model=model_name,
            timeout=default_configs["timeout"],
            max_retries=0,
            **kwargs
        )


# Global model router instance
model_router = ModelRouter()


def get_model_router() -> ModelRouter:
    """Get the global model router instance."""
    return model_router
