"""
LLM Factory - Factory Pattern Implementation
Centralized factory for creating LLM instances with different providers.
"""
from typing import Optional
from langchain_core.language_models.chat_models import BaseChatModel

from core.llm_providers import (
    LLMProvider,
    GeminiProvider,
    OpenAIProvider,
)
from core.settings import settings


class LLMFactory:
    """
    Factory class for creating LLM instances.
    Implements Factory Pattern for clean, extensible object creation.
    """

    # Registry of available providers
    _providers: dict[str, type[LLMProvider]] = {
        "gemini": GeminiProvider,
        "openai": OpenAIProvider,
    }

    @classmethod
    def register_provider(cls, name: str, provider_class: type[LLMProvider]) -> None:
        """
        Register a new LLM provider (Open/Closed Principle).

        Args:
            name: Provider identifier
            provider_class: Provider class implementing LLMProvider
        """
        cls._providers[name.lower()] = provider_class

    @classmethod
    def create(
        cls,
        provider_name: str,
        model: Optional[str] = None,
        temperature: float = 0.5,
        **provider_kwargs
    ) -> BaseChatModel:
        """
        Create an LLM instance using the specified provider.

        Args:
            provider_name: Name of the provider ("gemini", "openai")
            model: Optional model name (uses provider default if None)
            temperature: Temperature setting (0.0 - 1.0)
            **provider_kwargs: Additional provider-specific arguments

        Returns:
            Configured LLM instance

        Raises:
            ValueError: If provider is not registered
            RuntimeError: If provider configuration is invalid

        Examples:
            >>> llm = LLMFactory.create("gemini")
            >>> llm = LLMFactory.create("openai", model="gpt-4o", temperature=0.7)
        """
        provider_name = provider_name.lower()

        if provider_name not in cls._providers:
            available = ", ".join(cls._providers.keys())
            raise ValueError(
                f"Unknown provider: '{provider_name}'. "
                f"Available providers: {available}"
            )

        # Instantiate provider and create LLM
        provider_class = cls._providers[provider_name]
        provider = provider_class(**provider_kwargs)

        return provider.create_llm(model=model, temperature=temperature)

    @classmethod
    def list_providers(cls) -> list[str]:
        """Get list of registered provider names."""
        return list(cls._providers.keys())


def create_default_llm() -> BaseChatModel:
    """
    Create the LLM named by settings.LLM_PROVIDER at settings.TEMPERATURE.

    Raises:
        ValueError: If LLM_PROVIDER is not registered
        RuntimeError: If the provider has no API key
    """
    return LLMFactory.create(settings.LLM_PROVIDER, temperature=settings.TEMPERATURE)
