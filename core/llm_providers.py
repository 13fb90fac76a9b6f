"""
LLM Providers - Strategy Pattern Implementation
Each provider is a separate class following the Strategy Pattern.
Both providers accept multimodal HumanMessage content (text + inline image/PDF).
"""
from abc import ABC, abstractmethod
from typing import Optional
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.language_models.chat_models import BaseChatModel

from core.settings import settings


class LLMProvider(ABC):
    """
    Abstract Base Class for LLM Providers (Strategy Pattern).
    All providers must implement this interface.
    """

    @abstractmethod
    def create_llm(self, model: Optional[str] = None, temperature: float = 0.5) -> BaseChatModel:
        """
        Create and return an LLM instance.

        Args:
            model: Model identifier (uses default if None)
            temperature: Temperature setting

        Returns:
            Configured LLM instance
        """
        pass

    @abstractmethod
    def validate_configuration(self) -> None:
        """Validate that provider configuration is complete."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Return the default model for this provider."""
        pass


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider Implementation."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize Gemini provider.

        Args:
            api_key: API key (defaults to settings.GEMINI_API_KEY)
        """
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.validate_configuration()

    @property
    def default_model(self) -> str:
        return settings.GEMINI_MODEL

    def validate_configuration(self) -> None:
        """Validate Gemini configuration."""
        if not self.api_key:
            raise RuntimeError(
                "Gemini configuration incomplete. "
                "Set GEMINI_API_KEY in your .env file."
            )

    def create_llm(self, model: Optional[str] = None, temperature: float = 0.5) -> BaseChatModel:
        """
        Create Gemini LLM instance.

        Timeout and attempt count come from settings; the default of a
        single attempt leaves error handling to the caller.
        """
        return ChatGoogleGenerativeAI(
            google_api_key=self.api_key,
            model=model or self.default_model,
            temperature=temperature,
            timeout=settings.REQUEST_TIMEOUT,
            max_retries=settings.LLM_MAX_RETRIES,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI LLM Provider Implementation."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize OpenAI provider.

        Args:
            api_key: API key (defaults to settings.OPENAI_API_KEY)
        """
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.validate_configuration()

    @property
    def default_model(self) -> str:
        return settings.OPENAI_MODEL

    def validate_configuration(self) -> None:
        """Validate OpenAI configuration."""
        if not self.api_key:
            raise RuntimeError(
                "OpenAI configuration incomplete. "
                "Set OPENAI_API_KEY in your .env file."
            )

    def create_llm(self, model: Optional[str] = None, temperature: float = 0.5) -> ChatOpenAI:
        """
        Create OpenAI LLM instance with the configured timeout.

        The openai client counts retries on top of the first call, so the
        attempt count from settings is reduced by one.
        """
        return ChatOpenAI(
            api_key=self.api_key,
            model=model or self.default_model,
            temperature=temperature,
            request_timeout=settings.REQUEST_TIMEOUT,
            max_retries=max(settings.LLM_MAX_RETRIES - 1, 0),
        )
