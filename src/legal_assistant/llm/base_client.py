"""
Abstract base client for LLM inference.

Defines the interface every provider client must implement, so the
question filtering layer does not depend on a specific vendor API.
"""

from abc import ABC, abstractmethod
import structlog

from legal_assistant.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM inference clients.

    Responsibilities:
    - Send generation requests to the provider
    - Parse responses into LLMGenerationResponse
    - Translate transport/HTTP failures into LLMClientError subclasses

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Response parsing into FilteredQuestion (that's response_parser's job)
    - Retries (the whole filtering call is retried by the retry executor)
    """

    def __init__(self, base_url: str, timeout: int = 30, **kwargs):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the provider API
            timeout: Request timeout in seconds
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.extra_config = kwargs

        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )

    @abstractmethod
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion.

        Args:
            request: Standardized generation request

        Returns:
            LLMGenerationResponse with generated text and metadata

        Raises:
            LLMConnectionError: Network errors (no response received)
            LLMTimeoutError: Request exceeded timeout
            LLMGenerationError: Provider-reported errors (carries status_code)
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the provider is reachable.

        Returns:
            True if healthy, False otherwise. Never raises.
        """
        pass

    @abstractmethod
    async def list_models(self) -> list[dict]:
        """
        List the models available to this client.

        Raises:
            LLMClientError: Provider unreachable or rejected the request
        """
        pass

    async def close(self):
        """
        Close client connections and cleanup resources.

        Default implementation does nothing.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
