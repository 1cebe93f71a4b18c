"""Text generation protocol.

Defines the interface for any external service that turns a prompt into
raw text. The orchestrator treats it as a black box.

Implementations can include:
- Google Gemini REST API (default)
- Ollama running locally
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """Protocol for text-generation services.

    Implementations raise QuotaExceededError when the service refuses a call
    for quota or rate-limit reasons, and GenerationError for any other
    call failure.
    """

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the model.

        Returns:
            Model name or identifier
        """
        ...

    async def generate(self, prompt: str) -> str:
        """Generate raw text for a prompt.

        Args:
            prompt: The prompt text

        Returns:
            The generated text, unparsed
        """
        ...

    async def is_available(self) -> bool:
        """Check if the service is reachable.

        Returns:
            True if available, False otherwise
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
