"""Ollama-based text generator.

Uses Ollama's local API to generate completions. Ollama serves models locally
without API keys or quotas, which makes it a convenient development backend.

Requirements:
    - Ollama installed: https://ollama.com
    - Model pulled: `ollama pull llama3.1`
    - Ollama running: `ollama serve` (usually runs automatically)
"""

import httpx

from career_coach.config import settings
from career_coach.errors import GenerationError, QuotaExceededError


class OllamaTextGenerator:
    """Ollama implementation of the TextGenerator protocol.

    This class satisfies the TextGenerator protocol through structural
    typing - no explicit inheritance needed.

    Uses the non-streaming endpoint http://localhost:11434/api/generate
    by default.

    Example:
        ```python
        generator = OllamaTextGenerator.create(model_name="llama3.1")
        text = await generator.generate("Write a haiku about resumes")
        ```
    """

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Ollama text generator.

        Args:
            model_name: Name of the Ollama model. Defaults to settings.ollama_model.
            base_url: Ollama API base URL. Defaults to settings.ollama_base_url.
            timeout: Request timeout in seconds. Defaults to settings.llm_timeout.
            transport: Optional httpx transport (used by tests).
        """
        self._model_name = model_name or settings.ollama_model
        self._base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self._timeout = timeout or settings.llm_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        model_name: str | None = None,
        base_url: str | None = None,
    ) -> "OllamaTextGenerator":
        """Factory method to create OllamaTextGenerator with defaults.

        Args:
            model_name: Model name. If None, uses settings.
            base_url: Ollama API URL. If None, uses settings.

        Returns:
            Configured OllamaTextGenerator
        """
        return cls(model_name=model_name, base_url=base_url)

    @property
    def model_name(self) -> str:
        """Get the model name/identifier.

        Returns:
            Model name (e.g., "llama3.1")
        """
        return self._model_name

    async def generate(self, prompt: str) -> str:
        """Generate a completion for a prompt.

        Args:
            prompt: The prompt text

        Returns:
            The generated text

        Raises:
            QuotaExceededError: If Ollama answers 429 (busy / too many requests)
            GenerationError: If the request fails or the response has no text
        """
        url = f"{self._base_url}/api/generate"
        payload = {
            "model": self._model_name,
            "prompt": prompt,
            "stream": False,
        }

        try:
            response = await self.client.post(url, json=payload)
        except httpx.HTTPError as e:
            error_msg = f"Ollama API error: {e}"
            if "connection refused" in str(e).lower():
                error_msg += "\n  → Is Ollama running? Try: ollama serve"
            raise GenerationError(error_msg) from e

        if response.status_code == 429:
            raise QuotaExceededError("Ollama is busy (429)")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error_msg = f"Ollama API error ({response.status_code}): {response.text[:200]}"
            if response.status_code == 404:
                error_msg += f"\n  → Model not found. Try: ollama pull {self._model_name}"
            raise GenerationError(error_msg) from e

        try:
            data = response.json()
            text = data.get("response", "")
        except (ValueError, AttributeError, TypeError) as e:
            raise GenerationError(f"Unreadable Ollama response: {e}") from e
        if not text:
            raise GenerationError(f"Unexpected response format: {data}")
        return text

    async def is_available(self) -> bool:
        """Check if Ollama is running and the model answers.

        Returns:
            True if available, False otherwise
        """
        try:
            _ = await self.generate("ping")
            return True
        except GenerationError:
            return False

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
