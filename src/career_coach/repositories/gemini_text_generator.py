"""Gemini-based text generator.

Calls the Google Generative Language REST API directly over HTTP:

    POST {base_url}/v1beta/models/{model}:generateContent

Key features:
- Ordered list of candidate models; the next one is tried when a model fails
- Quota / rate-limit refusals surface as QuotaExceededError
- Async support for concurrent requests
"""

import httpx

from career_coach.config import settings
from career_coach.errors import GenerationError, QuotaExceededError
from career_coach.logging import get_logger

logger = get_logger("gemini")

QUOTA_MARKERS = ("RESOURCE_EXHAUSTED", "quota")


class GeminiTextGenerator:
    """Gemini implementation of the TextGenerator protocol.

    This class satisfies the TextGenerator protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        generator = GeminiTextGenerator.create(api_key="...")
        text = await generator.generate("Write a haiku about resumes")
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        models: tuple[str, ...] | list[str] | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Gemini text generator.

        Args:
            api_key: Gemini API key. Defaults to settings.gemini_api_key.
            models: Candidate model names, tried in order. Defaults to settings.
            base_url: API base URL. Defaults to settings.gemini_base_url.
            timeout: Request timeout in seconds. Defaults to settings.llm_timeout.
            transport: Optional httpx transport (used by tests).
        """
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._models = tuple(models or settings.gemini_models)
        self._base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self._timeout = timeout or settings.llm_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if not self._models:
            raise ValueError("GeminiTextGenerator needs at least one model name")

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
        api_key: str | None = None,
        models: tuple[str, ...] | list[str] | None = None,
    ) -> "GeminiTextGenerator":
        """Factory method to create GeminiTextGenerator with defaults.

        Args:
            api_key: API key. If None, uses settings.
            models: Candidate models. If None, uses settings.

        Returns:
            Configured GeminiTextGenerator
        """
        return cls(api_key=api_key, models=models)

    @property
    def model_name(self) -> str:
        """Get the primary model name.

        Returns:
            The first candidate model (e.g., "gemini-2.0-flash")
        """
        return self._models[0]

    @property
    def models(self) -> tuple[str, ...]:
        return self._models

    async def generate(self, prompt: str) -> str:
        """Generate text, trying each candidate model in order.

        Args:
            prompt: The prompt text

        Returns:
            The text of the first candidate response

        Raises:
            QuotaExceededError: If every model failed and at least one refused for quota
            GenerationError: If every model failed for other reasons
        """
        if not self._api_key:
            raise GenerationError("GEMINI_API_KEY is not configured")

        quota_error: QuotaExceededError | None = None
        last_error: GenerationError | None = None
        for model in self._models:
            try:
                return await self._generate_with(model, prompt)
            except QuotaExceededError as e:
                quota_error = e
                logger.warning("gemini_model_failed", model=model, reason="quota")
            except GenerationError as e:
                last_error = e
                logger.warning("gemini_model_failed", model=model, reason=e.detail)

        if quota_error is not None:
            raise quota_error
        raise last_error or GenerationError("No Gemini model produced a response")

    async def _generate_with(self, model: str, prompt: str) -> str:
        url = f"{self._base_url}/v1beta/models/{model}:generateContent"
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        try:
            response = await self.client.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self._api_key or ""},
            )
        except httpx.HTTPError as e:
            raise GenerationError(f"Gemini API connection error: {e}") from e

        if response.status_code == 429 or (
            response.is_error and any(marker in response.text for marker in QUOTA_MARKERS)
        ):
            raise QuotaExceededError(f"Gemini API quota exceeded ({response.status_code}): {model}")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GenerationError(f"Gemini API error ({response.status_code}): {response.text[:200]}") from e

        try:
            text = _extract_text(response.json())
        except (ValueError, AttributeError, TypeError) as e:
            raise GenerationError(f"Gemini API returned an unreadable body for {model}: {e}") from e
        if not text:
            raise GenerationError(f"Gemini API returned empty output for {model}")
        return text

    async def is_available(self) -> bool:
        """Check if the Gemini API answers for the primary model.

        Returns:
            True if a trivial generation succeeds, False otherwise
        """
        try:
            _ = await self._generate_with(self.model_name, "ping")
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


def _extract_text(data: dict) -> str:
    parts: list[str] = []
    for candidate in data.get("candidates", [])[:1]:
        for part in candidate.get("content", {}).get("parts", []):
            parts.append(part.get("text", ""))
    return "".join(parts).strip()
