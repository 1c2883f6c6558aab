"""
DeepSeek API Client

DeepSeek uses OpenAI-compatible API, so we use the openai library.

COST OPTIMIZATION:
- Use deepseek-chat model (cheapest)
- Keep prompts short and structured
- One attempt per request (max_retries=0); callers fall back on failure

The client is built once at startup (see app.main) and injected into
AIService, so tests can pass a fake with the same generate_content().
"""
import logging
from typing import Optional

from openai import AsyncOpenAI

from app.core.config import Settings

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You analyse student placement and interview reviews. "
    "Always answer with a single valid JSON object and nothing else."
)


class DeepSeekClient:
    """
    Wrapper for DeepSeek chat completions.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str = "deepseek-chat",
        timeout: float = 30.0,
        max_tokens: int = 800,
        temperature: float = 0.3
    ):
        self.api_key = api_key or ""
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client: Optional[AsyncOpenAI] = None
        self._base_url = base_url
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "DeepSeekClient":
        return cls(
            api_key=settings.deepseek_api_key,
            base_url=settings.deepseek_base_url,
            model=settings.deepseek_model,
            timeout=settings.llm_timeout_seconds,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature
        )

    @property
    def client(self) -> AsyncOpenAI:
        # Built lazily: AsyncOpenAI refuses an empty key, and fallback mode never calls it
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0
            )
        return self._client

    async def generate_content(self, prompt: str) -> str:
        """
        Send one prompt, return the raw text of the first choice.
        Network, quota and timeout errors propagate to the caller.
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature
        )
        return response.choices[0].message.content or ""

    async def test_connection(self) -> bool:
        """Test if DeepSeek API is reachable"""
        try:
            response = await self.generate_content("Reply with exactly: OK")
            return "OK" in response.upper()
        except Exception as e:
            logger.error(f"DeepSeek connection failed: {e}")
            return False
