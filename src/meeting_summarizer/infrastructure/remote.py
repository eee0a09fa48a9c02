"""Remote summarization clients (Hugging Face Inference and chat completions)."""

import logging
from typing import Any, Protocol

import aiohttp
from aiohttp import ClientTimeout
from openai import AsyncOpenAI

from meeting_summarizer.config import Settings
from meeting_summarizer.domain.errors import RemoteServiceError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert meeting summarizer. Create clear, structured summaries "
    "based on the user's instructions."
)
DEFAULT_INSTRUCTION = "Summarize this meeting transcript:"
REMOTE_PROVIDERS = ("huggingface", "groq", "openai")


class RemoteSummarizer(Protocol):
    """A network summarization service.

    Implementations raise RemoteServiceError on any failure and never return
    an empty summary.
    """

    name: str

    async def summarize(self, text: str, custom_prompt: str | None = None) -> str: ...

    async def close(self) -> None: ...


class HuggingFaceSummarizer:
    """Client for a Hugging Face Inference API summarization model."""

    name = "huggingface"

    def __init__(
        self,
        api_key: str,
        model_url: str,
        timeout_seconds: int = 30,
        max_length: int = 500,
        min_length: int = 100,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Hugging Face API token
            model_url: Inference endpoint of the summarization model
            timeout_seconds: Total request timeout in seconds
            max_length: Upper bound on generated summary length
            min_length: Lower bound on generated summary length
        """
        self.api_key = api_key
        self.model_url = model_url
        self.timeout = ClientTimeout(total=timeout_seconds)
        self.max_length = max_length
        self.min_length = min_length
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def _build_payload(self, text: str, custom_prompt: str | None) -> dict[str, Any]:
        return {
            "inputs": f"{custom_prompt or DEFAULT_INSTRUCTION}\n\n{text}",
            "parameters": {
                "max_length": self.max_length,
                "min_length": self.min_length,
                "do_sample": False,
            },
        }

    @staticmethod
    def _extract_summary(data: Any) -> str:
        """Pull ``[0].summary_text`` out of an inference response."""
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise RemoteServiceError("Unexpected response shape from Hugging Face")
        summary = data[0].get("summary_text")
        if not isinstance(summary, str) or not summary.strip():
            raise RemoteServiceError("Hugging Face response has no summary_text")
        return summary.strip()

    async def summarize(self, text: str, custom_prompt: str | None = None) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            session = await self._get_session()
            async with session.post(
                self.model_url,
                json=self._build_payload(text, custom_prompt),
                headers=headers,
            ) as response:
                if response.status != 200:
                    raise RemoteServiceError(f"HTTP {response.status} from Hugging Face")
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            raise RemoteServiceError(f"Hugging Face request failed: {e}") from e

        return self._extract_summary(data)


class ChatCompletionSummarizer:
    """Client for an OpenAI-compatible chat completions API (OpenAI, Groq)."""

    def __init__(
        self,
        name: str,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: int = 30,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ) -> None:
        self.name = name
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()

    async def summarize(self, text: str, custom_prompt: str | None = None) -> str:
        instruction = custom_prompt or DEFAULT_INSTRUCTION
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": f"{instruction}\n\nMeeting transcript:\n{text}",
                    },
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise RemoteServiceError(f"{self.name} request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            raise RemoteServiceError(f"{self.name} returned an empty summary")
        return content.strip()


def build_remote_summarizer(settings: Settings) -> RemoteSummarizer | None:
    """Create the configured remote client, or None when no credential is set."""
    provider = settings.remote_provider.lower()
    if provider not in REMOTE_PROVIDERS:
        logger.warning(f"Unknown remote provider '{settings.remote_provider}', using local only")
        return None

    api_key = settings.remote_api_key
    if not api_key:
        return None

    if provider == "huggingface":
        return HuggingFaceSummarizer(
            api_key=api_key,
            model_url=settings.huggingface_model_url,
            timeout_seconds=settings.remote_timeout_seconds,
            max_length=settings.huggingface_max_length,
            min_length=settings.huggingface_min_length,
        )
    if provider == "groq":
        return ChatCompletionSummarizer(
            name="groq",
            api_key=api_key,
            model=settings.groq_model,
            base_url=settings.groq_base_url,
            timeout_seconds=settings.remote_timeout_seconds,
            temperature=settings.remote_temperature,
            max_tokens=settings.remote_max_tokens,
        )
    return ChatCompletionSummarizer(
        name="openai",
        api_key=api_key,
        model=settings.openai_model,
        timeout_seconds=settings.remote_timeout_seconds,
        temperature=settings.remote_temperature,
        max_tokens=settings.remote_max_tokens,
    )
