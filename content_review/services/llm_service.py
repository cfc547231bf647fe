import asyncio
from typing import Optional
import google.generativeai as genai
import groq
import httpx
from google.api_core import exceptions as google_exceptions
from groq import AsyncGroq
from content_review.config import settings
from content_review.errors import (
    AuthenticationFailure,
    ConfigurationError,
    ProcessingFailure,
    QuotaExceeded,
    RequestTimeout,
    ReviewError,
)
from content_review.prompts.templates import DOCUMENT_REVIEW_PROMPT, REVIEW_INSTRUCTIONS
from content_review.utils.logger import logger

SUPPORTED_PROVIDERS = ("gemini", "groq")


def build_review_prompt(content: str, filename: str) -> str:
    """Static review instructions followed by the submitted document."""
    return DOCUMENT_REVIEW_PROMPT.format(
        instructions=REVIEW_INSTRUCTIONS,
        filename=filename or settings.DEFAULT_FILENAME,
        content=content,
    )


def classify_provider_error(exc: Exception) -> ReviewError:
    """Maps an SDK/network failure onto the review error taxonomy."""
    if isinstance(exc, ReviewError):
        return exc

    details = str(exc)

    if isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied,
                        groq.AuthenticationError, groq.PermissionDeniedError)):
        return AuthenticationFailure(details=details)
    if isinstance(exc, (google_exceptions.ResourceExhausted, groq.RateLimitError)):
        return QuotaExceeded(details=details)
    if isinstance(exc, (google_exceptions.DeadlineExceeded, groq.APITimeoutError,
                        httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return RequestTimeout(details=details)

    # SDKs don't always raise typed errors (e.g. "API key not valid" arrives as InvalidArgument)
    lowered = details.lower()
    if "api key" in lowered or "authentication" in lowered:
        return AuthenticationFailure(details=details)
    if "quota" in lowered or "limit" in lowered:
        return QuotaExceeded(details=details)
    if "timeout" in lowered or "timed out" in lowered:
        return RequestTimeout(details=details)

    return ProcessingFailure(details=details)


class LLMService:
    def __init__(self):
        self._gemini_model = None
        self._gemini_key: Optional[str] = None
        self._groq_client: Optional[AsyncGroq] = None
        self._groq_key: Optional[str] = None

    @property
    def provider(self) -> str:
        name = (settings.LLM_PROVIDER or "gemini").strip().lower()
        return name if name in SUPPORTED_PROVIDERS else "gemini"

    def is_configured(self) -> bool:
        """True if the active provider has its API key set."""
        if self.provider == "groq":
            return bool(settings.GROQ_API_KEY)
        return bool(settings.GEMINI_API_KEY)

    # ==================== CLIENTS ====================

    def _get_gemini_model(self):
        key = settings.GEMINI_API_KEY
        if not key:
            raise ConfigurationError()
        # Rebuild if the key was rotated since the last call
        if self._gemini_model is None or key != self._gemini_key:
            genai.configure(api_key=key)
            self._gemini_model = genai.GenerativeModel(
                settings.GEMINI_MODEL_ID,
                generation_config=genai.GenerationConfig(
                    temperature=settings.LLM_TEMPERATURE,
                    top_k=settings.LLM_TOP_K,
                    top_p=settings.LLM_TOP_P,
                    max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
                ),
            )
            self._gemini_key = key
        return self._gemini_model

    def _get_groq_client(self) -> AsyncGroq:
        key = settings.GROQ_API_KEY
        if not key:
            raise ConfigurationError()
        if self._groq_client is None or key != self._groq_key:
            self._groq_client = AsyncGroq(api_key=key)
            self._groq_key = key
        return self._groq_client

    # ==================== TEXT GENERATION ====================

    async def generate_gemini(self, prompt: str) -> str:
        """Single blocking Gemini call, run off the event loop."""
        model = self._get_gemini_model()
        response = await asyncio.to_thread(model.generate_content, prompt)
        return response.text

    async def generate_groq(self, prompt: str) -> str:
        """Groq chat completion with the same sampling settings (Groq has no top-k)."""
        client = self._get_groq_client()
        response = await client.chat.completions.create(
            messages=[{"role": "user", "content": prompt}],
            model=settings.GROQ_MODEL_ID,
            temperature=settings.LLM_TEMPERATURE,
            top_p=settings.LLM_TOP_P,
            max_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
        )
        return response.choices[0].message.content or ""

    # ==================== DOCUMENT REVIEW ====================

    async def review_document(self, content: str, filename: str) -> str:
        """Runs the compliance review and returns the model's report verbatim.

        No retries: any provider failure is classified and raised to the caller.
        """
        prompt = build_review_prompt(content, filename)
        provider = self.provider
        logger.info(f"Reviewing {filename} with {provider} ({len(content)} chars)")

        try:
            if provider == "groq":
                return await self.generate_groq(prompt)
            return await self.generate_gemini(prompt)
        except ReviewError:
            raise
        except Exception as e:
            logger.error(f"{provider} API Error: {str(e)}")
            raise classify_provider_error(e) from e


llm_service = LLMService()
