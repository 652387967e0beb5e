"""
Remote generation client.

One call asks the generation service for a batch of two-option questions,
strips the code fences it likes to wrap JSON in, and validates the result.
Failures are classified so the caller can decide what to do:

  ConfigurationError  no API key; never retried
  RateLimited         429 / quota; retried with exponential backoff
  MalformedResponse   reply did not parse into questions; not retried
  TransportError      network errors, other HTTP statuses, timeouts; not retried
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import re
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

import config
from schemas.questions import Question

log = logging.getLogger(__name__)

T = TypeVar("T")

_RATE_LIMIT_MARKERS = ("429", "rate limit", "quota", "resource_exhausted")
_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")
_QUESTIONS = TypeAdapter(List[Question])


class GenerationError(Exception):
    pass


class ConfigurationError(GenerationError):
    pass


class RateLimited(GenerationError):
    def __init__(self, message: str = "rate limited", retry_after: Optional[int] = None):
        super().__init__(message)
        if retry_after is None:
            retry_after = config.DEFAULT_RETRY_AFTER_S
        self.retry_after = retry_after


class MalformedResponse(GenerationError):
    pass


class TransportError(GenerationError):
    pass


def looks_rate_limited(text: str) -> bool:
    s = (text or "").lower()
    return any(m in s for m in _RATE_LIMIT_MARKERS)


def build_prompt(category: str, topic: Optional[str], count: int = config.BATCH_SIZE) -> str:
    subject = topic or category
    return (
        f'Generate {count} VERY SHORT questions for a 3.5-year-old about "{subject}". '
        "Each question has 2 options (a, b) with one correct answer. Return ONLY JSON array:\n"
        '[{"q":"Question?","a":{"txt":"Option A","icon":"emoji"},'
        '"b":{"txt":"Option B","icon":"emoji"},"correct":"a"},...]\n\n'
        "CRITICAL REQUIREMENTS:\n"
        '- Questions MUST be 2-5 words MAX (e.g., "Which is RED?", "What number?", "Find APPLE")\n'
        "- NO long sentences, NO multiple clauses, NO explanations\n"
        "- Use ONLY simple words a toddler knows\n"
        "- Use fun emojis\n"
        "- FOOD/ANIMALS: ONLY vegetarian items. NO meat, fish, chicken, eggs, "
        "or any non-vegetarian food.\n"
        "- RELIGION/CULTURE: ONLY Hinduism. Only Hindu gods, temples, festivals, and traditions.\n"
        "- Be culturally appropriate for a Hindu vegetarian family."
    )


def strip_fences(text: str) -> str:
    s = (text or "").strip()
    if s.startswith("```"):
        s = _FENCE_RE.sub("", s).strip()
    return s


def parse_questions(text: str) -> List[Question]:
    """Turn the service's free text into validated questions or raise MalformedResponse."""
    body = strip_fences(text)
    if not body:
        raise MalformedResponse("empty response")
    try:
        data: Any = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"invalid JSON: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("questions"), list):
        data = data["questions"]
    if not isinstance(data, list):
        raise MalformedResponse("expected a JSON array of questions")

    try:
        questions = _QUESTIONS.validate_python(data)
    except ValidationError as e:
        raise MalformedResponse(f"question shape mismatch: {e.error_count()} error(s)") from e
    if not questions:
        raise MalformedResponse("no questions in response")
    return questions


async def retry_with_backoff(
    fn: Callable[[], Awaitable[T]],
    *,
    max_retries: int = config.MAX_RETRIES,
    base_delay_s: float = config.BASE_DELAY_S,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
    """Retry only on RateLimited: waits base, 2*base, 4*base... then re-raises."""
    retrying = AsyncRetrying(
        retry=retry_if_exception_type(RateLimited),
        wait=wait_exponential(multiplier=base_delay_s),
        stop=stop_after_attempt(max_retries + 1),
        before_sleep=before_sleep_log(log, logging.INFO),
        sleep=sleep,
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            return await fn()


async def with_timeout(aw: Awaitable[T], timeout_s: float) -> T:
    try:
        return await asyncio.wait_for(aw, timeout=timeout_s)
    except asyncio.TimeoutError as e:
        raise TransportError(f"generation timed out after {timeout_s:g}s") from e


def _retry_after(resp: httpx.Response) -> Optional[int]:
    raw = resp.headers.get("retry-after")
    if raw and raw.strip().isdigit():
        return int(raw.strip())
    return None


def _extract_text(data: Any) -> str:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponse("generation reply carried no text") from e


class GeminiClient:
    """Talks to the Gemini generateContent endpoint."""

    def __init__(
        self,
        *,
        model: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        request_timeout_s: float = 60.0,
        max_retries: int = config.MAX_RETRIES,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.model = model or config.GEMINI_MODEL
        self._transport = transport
        self._request_timeout_s = request_timeout_s
        self.max_retries = max_retries
        self._sleep = sleep

    async def generate(self, category: str, topic: Optional[str] = None) -> List[Question]:
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY not configured")

        prompt = build_prompt(category, topic)
        log.info("Generating questions for %s/%s with %s", category, topic or category, self.model)
        text = await retry_with_backoff(
            lambda: self._call(api_key, prompt), max_retries=self.max_retries, sleep=self._sleep
        )
        questions = parse_questions(text)
        log.info("Generated %d questions for %s", len(questions), category)
        return questions

    async def _call(self, api_key: str, prompt: str) -> str:
        url = config.GEMINI_URL.format(model=self.model)
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(
                timeout=self._request_timeout_s, transport=self._transport
            ) as client:
                r = await client.post(url, headers={"x-goog-api-key": api_key}, json=body)
        except httpx.HTTPError as e:
            if looks_rate_limited(str(e)):
                raise RateLimited(str(e)) from e
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if r.status_code == 429 or (r.status_code != 200 and looks_rate_limited(r.text)):
            raise RateLimited(f"generation service: {r.status_code}", _retry_after(r))
        if r.status_code != 200:
            raise TransportError(f"generation service: {r.status_code} {r.text[:200]}")
        try:
            data = r.json()
        except ValueError as e:
            raise MalformedResponse("generation reply was not JSON") from e
        return _extract_text(data)
