"""
Completion service: the narrow capability persona replies and summaries are
generated through, and its HTTP implementation for OpenAI-compatible
chat completion endpoints.
"""

import asyncio
import time
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

import aiohttp

from boardroom.config.completion import CompletionConfig
from boardroom.models.conversation import ChatTurn
from boardroom.services.exceptions import (
    ExternalServiceError,
    FailureReason,
    classify_failure
)


logger = logging.getLogger(__name__)


class CompletionService(ABC):
    """Stateless capability: role-tagged messages in, generated text out"""

    @abstractmethod
    async def complete(
        self,
        messages: Sequence[ChatTurn],
        max_output_tokens: int,
        temperature: float
    ) -> str:
        """
        Generate a completion.

        Returns the generated text, which may be empty. Raises
        ExternalServiceError on any transport or provider failure.
        """


@dataclass
class CompletionMetrics:
    """Track call metrics for the completion endpoint"""
    success_count: int = 0
    failure_count: int = 0
    total_latency: float = 0.0
    total_tokens: int = 0
    failure_reasons: Dict[FailureReason, int] = field(default_factory=dict)
    last_failure: Optional[datetime] = None
    last_success: Optional[datetime] = None

    @property
    def success_rate(self) -> float:
        total = self.success_count + self.failure_count
        return self.success_count / total if total > 0 else 0.0

    @property
    def average_latency(self) -> float:
        return self.total_latency / self.success_count if self.success_count > 0 else 0.0

    def record_success(self, latency: float, tokens: int) -> None:
        self.success_count += 1
        self.total_latency += latency
        self.total_tokens += tokens
        self.last_success = datetime.now(timezone.utc)

    def record_failure(self, reason: FailureReason) -> None:
        self.failure_count += 1
        self.failure_reasons[reason] = self.failure_reasons.get(reason, 0) + 1
        self.last_failure = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        report = {
            "total_requests": self.success_count + self.failure_count,
            "success_rate": self.success_rate,
            "average_latency": self.average_latency,
            "total_tokens": self.total_tokens,
            "last_success": self.last_success.isoformat() if self.last_success else None,
            "last_failure": self.last_failure.isoformat() if self.last_failure else None
        }
        if self.failure_reasons:
            report["failure_reasons"] = {k.value: v for k, v in self.failure_reasons.items()}
        return report


class OpenAICompletionService(CompletionService):
    """CompletionService backed by an OpenAI-compatible /chat/completions endpoint"""

    def __init__(self, config: CompletionConfig):
        self.config = config
        self.metrics = CompletionMetrics()
        self._session: Optional[aiohttp.ClientSession] = None

    async def initialize(self):
        """Open the shared HTTP session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
        if not self.config.is_configured:
            logger.warning("OPENAI_API_KEY is not set; completion calls will fail")

    async def close(self):
        """Close the HTTP session"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def _build_payload(
        self,
        messages: Sequence[ChatTurn],
        max_output_tokens: int,
        temperature: float
    ) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [turn.model_dump() for turn in messages],
            "max_tokens": max_output_tokens,
            "temperature": temperature
        }

    async def complete(
        self,
        messages: Sequence[ChatTurn],
        max_output_tokens: int,
        temperature: float
    ) -> str:
        if self._session is None or self._session.closed:
            raise ExternalServiceError(
                "Completion client not initialized",
                reason=FailureReason.NETWORK_ERROR
            )

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json"
        }
        payload = self._build_payload(messages, max_output_tokens, temperature)
        start_time = time.time()

        try:
            async with self._session.post(
                self.config.chat_completions_url,
                headers=headers,
                json=payload
            ) as response:
                if response.status != 200:
                    error_data = await response.text()
                    raise ExternalServiceError(
                        f"API error {response.status}: {error_data}",
                        reason=self._reason_for_status(response.status),
                        status=response.status
                    )
                result = await response.json()

        except ExternalServiceError as e:
            self.metrics.record_failure(e.reason)
            raise
        except asyncio.TimeoutError as e:
            self.metrics.record_failure(FailureReason.TIMEOUT)
            raise ExternalServiceError(
                f"Completion request timed out after {self.config.request_timeout}s",
                reason=FailureReason.TIMEOUT
            ) from e
        except (aiohttp.ClientError, ValueError) as e:
            reason = classify_failure(e)
            if isinstance(e, aiohttp.ContentTypeError):
                reason = FailureReason.INVALID_RESPONSE
            self.metrics.record_failure(reason)
            raise ExternalServiceError(f"Completion request failed: {e}", reason=reason) from e

        content = self._extract_content(result)
        usage = result.get("usage") or {}
        self.metrics.record_success(
            time.time() - start_time,
            int(usage.get("total_tokens", 0) or 0)
        )
        return content

    @staticmethod
    def _extract_content(result: Dict[str, Any]) -> str:
        """Pull the first choice's text out of a chat completion body"""
        choices = result.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        return message.get("content") or ""

    @staticmethod
    def _reason_for_status(status: int) -> FailureReason:
        if status == 429:
            return FailureReason.RATE_LIMIT
        if status in (401, 403):
            return FailureReason.AUTHENTICATION
        if status in (502, 503, 504):
            return FailureReason.SERVICE_UNAVAILABLE
        if status == 408:
            return FailureReason.TIMEOUT
        return FailureReason.API_ERROR

    def get_status(self) -> Dict[str, Any]:
        """Report configuration and call metrics for health checks"""
        return {
            "configured": self.config.is_configured,
            "model": self.config.model,
            "endpoint": self.config.chat_completions_url,
            "session_open": bool(self._session and not self._session.closed),
            "metrics": self.metrics.to_dict()
        }
