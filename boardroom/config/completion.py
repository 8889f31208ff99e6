"""
Configuration for the completion client and the persona orchestrator
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, fields

import yaml
from dotenv import load_dotenv

load_dotenv()


class ContextWindowMode(str, Enum):
    """Which slice of a conversation primes persona replies"""
    EARLIEST = "earliest"  # ascending query with a row limit
    LATEST = "latest"  # newest N, returned in chronological order


@dataclass
class CompletionConfig:
    """OpenAI-compatible chat completion endpoint configuration"""
    api_key: str
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> 'CompletionConfig':
        """Create configuration from environment variables, optionally on top of a YAML file"""
        values: Dict[str, Any] = {}
        config_path = os.getenv("COMPLETION_CONFIG_PATH")
        if config_path:
            values.update(cls._read_yaml(Path(config_path)))

        env_overrides = {
            "api_key": os.getenv("OPENAI_API_KEY"),
            "base_url": os.getenv("OPENAI_BASE_URL"),
            "model": os.getenv("OPENAI_MODEL"),
            "request_timeout": os.getenv("COMPLETION_TIMEOUT"),
        }
        values.update({k: v for k, v in env_overrides.items() if v is not None})

        return cls(
            api_key=values.get("api_key", ""),
            base_url=str(values.get("base_url", cls.base_url)).rstrip("/"),
            model=values.get("model", cls.model),
            request_timeout=float(values.get("request_timeout", cls.request_timeout))
        )

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """Read the `completion` section of a YAML config file"""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        section = data.get("completion", data) if isinstance(data, dict) else data
        # An empty `completion:` key loads as None
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ValueError(f"Completion config in {path} must be a mapping")

        known = {f.name for f in fields(CompletionConfig)}
        return {k: v for k, v in section.items() if k in known}

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class OrchestratorConfig:
    """Server-side knobs for persona orchestration"""
    context_message_limit: int = 10
    context_window_mode: ContextWindowMode = ContextWindowMode.EARLIEST
    persona_call_timeout: Optional[float] = 30.0

    @classmethod
    def from_env(cls) -> 'OrchestratorConfig':
        """Create configuration from environment variables"""
        raw_timeout = os.getenv("PERSONA_CALL_TIMEOUT", "30.0").strip().lower()
        # "none" or a non-positive value disables the per-call deadline
        timeout = None if raw_timeout in ("none", "") else float(raw_timeout)
        if timeout is not None and timeout <= 0:
            timeout = None

        return cls(
            context_message_limit=int(os.getenv("CONTEXT_MESSAGE_LIMIT", "10")),
            context_window_mode=ContextWindowMode(
                os.getenv("CONTEXT_WINDOW_MODE", ContextWindowMode.EARLIEST.value).lower()
            ),
            persona_call_timeout=timeout
        )
