"""Runtime configuration.

Values come from the process environment, with a local ``.env`` file loaded
first when present. Nothing here holds a live client; integrations build
their own from a ``Settings`` instance.
"""

import logging
import os
from typing import Callable, List, Literal, Optional, TypeVar, get_args

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load variables from .env into environment
load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}

ReasoningEffort = Literal["low", "medium", "high"]

T = TypeVar("T", int, float)


def _env_number(name: str, parse: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = parse(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if not value > 0:
        logger.warning("Ignoring %s=%r: must be positive, using %s", name, raw, default)
        return default
    return value


def _env_effort(default: Optional[str]) -> Optional[str]:
    raw = os.getenv("OPENAI_REASONING_EFFORT")
    if raw is None:
        return default
    value = raw.strip().lower()
    if not value:
        return None
    if value not in get_args(ReasoningEffort):
        logger.warning("Ignoring OPENAI_REASONING_EFFORT=%r: expected one of %s, using %s",
                       raw, ", ".join(get_args(ReasoningEffort)), default)
        return default
    return value


class Settings(BaseModel):
    openai_api_key: str = ""
    openai_base_url: str = ""
    model: str = "o3-mini"
    # None for models without reasoning support
    reasoning_effort: Optional[ReasoningEffort] = "medium"
    max_output_tokens: int = Field(default=4000, gt=0)
    request_timeout: float = Field(default=60.0, gt=0)
    structured_output: bool = True
    log_level: str = "INFO"
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_base_url=os.getenv("OPENAI_BASE_URL", ""),
            model=os.getenv("OPENAI_MODEL", defaults.model),
            reasoning_effort=_env_effort(defaults.reasoning_effort),
            max_output_tokens=_env_number("OPENAI_MAX_OUTPUT_TOKENS", int, defaults.max_output_tokens),
            request_timeout=_env_number("OPENAI_TIMEOUT_SECONDS", float, defaults.request_timeout),
            structured_output=os.getenv("OPENAI_STRUCTURED_OUTPUT", "true").strip().lower() in _TRUE_VALUES,
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=os.getenv("CORS_ORIGINS", defaults.cors_origins),
        )
