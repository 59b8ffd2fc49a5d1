import logging
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, model_validator

from .models import ValidatedModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "THREADSUM_"

# env suffix -> RunSettings field
ENV_FIELDS = {
    "THREADS": "threads",
    "SAMPLES": "samples",
    "MIN_VALUE": "min_value",
    "MAX_VALUE": "max_value",
}


class RunSettings(ValidatedModel):
    """The four knobs of a run. A run needs at least one worker to report a winner."""

    threads: int = Field(default=10, ge=1, description="Number of worker threads")
    samples: int = Field(default=100, ge=0, description="Random draws per worker")
    min_value: int = Field(default=1, description="Inclusive lower bound of each draw")
    max_value: int = Field(default=1000, description="Inclusive upper bound of each draw")

    @model_validator(mode="after")
    def _check_bounds(self) -> "RunSettings":
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        return self

    @classmethod
    def from_env(cls, dotenv_path: str | None = None, **overrides: Any) -> "RunSettings":
        """
        Build settings from ``THREADSUM_*`` environment variables.

        A ``.env`` file is loaded first (without overriding variables already
        set). Keyword overrides that are not None win over the environment.
        """
        load_dotenv(dotenv_path)
        data: dict[str, Any] = {}
        for suffix, field in ENV_FIELDS.items():
            raw = os.getenv(ENV_PREFIX + suffix)
            if raw is not None and raw.strip():
                data[field] = raw.strip()
        data.update({k: v for k, v in overrides.items() if v is not None})
        if data:
            logger.debug(f"Settings overrides: {data}")
        return cls(**data)
