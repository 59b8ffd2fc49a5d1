from dataclasses import dataclass
from typing import Any, NamedTuple
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import InvalidConfiguration


class ValidatedModel(BaseModel):
    """Frozen pydantic model that reports bad input as InvalidConfiguration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e


class WorkerConfig(ValidatedModel):
    id: int
    sample_count: int = Field(default=100, ge=0)
    min_value: int = 1
    max_value: int = 1000

    @model_validator(mode="after")
    def _check_bounds(self) -> "WorkerConfig":
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        return self


class Summary(NamedTuple):
    id: int
    result: int


@dataclass
class Stats:
    workers: int
    samples_per_worker: int
    grand_total: int
    mean: float | None
    std: float | None
    min: int | None
    max: int | None
    spread: int | None


# Timeline: worker_id -> (start, end) in seconds relative to run start
TimelineType = dict[int, tuple[float, float]]

# Metrics callback: callable accepting stats dict
MetricsCallback = Callable[[dict[str, Any]], None]
