import logging

from .errors import TaskNotFinished
from .models import WorkerConfig
from .random_source import RandomSource
from .utils import now

logger = logging.getLogger(__name__)


class WorkerTask:
    """
    Sums ``sample_count`` uniform draws from ``[min_value, max_value]``.

    A task is run exactly once, on one thread. Its result is written only by
    that thread and must be read after the thread has been joined.
    """

    def __init__(self, config: WorkerConfig) -> None:
        self.config = config
        self._result = 0
        self._done = False
        self._claimed = False
        self.started_at: float | None = None
        self.finished_at: float | None = None

    @property
    def id(self) -> int:
        return self.config.id

    @property
    def done(self) -> bool:
        return self._done

    @property
    def result(self) -> int:
        if not self._done:
            raise TaskNotFinished(f"worker #{self.id} has not finished running")
        return self._result

    def run(self) -> None:
        if self._claimed:
            raise RuntimeError(f"worker #{self.id} has already been run")
        self._claimed = True

        cfg = self.config
        self.started_at = now()
        rng = RandomSource(cfg.id)
        acc = 0
        for _ in range(cfg.sample_count):
            acc += rng.next_int(cfg.min_value, cfg.max_value)
        self._result = acc
        self.finished_at = now()
        self._done = True

        logger.debug(
            f"[W{cfg.id}] summed {cfg.sample_count} samples -> {acc} "
            f"in {self.finished_at - self.started_at:.4f}s"
        )

    __call__ = run

    def __repr__(self) -> str:
        state = self._result if self._done else "pending"
        return f"WorkerTask(id={self.id}, result={state})"
