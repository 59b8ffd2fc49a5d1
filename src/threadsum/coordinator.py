import logging
import threading
from collections.abc import Callable

from .config import RunSettings
from .errors import EmptyCoordinator, InvalidConfiguration, TaskNotFinished
from .models import Summary, TimelineType, WorkerConfig
from .task import WorkerTask
from .utils import now

logger = logging.getLogger(__name__)

TaskCallback = Callable[[WorkerTask], None]


class SumCoordinator:
    """
    Owns a fixed set of workers, runs each on its own thread and joins them all.

    Aggregate queries (``summaries``, ``best``, ``timeline``) are only valid
    once ``run_all`` has returned, since the join is what makes the workers'
    results visible to the calling thread.
    """

    def __init__(
        self,
        thread_count: int,
        samples_per_thread: int = 100,
        min_value: int = 1,
        max_value: int = 1000,
    ) -> None:
        if thread_count < 0:
            raise InvalidConfiguration(f"thread_count must be >= 0, got {thread_count}")
        if samples_per_thread < 0:
            raise InvalidConfiguration(
                f"samples_per_thread must be >= 0, got {samples_per_thread}"
            )
        if min_value > max_value:
            raise InvalidConfiguration(
                f"min_value ({min_value}) must not exceed max_value ({max_value})"
            )

        self.samples_per_thread = samples_per_thread
        self.min_value = min_value
        self.max_value = max_value

        self.tasks: list[WorkerTask] = [
            WorkerTask(
                WorkerConfig(
                    id=i,
                    sample_count=samples_per_thread,
                    min_value=min_value,
                    max_value=max_value,
                )
            )
            for i in range(thread_count)
        ]
        self.threads: list[threading.Thread] = []
        self._t0: float | None = None
        self._started = False
        self._joined = False

        logger.info(
            f"Initialized coordinator with {thread_count} workers, "
            f"samples_per_thread={samples_per_thread}, range=[{min_value}, {max_value}]"
        )

    @classmethod
    def from_settings(cls, settings: RunSettings) -> "SumCoordinator":
        return cls(
            settings.threads,
            settings.samples,
            settings.min_value,
            settings.max_value,
        )

    def __len__(self) -> int:
        return len(self.tasks)

    # ────────────────────────────────
    # Fan-out / Join
    # ────────────────────────────────

    def run_all(self, on_task_done: TaskCallback | None = None) -> None:
        if self._started:
            raise RuntimeError("run_all() has already been called")
        self._started = True

        def target(task: WorkerTask) -> None:
            task.run()
            if on_task_done is not None:
                on_task_done(task)

        self._t0 = now()
        logger.info(f"Starting {len(self.tasks)} worker threads")

        try:
            for task in self.tasks:
                t = threading.Thread(
                    target=target, args=(task,), name=f"threadsum-worker-{task.id}"
                )
                t.start()
                self.threads.append(t)
        finally:
            # workers already started are always joined, even if spawning failed
            for t in self.threads:
                t.join()
        self._joined = True

        logger.info(f"All {len(self.threads)} workers joined in {now() - self._t0:.3f}s")

    # ────────────────────────────────
    # Aggregates
    # ────────────────────────────────

    def _require_joined(self) -> None:
        if not self._joined:
            raise TaskNotFinished("results are only available after run_all() returns")

    def summaries(self) -> list[Summary]:
        self._require_joined()
        return [Summary(task.id, task.result) for task in self.tasks]

    def best(self) -> Summary:
        """Return the worker with the highest total; ties go to the lowest id."""
        if not self.tasks:
            raise EmptyCoordinator("best() needs at least one worker")
        self._require_joined()

        winner = self.tasks[0]
        for task in self.tasks[1:]:
            if task.result > winner.result:
                winner = task
        return Summary(winner.id, winner.result)

    def timeline(self) -> TimelineType:
        self._require_joined()
        out: TimelineType = {}
        for task in self.tasks:
            if task.started_at is None or task.finished_at is None:
                continue
            out[task.id] = (task.started_at - self._t0, task.finished_at - self._t0)
        return out
