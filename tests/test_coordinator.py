import threading

import pytest

from threadsum.config import RunSettings
from threadsum.coordinator import SumCoordinator
from threadsum.errors import EmptyCoordinator, InvalidConfiguration, TaskNotFinished
from threadsum.models import Summary, WorkerConfig
from threadsum.task import WorkerTask


def test_summaries_cover_every_id_in_order():
    coord = SumCoordinator(8, 50, 1, 1000)
    coord.run_all()
    rows = coord.summaries()
    assert [r.id for r in rows] == list(range(8))
    assert len(coord.threads) == len(coord.tasks) == 8


def test_results_within_bounds():
    coord = SumCoordinator(5, 100, 3, 9)
    coord.run_all()
    for _, total in coord.summaries():
        assert 3 * 100 <= total <= 9 * 100


def test_zero_samples_give_zero_totals():
    coord = SumCoordinator(4, 0, 1, 1000)
    coord.run_all()
    assert [total for _, total in coord.summaries()] == [0, 0, 0, 0]


def test_single_constant_worker():
    coord = SumCoordinator(1, 5, 7, 7)
    coord.run_all()
    assert coord.summaries() == [(0, 35)]
    assert coord.best() == (0, 35)
    assert coord.best() == Summary(id=0, result=35)


def test_best_matches_max():
    coord = SumCoordinator(6, 100, 1, 1000)
    coord.run_all()
    rows = coord.summaries()
    top = max(total for _, total in rows)
    first = next(r for r in rows if r.result == top)
    assert coord.best() == first


def test_best_breaks_ties_on_lowest_id():
    coord = SumCoordinator(0)
    coord.tasks = [
        WorkerTask(WorkerConfig(id=i, sample_count=1, min_value=v, max_value=v))
        for i, v in enumerate([3, 9, 1, 9, 9])
    ]
    coord.run_all()
    assert coord.best() == (1, 9)


def test_best_when_all_equal():
    coord = SumCoordinator(4, 3, 2, 2)
    coord.run_all()
    assert coord.best() == (0, 6)


def test_empty_coordinator():
    coord = SumCoordinator(0, 10, 1, 10)
    coord.run_all()
    assert coord.summaries() == []
    assert coord.threads == []
    with pytest.raises(EmptyCoordinator):
        coord.best()


@pytest.mark.parametrize(
    "args",
    [
        (-1, 10, 1, 10),
        (2, -1, 1, 10),
        (2, 10, 11, 10),
    ],
)
def test_invalid_parameters_fail_before_spawning(args):
    before = threading.active_count()
    with pytest.raises(InvalidConfiguration):
        SumCoordinator(*args)
    assert threading.active_count() == before


def test_reading_before_run_raises():
    coord = SumCoordinator(2, 10, 1, 10)
    with pytest.raises(TaskNotFinished):
        coord.summaries()
    with pytest.raises(TaskNotFinished):
        coord.best()
    with pytest.raises(TaskNotFinished):
        coord.timeline()


def test_run_all_only_once():
    coord = SumCoordinator(2, 1, 1, 1)
    coord.run_all()
    with pytest.raises(RuntimeError):
        coord.run_all()


def test_run_all_only_once_without_workers():
    coord = SumCoordinator(0, 10, 1, 10)
    coord.run_all()
    with pytest.raises(RuntimeError):
        coord.run_all()


def test_failed_spawn_joins_started_workers(monkeypatch):
    real_start = threading.Thread.start
    started = []

    def start_two_then_fail(self):
        if len(started) == 2:
            raise RuntimeError("can't start new thread")
        started.append(self)
        real_start(self)

    monkeypatch.setattr(threading.Thread, "start", start_two_then_fail)
    coord = SumCoordinator(4, 100, 1, 10)
    with pytest.raises(RuntimeError, match="can't start new thread"):
        coord.run_all()

    assert coord.threads == started
    assert not any(t.is_alive() for t in coord.threads)
    assert [task.done for task in coord.tasks] == [True, True, False, False]
    with pytest.raises(TaskNotFinished):
        coord.summaries()
    with pytest.raises(RuntimeError):
        coord.run_all()


def test_workers_run_on_separate_threads():
    seen = {}

    def record(task):
        seen[task.id] = threading.current_thread().name

    coord = SumCoordinator(4, 10, 1, 10)
    coord.run_all(on_task_done=record)
    assert sorted(seen) == [0, 1, 2, 3]
    assert len(set(seen.values())) == 4
    assert threading.current_thread().name not in seen.values()


def test_timeline_has_one_segment_per_worker():
    coord = SumCoordinator(3, 1000, 1, 10)
    coord.run_all()
    timeline = coord.timeline()
    assert sorted(timeline) == [0, 1, 2]
    for start, end in timeline.values():
        assert 0 <= start <= end


def test_from_settings():
    coord = SumCoordinator.from_settings(RunSettings(threads=3, samples=2, min_value=4, max_value=4))
    coord.run_all()
    assert coord.summaries() == [(0, 8), (1, 8), (2, 8)]
