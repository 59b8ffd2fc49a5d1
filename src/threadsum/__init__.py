__all__ = [
    "SumCoordinator",
    "WorkerTask",
    "WorkerConfig",
    "RandomSource",
    "RunSettings",
    "Summary",
    "InvalidConfiguration",
    "TaskNotFinished",
    "EmptyCoordinator",
]


from .config import RunSettings
from .coordinator import SumCoordinator
from .errors import EmptyCoordinator, InvalidConfiguration, TaskNotFinished
from .models import Summary, WorkerConfig
from .random_source import RandomSource
from .task import WorkerTask
