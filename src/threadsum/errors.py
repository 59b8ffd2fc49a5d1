class ThreadSumError(Exception):
    """Base class for every error raised by threadsum."""


class InvalidConfiguration(ThreadSumError, ValueError):
    """Run parameters were rejected before any worker was spawned."""


class TaskNotFinished(ThreadSumError, RuntimeError):
    """A worker result was read before its thread was joined."""


class EmptyCoordinator(ThreadSumError, LookupError):
    """An aggregate was requested from a coordinator with no workers."""
