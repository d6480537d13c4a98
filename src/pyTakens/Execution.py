"""Execution strategies for the pair count of the correlation sum.

The count is split into blocks of rows of the upper triangle of the
distance matrix. Blocks are independent and only read the point set, so
they can be counted in the calling process or in a process pool. A pool
receives the point set once per worker through its initializer; tasks
carry only row bounds and radii.
"""

from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from multiprocessing import get_context
from typing import Callable, Iterable, Iterator, Optional
import os


class ExecutionMode(Enum):
    """Enumeration of execution strategies.

    Attributes
    ----------
    SEQUENTIAL : str
        Blocks counted one after another in the calling process
    MULTIPROCESS : str
        Process pool with the platform default start method
    SPAWN : str
        Process pool, workers start a fresh interpreter
    FORK : str
        Process pool, workers are forked from the caller
    FORKSERVER : str
        Process pool, workers forked from a server process
    """
    SEQUENTIAL = "sequential"
    MULTIPROCESS = "multiprocess"
    SPAWN = "spawn"
    FORK = "fork"
    FORKSERVER = "forkserver"


# read-only data of a pool worker, set once by the pool initializer
_workerShared = None


def _InitWorker(shared):
    global _workerShared
    _workerShared = shared


def _RunTask(func, args):
    return func(_workerShared, *args)


class ExecutionStrategy(ABC):
    """Abstract base class for execution strategies."""

    @abstractmethod
    def imap(self, func: Callable, shared, tasks: Iterable) -> Iterator:
        """Yield func(shared, *task) for each task, in task order.

        Parameters
        ----------
        func : callable
            Module level function, picklable for the pool strategies
        shared : object
            Read-only data common to all tasks
        tasks : iterable
            Argument tuples appended after shared
        """
        pass


class SequentialExecution(ExecutionStrategy):
    """Count blocks in the calling process.

    Faster than a pool for small point sets, where process start-up and
    transfer of the points dominate.
    """

    def imap(self, func, shared, tasks):
        for args in tasks:
            yield func(shared, *args)


class MultiprocessExecution(ExecutionStrategy):
    """Count blocks in a process pool.

    Parameters
    ----------
    numProcess : int, optional
        Number of worker processes. If None, uses os.cpu_count()
    mpMethod : str, optional
        Start method ('spawn', 'fork', 'forkserver'), platform default if None
    chunksize : int, default=1
        Tasks sent to a worker at a time
    """

    def __init__(self, numProcess: Optional[int] = None,
                 mpMethod: Optional[str] = None,
                 chunksize: int = 1):
        self.numProcess = numProcess or os.cpu_count()
        self.mpMethod = mpMethod
        self.chunksize = chunksize

    def imap(self, func, shared, tasks):
        mpContext = get_context(self.mpMethod)
        with mpContext.Pool(processes=self.numProcess,
                            initializer=_InitWorker, initargs=(shared,)) as pool:
            yield from pool.imap(partial(_RunTask, func), tasks, chunksize=self.chunksize)


def create_executor(
    mode: ExecutionMode = ExecutionMode.SEQUENTIAL,
    numProcess: Optional[int] = None,
    chunksize: int = 1
) -> ExecutionStrategy:
    """Execution strategy for an ExecutionMode.

    numProcess and chunksize are ignored for SEQUENTIAL. Raises ValueError
    for an unknown mode.

    Examples
    --------
    >>> executor = create_executor(ExecutionMode.FORK, numProcess=4)
    >>> counts = sum(executor.imap(CountBlockPairs, points, blocks))
    """
    if mode == ExecutionMode.SEQUENTIAL:
        return SequentialExecution()
    if mode == ExecutionMode.MULTIPROCESS:
        return MultiprocessExecution(numProcess=numProcess, chunksize=chunksize)
    if mode in (ExecutionMode.SPAWN, ExecutionMode.FORK, ExecutionMode.FORKSERVER):
        return MultiprocessExecution(numProcess=numProcess, mpMethod=mode.value,
                                     chunksize=chunksize)
    raise ValueError(f"Unknown execution mode: {mode}")
