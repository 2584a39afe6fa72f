"""
Task: a deferred asynchronous computation built on asyncio.

A Task holds a factory of awaitables, so it can be run any number of
times and nothing starts until it is run. Applying one Task to another
starts both computations concurrently:

    page = (render_page & get_post(1)) * get_comments(1)

Failure is an exception raised by the computation. Task.rejected lifts
an arbitrary error value into a failed Task; attempt and fork turn the
outcome back into an Either.
"""
import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import logging
from typing import Any, TypeVar

from .either import Either, Left, Right, either
from .errors import TaskRejected, require_callable
from .monad import Monad
from .settings import get_settings

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")

logger = logging.getLogger(__name__)


async def _both(first: Callable[[], Awaitable[Any]],
                second: Callable[[], Awaitable[Any]]) -> tuple[Any, Any]:
    """
    Starts two computations concurrently and returns both results.
    The failure that completes first is raised and the other
    computation is cancelled, including when second fails to start.
    """
    tasks: list[asyncio.Future] = []
    try:
        tasks.append(asyncio.ensure_future(first()))
        tasks.append(asyncio.ensure_future(second()))
        for next_done in asyncio.as_completed(tasks):
            await next_done
    finally:
        pending = [t for t in tasks if not t.done()]
        for t in pending:
            logger.debug("Cancelling sibling %s", t.get_name())
            t.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        for t in tasks:
            # mark every outcome as retrieved; only the first failure is raised
            if t.done() and not t.cancelled():
                t.exception()
    return tasks[0].result(), tasks[1].result()


@dataclass(slots=True, frozen=True)
class Task[A](Monad[A]):
    """
    Carrier for an asynchronous computation producing a value of type A.
    """
    _computation: Callable[[], Awaitable[A]]

    def __init__(self, computation: Callable[[], Awaitable[A]]):
        object.__setattr__(self, "_computation", computation)

    @classmethod
    def pure(cls, value: A) -> "Task[A]":
        """
        A Task that resolves immediately with value.
        """
        async def _resolved() -> A:
            return value
        return cls(_resolved)

    @classmethod
    def rejected(cls, error: Any) -> "Task[Any]":
        """
        A Task that fails with error. Exceptions are raised as they are,
        any other value is carried by TaskRejected.
        """
        async def _rejected():
            if isinstance(error, BaseException):
                raise error
            raise TaskRejected(error)
        return cls(_rejected)

    @classmethod
    def from_callable(cls, fn: Callable[..., A], *args: Any) -> "Task[A]":
        """
        Runs a blocking function in a worker thread when the Task runs.
        """
        async def _threaded() -> A:
            return await asyncio.to_thread(fn, *args)
        return cls(_threaded)

    @classmethod
    def sleep(cls, seconds: float, value: A = None) -> "Task[A]":
        """
        Resolves with value after the given delay.
        """
        async def _delayed() -> A:
            await asyncio.sleep(seconds)
            return value
        return cls(_delayed)

    def map(self, f: Callable[[A], B]) -> "Task[B]":
        """
        Transforms the eventual result with f.
        """
        async def _mapped() -> B:
            return f(await self._computation())
        return Task(_mapped)

    def _apply(self: "Task[Callable[[B], C]]", other: "Task[B]") -> "Task[C]":
        """
        Runs the function Task and the argument Task concurrently,
        then applies the function to the argument.
        """
        async def _applied() -> C:
            f, x = await _both(self._computation, other._computation)
            require_callable("Task", f)
            return f(x)
        return Task(_applied)

    def _bind(self, m: Callable[[A], "Task[B]"]) -> "Task[B]":
        """
        Runs this Task, then the Task that m builds from its result.
        """
        async def _bound() -> B:
            return await m(await self._computation()).run()
        return Task(_bound)

    async def run(self) -> A:
        """
        Runs the computation in the current event loop.
        """
        return await self._computation()

    def run_sync(self, timeout: float | None = None) -> A:
        """
        Runs the computation to completion in a new event loop.
        Uses the configured task_timeout when timeout is None.
        Must not be called from inside a running event loop.
        """
        limit = get_settings().task_timeout if timeout is None else timeout
        task = self if limit is None else self.with_timeout(limit)
        return asyncio.run(task.run())

    def with_timeout(self, seconds: float) -> "Task[A]":
        """
        Cancels the computation and raises TimeoutError
        if it has not finished after the given number of seconds.
        """
        async def _limited() -> A:
            return await asyncio.wait_for(self._computation(), seconds)
        return Task(_limited)

    def attempt(self) -> "Task[Either[Any, A]]":
        """
        A Task that never fails: Right with the result, Left with the
        rejection value, or Left with an unanticipated exception.
        """
        async def _attempted() -> Either[Any, A]:
            try:
                return Right(await self._computation())
            except TaskRejected as rejection:
                return Left(rejection.error)
            except Exception as ex: # pylint: disable=broad-except
                logger.warning("Unhandled exception in task: %r", ex,
                               exc_info=ex)
                return Left(ex)
        return Task(_attempted)

    def fork(self, reject: Callable[[Any], S], resolve: Callable[[A], S]) -> S:
        """
        Runs the Task synchronously, passing a rejection to reject
        and a result to resolve.
        """
        return either(reject, resolve, self.attempt().run_sync())

    def __repr__(self):
        return "Task(<computation>)"
