"""Existence predicates and the guarded calls made to them."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path

logger = logging.getLogger(__name__)

ExistsPredicate = Callable[[str], bool]
AsyncExistsPredicate = Callable[[str], Awaitable[bool]] | ExistsPredicate


def directory_exists(path: str) -> bool:
    """Report whether `path` is a directory on the local filesystem."""
    return Path(path).is_dir()


def assume_exists(_path: str) -> bool:
    """Treat every directory as present."""
    return True


def check_exists(
    exists: ExistsPredicate, path: str, timeout: float | None = None
) -> bool:
    """Call `exists`, treating errors and timeouts as "does not exist".

    With a timeout the predicate runs on a worker thread; a predicate that
    never returns leaves that thread behind but does not block the caller.
    An async predicate cannot be answered here and also counts as missing.
    """
    if timeout is None:
        try:
            return _answer(exists(path), path)
        except Exception:
            logger.warning("Existence check failed for %r", path, exc_info=True)
            return False

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="kernelpath-exists")
    try:
        future = executor.submit(exists, path)
        return _answer(future.result(timeout=timeout), path)
    except FutureTimeoutError:
        logger.warning("Existence check for %r timed out after %ss", path, timeout)
        return False
    except Exception:
        logger.warning("Existence check failed for %r", path, exc_info=True)
        return False
    finally:
        executor.shutdown(wait=False)


async def check_exists_async(
    exists: AsyncExistsPredicate, path: str, timeout: float | None = None
) -> bool:
    """Await `exists` (sync or async), treating errors and timeouts as "does not exist".

    Cancellation of the predicate itself counts as "does not exist";
    cancellation of the calling task still propagates.
    """
    try:
        return await asyncio.wait_for(_call_predicate(exists, path), timeout=timeout)
    except TimeoutError:
        logger.warning("Existence check for %r timed out after %ss", path, timeout)
        return False
    except asyncio.CancelledError:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            raise
        logger.warning("Existence check for %r was cancelled", path)
        return False
    except Exception:
        logger.warning("Existence check failed for %r", path, exc_info=True)
        return False


async def _call_predicate(exists: AsyncExistsPredicate, path: str) -> bool:
    # Plain callables run on a worker thread; an awaitable result is awaited.
    if inspect.iscoroutinefunction(exists) or inspect.iscoroutinefunction(
        getattr(exists, "__call__", None)
    ):
        result = exists(path)
    else:
        result = await asyncio.to_thread(exists, path)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


def _answer(result: object, path: str) -> bool:
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        logger.warning(
            "Existence predicate for %r returned an awaitable; use the async resolver",
            path,
        )
        return False
    return bool(result)
