"""
Local event stream: the events a MinaraiClient republishes to its caller.
"""

import asyncio
import inspect
from typing import Any, Callable, Optional

from minarai.logger import get_logger

logger = get_logger("events")

Handler = Callable[..., Any]


class EventStream:
    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        """Add a handler. Returns a cleanup function."""
        self._handlers.setdefault(event, []).append(handler)

        def remove() -> None:
            self.off(event, handler)
        return remove

    def once(self, event: str, handler: Handler) -> Callable[[], None]:
        def wrapper(*args: Any) -> Any:
            remove()
            return handler(*args)
        remove = self.on(event, wrapper)
        return remove

    def off(self, event: str, handler: Handler) -> None:
        try:
            self._handlers.get(event, []).remove(handler)
        except ValueError:
            pass

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every handler for ``event``. Coroutine handlers are scheduled.

        Returns whether any handler was registered.
        """
        handlers = list(self._handlers.get(event, []))
        for handler in handlers:
            result = handler(*args)
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                task.add_done_callback(_log_handler_failure(event))
        return bool(handlers)

    async def wait_for(self, event: str, timeout: Optional[float] = 10.0) -> Any:
        """Resolve with the first argument of the next ``event``."""
        future: asyncio.Future = asyncio.get_running_loop().create_future()

        def handler(*args: Any) -> None:
            if not future.done():
                future.set_result(args[0] if args else None)

        remove = self.on(event, handler)
        try:
            return await asyncio.wait_for(future, timeout=timeout)
        except asyncio.TimeoutError:
            raise TimeoutError(f"Timed out waiting for '{event}' after {timeout}s")
        finally:
            remove()


def _log_handler_failure(event: str) -> Callable[[asyncio.Future], None]:
    def done(task: asyncio.Future) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Handler for '{event}' failed: {task.exception()}")
    return done
