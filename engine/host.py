"""
host.py — Event Loop Host
===========================
Runs one asyncio event loop on a daemon thread so a synchronous web
server can drive the async engine.

    host = LoopHost()
    host.start()
    host.call(controller.reset)                 # plain function, on the loop
    host.submit(controller.start())             # coroutine, returns a Future
    host.stop()

Every engine object is only ever touched from the loop thread; request
threads just marshal work onto it and wait for the result.
"""

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoopHost:
    def __init__(self, name: str = "VisualizerLoop"):
        self.name = name
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._ready.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        self._ready.wait()
        logger.info("Event loop thread %s started", self.name)

    def stop(self, timeout: float = 2.0) -> None:
        loop, thread = self.loop, self._thread
        if loop is None or thread is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=timeout)
        self._thread = None
        logger.info("Event loop thread %s stopped", self.name)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Marshalling
    # ------------------------------------------------------------------
    def submit(self, coro: Coroutine[Any, Any, T]) -> "Future[T]":
        """Schedule a coroutine on the loop; returns a concurrent Future."""
        if self.loop is None:
            raise RuntimeError("LoopHost.start() has not been called")
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def call(self, fn: Callable[..., T], *args: Any, timeout: Optional[float] = 5.0) -> T:
        """Run a plain function on the loop thread and wait for its result (or exception)."""

        async def _invoke() -> T:
            return fn(*args)

        return self.submit(_invoke()).result(timeout=timeout)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _run(self) -> None:
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)
        self._ready.set()
        try:
            self.loop.run_forever()
        finally:
            pending = asyncio.all_tasks(self.loop)
            for task in pending:
                task.cancel()
            if pending:
                self.loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            self.loop.close()
