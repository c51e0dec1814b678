"""Pool de tasks em background para processamento pós-ack.

A resposta HTTP ao Slack nunca espera o processamento downstream. O
dispatcher vive enquanto a aplicação vive (um por instância, em
`app.state`), mantém referência forte às tasks para que continuem após
o flush da resposta e limita a concorrência com um semáforo.

Sem retry: falha em background é terminal e só aparece nos logs.
Se o processo morrer antes do fim, a task é abandonada.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from typing import TYPE_CHECKING, Any

from app.observability import record_latency

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain import DispatchTask

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT_TASKS = 100


class BackgroundDispatcher:
    """Agenda DispatchTasks desacopladas do ciclo de vida do request."""

    def __init__(
        self,
        handler: Callable[[DispatchTask], Awaitable[None]],
        max_concurrent_tasks: int = DEFAULT_MAX_CONCURRENT_TASKS,
    ) -> None:
        self._handler = handler
        self._semaphore = asyncio.Semaphore(max_concurrent_tasks)
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def submit(self, task: DispatchTask) -> asyncio.Task[None]:
        """Agenda a task e retorna imediatamente."""
        running = asyncio.create_task(self._run(task))
        self._active_tasks.add(running)
        running.add_done_callback(self._on_task_done)
        logger.info(
            "slack_dispatch_scheduled",
            extra={
                "route": task.route,
                "payload_kind": task.payload.kind,
                "correlation_id": task.correlation_id,
                "active_tasks": len(self._active_tasks),
            },
        )
        return running

    async def _run(self, task: DispatchTask) -> None:
        async with self._semaphore:
            started_at = time.perf_counter()
            try:
                await self._handler(task)
            finally:
                record_latency(
                    "slack_dispatcher",
                    task.payload.kind,
                    (time.perf_counter() - started_at) * 1000,
                    task.correlation_id,
                )

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "slack_dispatch_task_failed",
                    extra={
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def drain(self, timeout_seconds: float = 30.0) -> None:
        """Aguarda tasks pendentes no shutdown; cancela o que sobrar."""
        if not self._active_tasks:
            return

        pending_now = list(self._active_tasks)
        logger.info(
            "slack_dispatch_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "slack_dispatch_shutdown_cancelled",
            extra={"cancelled_tasks": len(pending)},
        )
