from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, List, Sequence

from loguru import logger

from ..config import require_positive_int
from ..errors import ServiceError, is_service_error
from ..utils.batching import Batch


BatchOperation = Callable[[Batch], Awaitable[List[str]]]
ProgressCallback = Callable[[int, int], None]


class BatchDispatcher:
    """Runs one translation call per batch with at most ``concurrency`` in flight.

    Results are returned in batch order whatever order the calls finish in.
    A batch whose call raises a service error comes back as empty strings;
    any other error cancels the outstanding batches and is re-raised.
    """

    def __init__(self, concurrency: int) -> None:
        require_positive_int("concurrency", concurrency)
        self.concurrency = concurrency

    async def dispatch(
        self,
        batches: Sequence[Batch],
        operation: BatchOperation,
        *,
        progress_cb: ProgressCallback | None = None,
    ) -> List[List[str]]:
        results: List[List[str] | None] = [None] * len(batches)
        if not batches:
            return []

        queue: asyncio.Queue[Batch] = asyncio.Queue()
        for batch in batches:
            queue.put_nowait(batch)

        total = sum(len(batch) for batch in batches)
        done = 0

        async def worker() -> None:
            nonlocal done
            while True:
                try:
                    batch = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                results[batch.index] = await self._run_isolated(batch, operation)
                done += len(batch)
                if progress_cb:
                    progress_cb(done, total)

        workers = [asyncio.create_task(worker()) for _ in range(min(self.concurrency, len(batches)))]
        try:
            await asyncio.gather(*workers)
        except BaseException:
            for task in workers:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            raise

        return [result if result is not None else [""] * len(batch) for result, batch in zip(results, batches)]

    async def _run_isolated(self, batch: Batch, operation: BatchOperation) -> List[str]:
        logger.debug(f"Dispatching batch {batch.index} ({len(batch)} texts)")
        try:
            translations = list(await operation(batch))
            if len(translations) != len(batch):
                raise ServiceError(f"Translator returned {len(translations)} translations for {len(batch)} texts")
        except Exception as exc:
            if not is_service_error(exc):
                raise
            logger.warning(f"Batch {batch.index} failed, substituting {len(batch)} empty translations: {exc}")
            return [""] * len(batch)
        return translations
