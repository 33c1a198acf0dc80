"""Concurrent fan-out for bulk product actions with per-id accounting."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from src.models.product import ProductId
from src.services.api_client import InventoryAPIError

logger = logging.getLogger(__name__)


@dataclass
class BulkResult:
    """Outcome of one bulk gesture: which ids succeeded, which failed and why."""

    succeeded: list[ProductId] = field(default_factory=list)
    failed: dict[ProductId, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed

    def summary(self, verb: str) -> str:
        """e.g. ``"Deleted 3 of 4 products (1 failed)."``"""
        noun = "product" if self.total == 1 else "products"
        if self.ok:
            return f"{verb} {len(self.succeeded)} {noun}."
        return (
            f"{verb} {len(self.succeeded)} of {self.total} {noun} "
            f"({len(self.failed)} failed)."
        )


async def run_bulk(ids: Iterable[ProductId], action: Callable[[ProductId], object]) -> BulkResult:
    """Run the blocking *action* for every id concurrently and wait for all.

    Each call runs in the default executor. API errors are collected per id
    instead of aborting the batch.
    """
    ids = list(ids)
    loop = asyncio.get_event_loop()
    outcomes = await asyncio.gather(
        *(loop.run_in_executor(None, action, pid) for pid in ids),
        return_exceptions=True,
    )

    result = BulkResult()
    for pid, outcome in zip(ids, outcomes):
        if isinstance(outcome, InventoryAPIError):
            logger.error("Bulk action failed for product %s: %s", pid, outcome)
            result.failed[pid] = str(outcome)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            result.succeeded.append(pid)
    return result
