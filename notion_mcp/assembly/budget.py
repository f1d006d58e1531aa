"""
Assembly - Call Budget

Per-request ceiling on outbound Notion API calls.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from notion_mcp.errors import BudgetExceeded


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_CALLS = 45


class CallBudget:
    """
    Counts guarded remote calls for one request.

    Every remote call made while assembling a page goes through guard(),
    so the aggregate count decides when to stop. Calls are awaited one
    at a time, so the counter needs no lock.
    """

    def __init__(self, max_calls: int = DEFAULT_MAX_CALLS):
        self.max_calls = max_calls
        self.calls = 0

    @property
    def remaining(self) -> int:
        return max(self.max_calls - self.calls, 0)

    def has_capacity(self) -> bool:
        return self.calls < self.max_calls

    def reset(self) -> None:
        self.calls = 0

    async def guard(self, operation: Callable[[], Awaitable[T]], label: str) -> T:
        """
        Run operation if the budget allows it.

        Args:
            operation: Zero-argument coroutine function making the remote call
            label: Describes the call, e.g. "while fetching initial page"

        Returns:
            Whatever operation returns; its exceptions propagate unchanged

        Raises:
            BudgetExceeded: The ceiling was already reached; operation is not run
        """
        if self.calls >= self.max_calls:
            logger.warning(f"Call budget of {self.max_calls} exhausted {label}")
            raise BudgetExceeded(label)

        self.calls += 1
        logger.debug(f"API call {self.calls}/{self.max_calls} {label}")
        return await operation()
