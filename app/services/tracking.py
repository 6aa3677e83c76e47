"""
Simulated live progress for the order tracking view.

The tracking screen pretends the order moves forward one step every tick
until it shows ``delivered``. This is display state only: nothing here reads
from or writes to the stored order. A real status update is fed in through
``TrackingSimulation.sync`` and only ever moves the display forward.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Union
from app.core.config import TRACKING_TICK_SECONDS
from app.models.order import OrderStatus
from app.services.order_state import ORDER_FLOW, STATUS_DISPLAY

log = logging.getLogger("tracking")

LAST_STEP = len(ORDER_FLOW) - 1


def _step_of(status: OrderStatus) -> int:
    return ORDER_FLOW.index(status)


def simulated_status(
    status: Union[OrderStatus, str],
    elapsed_seconds: float,
    interval: int = TRACKING_TICK_SECONDS,
) -> OrderStatus:
    """Status the tracking view shows ``elapsed_seconds`` after it opened on ``status``."""
    status = OrderStatus(status)
    if status == OrderStatus.CANCELLED:
        return status
    ticks = int(max(elapsed_seconds, 0) // interval) if interval > 0 else 0
    return ORDER_FLOW[min(_step_of(status) + ticks, LAST_STEP)]


def tracking_steps(display: Union[OrderStatus, str]) -> List[Dict[str, object]]:
    """One entry per step of the flow, flagged done/current for ``display``."""
    display = OrderStatus(display)
    current = _step_of(display) if display != OrderStatus.CANCELLED else -1
    return [
        {
            "status": status.value,
            "label": STATUS_DISPLAY[status].label,
            "icon": STATUS_DISPLAY[status].icon,
            "done": index <= current,
            "current": index == current,
        }
        for index, status in enumerate(ORDER_FLOW)
    ]


class TrackingSimulation:
    """
    Per-view ticker. ``start()`` it when the tracking view opens and
    ``cancel()`` it when the view goes away.
    """

    def __init__(self, status: Union[OrderStatus, str], interval: float = TRACKING_TICK_SECONDS):
        status = OrderStatus(status)
        self.interval = interval
        self.cancelled = status == OrderStatus.CANCELLED
        self.index = 0 if self.cancelled else _step_of(status)
        self._task: Optional[asyncio.Task] = None

    @property
    def display_status(self) -> OrderStatus:
        if self.cancelled:
            return OrderStatus.CANCELLED
        return ORDER_FLOW[self.index]

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> OrderStatus:
        if not self.cancelled and self.index < LAST_STEP:
            self.index += 1
        return self.display_status

    def sync(self, status: Union[OrderStatus, str]) -> OrderStatus:
        """Applies a real status update; the display never moves backwards."""
        status = OrderStatus(status)
        if status == OrderStatus.CANCELLED:
            self.cancelled = True
            self.cancel()
        elif not self.cancelled:
            self.index = max(self.index, _step_of(status))
        return self.display_status

    async def _run(self):
        while not self.cancelled and self.index < LAST_STEP:
            await asyncio.sleep(self.interval)
            self.tick()
        log.debug(f"Tracking simulation finished at {self.display_status.value}")

    def start(self) -> asyncio.Task:
        if not self.running:
            self._task = asyncio.create_task(self._run())
        return self._task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
