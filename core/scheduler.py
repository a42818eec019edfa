"""core/scheduler.py — Tick-based task scheduler.

The host's cooperative scheduler.  Code running inside an event handler
hands zero-argument actions to the scheduler instead of touching the UI
directly; the host calls ``tick()`` once per frame and the queued
actions run then, outside the handler that scheduled them.

    scheduler = TickScheduler()
    scheduler.run_task("shop", view.close)       # runs on the next tick
    ...
    scheduler.tick()

Rules:
  - A task posted during tick N never runs before tick N + 1.
  - Tasks due on the same tick run in posting order.
  - After ``shutdown()`` new tasks are rejected (``run_task`` returns
    ``None``); nothing is raised to the caller.
  - A task that raises is logged and the rest of the tick still runs.
"""

from __future__ import annotations
import heapq
import traceback
from dataclasses import dataclass, field
from typing import Callable

from core import tuning


@dataclass(order=True)
class ScheduledTask:
    """A single action waiting in the scheduler queue.

    Ordered by ``due`` tick, then insertion order.
    """
    due: int
    _seq: int = field(compare=True, repr=False)
    owner: str = field(compare=False, default="")
    action: Callable[[], object] | None = field(compare=False, default=None, repr=False)
    cancelled: bool = field(compare=False, default=False)
    done: bool = field(compare=False, default=False)

    def cancel(self) -> bool:
        """Cancel the task if it has not run yet.  Returns True if cancelled."""
        if self.cancelled or self.done:
            return False
        self.cancelled = True
        return True


class TickScheduler:
    """FIFO-per-tick scheduler owned by the host application."""

    def __init__(self) -> None:
        self._queue: list[ScheduledTask] = []
        self._seq: int = 0
        self._tick: int = 0
        self._shutdown: bool = False
        # Per-owner tracking for bulk cancellation
        self._owner_tasks: dict[str, list[ScheduledTask]] = {}
        # Stats
        self.tasks_run: int = 0
        self.tasks_failed: int = 0
        self.tasks_rejected: int = 0

    # ── Properties ───────────────────────────────────────────────────

    @property
    def current_tick(self) -> int:
        return self._tick

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    # ── Posting tasks ────────────────────────────────────────────────

    def run_task(self, owner: str,
                 action: Callable[[], object]) -> ScheduledTask | None:
        """Run *action* on the next tick.

        Returns the task, or ``None`` if the scheduler no longer accepts
        work.
        """
        return self.run_task_later(owner, action, 1)

    def run_task_later(self, owner: str, action: Callable[[], object],
                       delay_ticks: int) -> ScheduledTask | None:
        """Run *action* ``delay_ticks`` ticks from now (minimum 1)."""
        if not callable(action):
            raise TypeError(f"task action must be callable, got {action!r}")
        if self._shutdown:
            self.tasks_rejected += 1
            if tuning.get("scheduler", "log_rejected", False):
                print(f"[SCHED] rejected task from {owner!r}: scheduler shut down")
            return None
        self._seq += 1
        task = ScheduledTask(
            due=self._tick + max(1, int(delay_ticks)),
            _seq=self._seq,
            owner=owner,
            action=action,
        )
        heapq.heappush(self._queue, task)
        self._owner_tasks.setdefault(owner, []).append(task)
        return task

    # ── Cancellation ─────────────────────────────────────────────────

    def cancel(self, task: ScheduledTask) -> bool:
        """Cancel a single pending task."""
        return task.cancel()

    def cancel_owner(self, owner: str) -> int:
        """Cancel all pending tasks posted by *owner*.  Returns count cancelled."""
        return sum(1 for task in self._owner_tasks.pop(owner, []) if task.cancel())

    # ── Tick ─────────────────────────────────────────────────────────

    def tick(self) -> int:
        """Advance one tick and run every task that is now due.

        Returns the number of tasks run (including ones that raised).
        """
        self._tick += 1
        count = 0

        while self._queue:
            if self._queue[0].cancelled:
                self._forget(heapq.heappop(self._queue))
                continue
            if self._queue[0].due > self._tick:
                break

            task = heapq.heappop(self._queue)
            task.done = True
            self._forget(task)
            count += 1
            try:
                task.action()
            except Exception as exc:
                self.tasks_failed += 1
                print(f"[SCHED] task from {task.owner!r} failed: {exc}")
                traceback.print_exc()

        self.tasks_run += count
        return count

    def shutdown(self) -> int:
        """Stop accepting tasks and drop everything pending.

        Returns the number of tasks that were discarded.
        """
        self._shutdown = True
        dropped = self.pending_count()
        for task in self._queue:
            task.cancelled = True
        self._queue.clear()
        self._owner_tasks.clear()
        return dropped

    def _forget(self, task: ScheduledTask) -> None:
        tasks = self._owner_tasks.get(task.owner)
        if not tasks:
            return
        try:
            tasks.remove(task)
        except ValueError:
            return
        if not tasks:
            del self._owner_tasks[task.owner]

    # ── Queries ──────────────────────────────────────────────────────

    def pending_count(self) -> int:
        """Number of non-cancelled tasks waiting to run."""
        return sum(1 for t in self._queue if not t.cancelled)

    def owner_pending(self, owner: str) -> list[ScheduledTask]:
        """Non-cancelled pending tasks posted by *owner*."""
        return [t for t in self._owner_tasks.get(owner, []) if not t.cancelled]

    # ── Debug ────────────────────────────────────────────────────────

    def debug_dump(self, limit: int = 20) -> list[str]:
        """Return a human-readable list of the next N tasks."""
        tasks = sorted(t for t in self._queue if not t.cancelled)[:limit]
        return [
            f"tick {t.due}  owner={t.owner}  {getattr(t.action, '__qualname__', t.action)!s}"
            for t in tasks
        ]

    def __repr__(self) -> str:
        return (f"TickScheduler(tick={self._tick}, pending={self.pending_count()}, "
                f"shutdown={self._shutdown})")
