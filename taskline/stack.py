"""Shared stack of in-progress tasks.

Thread safety: every public method takes the stack's lock. Callers that
need to write to the terminal in step with a mutation pass a ``render``
callback, which runs while the lock is still held so that a push or pop
and its escape sequences can never interleave with an animation tick.

The "animation running" flag lives under the same lock. Deciding whether
to spawn a loop and the loop deciding to stop are therefore one atomic
step each, and at most one loop can be alive.
"""

import threading
from dataclasses import dataclass
from typing import Callable


@dataclass
class TaskRecord:
    """One active task; ``row_offset`` is how many rows it sits above the cursor."""
    row_offset: int = 0


@dataclass(frozen=True)
class Push:
    """Result of beginning a task."""
    prior_count: int
    prior_last_offset: int | None  # predecessor's offset *after* the increment
    start_animation: bool = False

    @property
    def depth(self) -> int:
        return self.prior_count + 1


@dataclass(frozen=True)
class Pop:
    """Result of ending the innermost task."""
    row_offset: int
    remaining: int


class TaskStack:
    """Ordered records of active tasks, outermost first."""

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks = []  # List of TaskRecord
        self._animating = False

    def begin(self, render: Callable[[Push], None] | None = None,
              animate: bool = True) -> Push:
        """Push a new innermost task with offset 0.

        Every existing task moves one row further from the cursor. If
        ``animate`` is set and no loop is running, the returned Push has
        ``start_animation`` set and the caller must start one.
        """
        with self._lock:
            for task in self._tasks:
                task.row_offset += 1
            prior_last = self._tasks[-1].row_offset if self._tasks else None
            push = Push(
                prior_count=len(self._tasks),
                prior_last_offset=prior_last,
                start_animation=animate and not self._animating,
            )
            self._tasks.append(TaskRecord())
            if render is not None:
                render(push)
            # raise the flag only once drawing succeeded
            if push.start_animation:
                self._animating = True
            return push

    def end(self, render: Callable[[Pop | None], None] | None = None) -> Pop | None:
        """Pop the innermost task. Returns None if nothing was active."""
        with self._lock:
            pop = None
            if self._tasks:
                task = self._tasks.pop()
                pop = Pop(row_offset=task.row_offset, remaining=len(self._tasks))
            if render is not None:
                render(pop)
            return pop

    def tick(self, render: Callable[[list[int]], None]) -> bool:
        """Run one animation step.

        Calls ``render`` with the current offsets (outermost first) and
        returns True, or, if the stack is empty, clears the running flag
        and returns False. The loop must exit after a False.
        """
        with self._lock:
            if not self._tasks:
                self._animating = False
                return False
            render([task.row_offset for task in self._tasks])
            return True

    def abandon_animation(self):
        """Clear the running flag after a loop failed to start or crashed."""
        with self._lock:
            self._animating = False

    def offsets(self) -> list[int]:
        with self._lock:
            return [task.row_offset for task in self._tasks]

    @property
    def animating(self) -> bool:
        with self._lock:
            return self._animating

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
