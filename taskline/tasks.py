"""Public task API: begin a task, end the innermost one with an outcome."""

import threading
from contextlib import contextmanager
from enum import Enum

from taskline import animation, render
from taskline.config import DisplayConfig, load_config
from taskline.stack import Pop, Push, TaskStack
from taskline.terminal import Terminal


class Outcome(Enum):
    SUCCESS = "\x1b[32;1m✔\x1b[0m"
    WARNING = "\x1b[33;1m⚠\x1b[0m"
    FAILURE = "\x1b[31;1m𝕩\x1b[0m"

    @property
    def glyph(self) -> str:
        return self.value


class TaskDisplay:
    """A nested stack of spinner lines drawn on one terminal stream."""

    def __init__(self, stream=None, config: DisplayConfig | None = None):
        self.config = config or DisplayConfig()
        self.terminal = Terminal(stream)
        self.stack = TaskStack()

    def start(self, message: str) -> Push:
        """Draw a new in-progress line nested under the current task."""
        def draw(push):
            self.terminal.write(render.begin(push, message, self.config.indent))

        push = self.stack.begin(draw, animate=self.config.animate)
        if push.start_animation:
            animation.start(self.stack, self.terminal, self.config)
        return push

    def end(self, outcome: Outcome, message: str) -> Pop | None:
        """Resolve the innermost task. With no task open, print a plain line."""
        def draw(pop):
            if pop is None:
                self.terminal.write(render.orphan_end(outcome.glyph, message))
            else:
                self.terminal.write(render.end(pop, outcome.glyph, message, self.config.indent))

        return self.stack.end(draw)

    def succeed(self, message: str) -> Pop | None:
        return self.end(Outcome.SUCCESS, message)

    def warn(self, message: str) -> Pop | None:
        return self.end(Outcome.WARNING, message)

    def fail(self, message: str) -> Pop | None:
        return self.end(Outcome.FAILURE, message)

    @contextmanager
    def task(self, message: str, done: str | None = None):
        """Run a block as a task: success on exit, failure (then re-raise) on error."""
        self.start(message)
        try:
            yield self
        except BaseException as e:
            self.fail(f"{message}: {e}" if str(e) else message)
            raise
        self.succeed(done if done is not None else message)

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def animating(self) -> bool:
        return self.stack.animating

    def offsets(self) -> list[int]:
        return self.stack.offsets()


_display = None
_display_lock = threading.Lock()


def get_display() -> TaskDisplay:
    """Return the process-wide display used by the module-level helpers.

    Built on first use from ``load_config()``, so ``$TASKLINE_CONFIG``
    applies to it.
    """
    global _display
    with _display_lock:
        if _display is None:
            _display = TaskDisplay(config=load_config())
        return _display


def _format(message: str, args, kwargs) -> str:
    if args or kwargs:
        return message.format(*args, **kwargs)
    return message


def start(message: str, *args, **kwargs):
    """Begin a task; extra arguments are applied with ``str.format``."""
    get_display().start(_format(message, args, kwargs))


def succeed(message: str, *args, **kwargs):
    get_display().succeed(_format(message, args, kwargs))


def warn(message: str, *args, **kwargs):
    get_display().warn(_format(message, args, kwargs))


def fail(message: str, *args, **kwargs):
    get_display().fail(_format(message, args, kwargs))


def task(message: str, done: str | None = None):
    return get_display().task(message, done)
