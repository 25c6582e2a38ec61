"""Background spinner loop.

The loop has no handle and no stop signal: it runs while the stack has
tasks and exits on the first tick that finds it empty. The stack clears
its running flag in that same step, so the next begin starts a new loop.
"""

import logging
import threading
import time
from itertools import cycle

from taskline import render
from taskline.config import DisplayConfig
from taskline.stack import TaskStack
from taskline.terminal import Terminal

logger = logging.getLogger(__name__)

THREAD_NAME = "taskline-spinner"


def spin(stack: TaskStack, terminal: Terminal, config: DisplayConfig):
    """Repaint all spinners every ``config.tick_interval`` until the stack empties."""
    frames = cycle(config.frames)
    logger.debug("Spinner loop started")
    try:
        while True:
            frame = next(frames)
            if not stack.tick(lambda offsets: terminal.write(
                    render.tick(offsets, frame, config.indent))):
                break
            # never sleep with the stack locked
            time.sleep(config.tick_interval)
    except Exception:
        # only this loop holds the flag; the next begin starts a fresh one
        stack.abandon_animation()
        logger.debug("Spinner loop crashed", exc_info=True)
        return
    logger.debug("Spinner loop stopped")


def start(stack: TaskStack, terminal: Terminal, config: DisplayConfig) -> threading.Thread:
    """Start the loop on a daemon thread.

    Only call this after ``TaskStack.begin`` asked for it, so the running
    flag is already set.
    """
    thread = threading.Thread(
        target=spin, args=(stack, terminal, config),
        name=THREAD_NAME, daemon=True,
    )
    try:
        thread.start()
    except RuntimeError:
        # e.g. interpreter shutting down; leave the task drawn but static
        stack.abandon_animation()
        logger.debug("Could not start spinner thread", exc_info=True)
    return thread
