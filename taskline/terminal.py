"""Best-effort output sink for the task display."""

import logging
import sys

logger = logging.getLogger(__name__)


class Terminal:
    """Writes escape sequences to a text stream and flushes immediately.

    Most task output has no trailing newline, so line buffering never
    flushes it on its own. Any failure is logged and dropped: progress
    feedback must never take the caller down.
    """

    def __init__(self, stream=None):
        self._stream = stream

    @property
    def stream(self):
        # Resolve sys.stdout late so redirection after import is honored
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str):
        if not text:
            return
        stream = self.stream
        try:
            stream.write(text)
            stream.flush()
        except Exception as e:
            # closed stream, broken pipe, binary stream, ...
            logger.debug("Terminal write failed: %r", e)
