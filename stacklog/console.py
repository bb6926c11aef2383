"""Console mirror for formatted log lines."""

import sys
from typing import Optional, TextIO


class ConsoleSink:
    """Write each line to a stream, stdout by default.

    With no explicit stream the current sys.stdout is looked up on every
    write, so redirection after construction is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str):
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + '\n')
        if hasattr(stream, 'flush'):
            stream.flush()
