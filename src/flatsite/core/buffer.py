"""Stack of in-memory output buffers.

Each render phase pushes a buffer, streams its output into it, and pops
it to capture the text. Only the innermost buffer receives writes.
"""

from io import StringIO


class OutputBuffers:
    """Explicit output buffer stack for one request."""

    def __init__(self) -> None:
        self._stack: list[StringIO] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self) -> None:
        """Open a fresh buffer on top of the stack."""
        self._stack.append(StringIO())

    def write(self, text: str) -> None:
        """Append text to the active buffer.

        Raises:
            RuntimeError: If no buffer is open
        """
        if not self._stack:
            raise RuntimeError("No output buffer is open")
        self._stack[-1].write(text)

    def pop(self) -> str:
        """Close the active buffer and return its contents.

        Raises:
            RuntimeError: If no buffer is open
        """
        if not self._stack:
            raise RuntimeError("No output buffer is open")
        return self._stack.pop().getvalue()

    def discard(self) -> None:
        """Drop every open buffer and its contents."""
        self._stack.clear()
