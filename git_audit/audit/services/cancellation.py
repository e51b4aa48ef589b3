"""Cooperative cancellation of an audit run.

Termination requests (SIGINT, SIGTERM) never interrupt the pipeline directly.
The Python-level signal handler does nothing; the interpreter's wakeup fd
forwards the signal number to a dedicated watcher thread, which acknowledges
the request and triggers a CancellationToken. The pipeline polls the token at
its checkpoints, so in-flight git or HTTP calls always run to completion.
"""

import signal
import socket
import threading
from types import FrameType


class CancellationToken:
    """Single-shot flag shared between the signal watcher and the pipeline."""

    def __init__(self) -> None:
        self._triggered = False
        self._lock = threading.Lock()

    @property
    def is_triggered(self) -> bool:
        with self._lock:
            return self._triggered

    def trigger(self) -> bool:
        """
        Set the flag.

        Returns:
            True if this call flipped the flag, False if it was already set
        """
        with self._lock:
            if self._triggered:
                return False
            self._triggered = True
            return True


class SignalWatcher:
    """Triggers a CancellationToken when the process is asked to terminate."""

    SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

    def __init__(
        self,
        token: CancellationToken,
        signals: tuple[signal.Signals, ...] | None = None,
    ) -> None:
        """
        Initialize the watcher.

        Args:
            token: Token to trigger on the first termination request
            signals: Signals to observe. Defaults to SIGINT and SIGTERM
        """
        self._token = token
        self._signals = signals or self.SIGNALS
        self._previous_handlers: dict[signal.Signals, object] = {}
        self._previous_wakeup_fd = -1
        self._reader: socket.socket | None = None
        self._writer: socket.socket | None = None
        self._thread: threading.Thread | None = None

    def install(self) -> None:
        """Register the signal handlers and start the watcher thread.

        Must be called from the main thread.
        """
        if self._thread is not None:
            return

        self._reader, self._writer = socket.socketpair()
        self._writer.setblocking(False)
        self._previous_wakeup_fd = signal.set_wakeup_fd(self._writer.fileno())
        for signum in self._signals:
            self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)

        self._thread = threading.Thread(
            target=self._watch, name="gitaudit-signal-watcher", daemon=True
        )
        self._thread.start()

    def close(self) -> None:
        """Restore the previous handlers and stop the watcher thread."""
        if self._thread is None:
            return

        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)  # type: ignore[arg-type]
        self._previous_handlers.clear()
        signal.set_wakeup_fd(self._previous_wakeup_fd)

        # Closing the write end makes recv() in the watcher return b""
        if self._writer is not None:
            self._writer.close()
        self._thread.join(timeout=1.0)
        if self._reader is not None:
            self._reader.close()

        self._thread = None
        self._reader = None
        self._writer = None

    def __enter__(self) -> "SignalWatcher":
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @staticmethod
    def _handle_signal(signum: int, frame: FrameType | None) -> None:
        """No-op: the wakeup fd already carries the signal to the watcher."""

    def _watch(self) -> None:
        """Wait for signal numbers on the wakeup socket and trigger the token."""
        reader = self._reader
        assert reader is not None
        while True:
            try:
                data = reader.recv(1)
            except OSError:
                return
            if not data:
                return
            if self._token.trigger():
                print("\nCtrl+C received. Shutting down gracefully...")
