"""Tests for the cancellation token and the signal watcher."""

import os
import signal
import sys
import threading
import time

import pytest

from git_audit.audit.services.cancellation import CancellationToken, SignalWatcher


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestCancellationToken:
    """Test the single-shot flag."""

    def test_starts_untriggered(self):
        assert CancellationToken().is_triggered is False

    def test_trigger_only_flips_once(self):
        token = CancellationToken()

        assert token.trigger() is True
        assert token.trigger() is False
        assert token.is_triggered is True

    def test_concurrent_triggers_flip_once(self):
        token = CancellationToken()
        results = []
        threads = [threading.Thread(target=lambda: results.append(token.trigger())) for _ in range(8)]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 1


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
class TestSignalWatcher:
    """Test that termination requests trigger the token cooperatively."""

    @pytest.mark.parametrize("signum", [signal.SIGINT, signal.SIGTERM])
    def test_signal_triggers_token(self, signum, capsys):
        token = CancellationToken()

        with SignalWatcher(token):
            os.kill(os.getpid(), signum)
            assert _wait_for(lambda: token.is_triggered)
            # Give the watcher a moment to finish printing
            time.sleep(0.05)

        assert capsys.readouterr().out.count("Ctrl+C received. Shutting down gracefully...") == 1

    def test_second_signal_has_no_additional_effect(self, capsys):
        token = CancellationToken()

        with SignalWatcher(token):
            os.kill(os.getpid(), signal.SIGINT)
            assert _wait_for(lambda: token.is_triggered)
            os.kill(os.getpid(), signal.SIGINT)
            time.sleep(0.1)

        assert token.is_triggered is True
        assert capsys.readouterr().out.count("Ctrl+C received") == 1

    def test_close_restores_previous_handlers(self):
        previous = signal.getsignal(signal.SIGTERM)
        watcher = SignalWatcher(CancellationToken())

        watcher.install()
        assert signal.getsignal(signal.SIGTERM) is not previous
        watcher.close()

        assert signal.getsignal(signal.SIGTERM) is previous
