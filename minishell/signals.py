"""Interactive signal handling: Ctrl+C gives a fresh prompt, Ctrl+\\ is ignored."""

from __future__ import annotations

import signal
import sys
from types import FrameType

_INTERRUPTED_STATUS = 130

_exit_status = 0


def handle_sigint(signum: int, frame: FrameType | None) -> None:
    """Move to a new line and record the interrupted exit status."""
    global _exit_status
    sys.stdout.write("\n")
    sys.stdout.flush()
    _exit_status = _INTERRUPTED_STATUS


def init_signals() -> None:
    """Install the SIGINT handler and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, handle_sigint)
    if hasattr(signal, "siginterrupt"):
        signal.siginterrupt(signal.SIGINT, False)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def exit_status() -> int:
    """The exit status last recorded by the signal handler."""
    return _exit_status