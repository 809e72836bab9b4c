"""Runtime services shared by the buffer, keymaps, and adapters."""

from . import telemetry

__all__ = ["telemetry"]
