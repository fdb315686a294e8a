"""Runtime services (telemetry) shared by the engine packages."""

from . import telemetry

__all__ = ["telemetry"]
