"""Default values for the planar demonstration program."""

from __future__ import annotations

DEFAULT_START_X = 12.0
DEFAULT_START_Y = 13.0
DEFAULT_FORWARD = 200.0
DEFAULT_BACKWARD = 100.0
DEFAULT_PIVOT_X = 20.0
DEFAULT_PIVOT_Y = 10.0
DEFAULT_LOG_LEVEL = "INFO"
