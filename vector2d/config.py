"""Default configuration values for vector2d."""

from __future__ import annotations

DEFAULT_X = 0.0
DEFAULT_Y = 0.0

# Absolute tolerance used by Vector2D.is_close.
DEFAULT_ABS_TOL = 1e-9

# Digits printed by the CLI.
DEFAULT_PRECISION = 6
