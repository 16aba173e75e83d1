"""
Shared constants for the armik package.

Tolerances used by the vector algebra and the solver, plus the demo arm
geometry and goal sweep used by ``run_ik.py``.
"""

from __future__ import annotations

from typing import Tuple

# ---------------------------------------------------------------------------
# Numerical tolerances
# ---------------------------------------------------------------------------
# Cross-product magnitude below which two vectors count as parallel, and the
# per-component tolerance for approximate vector equality.
PARALLEL_TOLERANCE: float = 1e-5

# Magnitude at or below which a vector has no usable direction.
ZERO_TOLERANCE: float = 1e-12

# ---------------------------------------------------------------------------
# Demo arm (lengths in millimetres)
# ---------------------------------------------------------------------------
DEFAULT_UPPER_LENGTH: float = 100.0
DEFAULT_LOWER_LENGTH: float = 100.0
DEFAULT_MIN_DISTANCE: float = 25.0

# ---------------------------------------------------------------------------
# Demo sweep: goal.y runs from -200 to -100 in 101 samples
# ---------------------------------------------------------------------------
DEFAULT_TWIST_DEG: float = 45.0
DEFAULT_GOAL: Tuple[float, float, float] = (25.0, -100.0, 50.0)
DEFAULT_SWEEP_AXIS: str = "y"
DEFAULT_SWEEP_START: float = -200.0
DEFAULT_SWEEP_STOP: float = -100.0
DEFAULT_SWEEP_STEPS: int = 101
