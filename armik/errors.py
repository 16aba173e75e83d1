"""
Exception types raised by the armik package.

Every error derives from ``ArmIKError``, itself a ``ValueError``, because
each one signals an argument the solver cannot work with.  Nothing here is
retryable: the computation is pure, so the same inputs fail the same way.

Classes:
    ArmIKError: Base class for all package errors.
    InvalidGeometry: Arm dimensions violate the geometry invariants.
    DegenerateVector: A (near) zero vector has no direction to normalise.
    DegenerateGoal: The commanded goal is the zero vector.
"""


class ArmIKError(ValueError):
    """Base class for errors raised by armik."""


class InvalidGeometry(ArmIKError):
    """Raised when link lengths or the minimum distance are inconsistent."""


class DegenerateVector(ArmIKError):
    """Raised when normalising a vector whose magnitude is (near) zero."""


class DegenerateGoal(ArmIKError):
    """Raised when the goal sits on the shoulder, leaving no direction."""
