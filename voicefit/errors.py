from __future__ import annotations


class VoiceFitError(RuntimeError):
    pass


class NotFoundError(VoiceFitError, LookupError):
    pass


class DuplicateError(VoiceFitError):
    pass


class ActiveWorkoutError(VoiceFitError):
    """Raised when a user already has a workout in progress."""


class WorkoutClosedError(VoiceFitError):
    """Raised when logging into a workout that has been completed."""
