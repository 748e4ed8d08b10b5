"""Exceptions raised by the kinematics package."""


class RobotError(RuntimeError):
    """Base error for invalid robot models, parameters or operations."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class ExceededJointLimits(RobotError):
    """Raised when a joint configuration violates the joint limits."""