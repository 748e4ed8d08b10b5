"""Single robot link described by Denavit-Hartenberg parameters."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

import numpy as np

from serialkin.exceptions import RobotError


class JointType(str, Enum):
    """Kind of joint driving a link."""

    PRISMATIC = "p"
    REVOLUTE = "r"

    def __str__(self) -> str:
        return self.value


def check_lower_higher(lower: float, higher: float) -> None:
    """Raise RobotError if ``lower`` is greater than ``higher``."""
    if lower > higher:
        raise RobotError(
            "[Link] Error in check_lower_higher(lower, higher): lower > higher"
        )


def dh_transform(a: float, alpha: float, d: float, theta: float) -> np.ndarray:
    """Homogeneous 4x4 transform for the given DH parameters."""
    sa, ca = math.sin(alpha), math.cos(alpha)
    st, ct = math.sin(theta), math.cos(theta)
    return np.array(
        [
            [ct, -st * ca, st * sa, a * ct],
            [st, ct * ca, -ct * sa, a * st],
            [0.0, sa, ca, d],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _fmt(value: float) -> str:
    return f"{value:g}"


def _as_limits(limits: Sequence[float]) -> tuple[float, float]:
    lower, higher = (float(v) for v in limits)
    check_lower_higher(lower, higher)
    return lower, higher


class Link(ABC):
    """Abstract link of a serial chain.

    Joint limits are expressed in the robot convention; the joint variable
    passed to :meth:`transform` is in the DH convention.
    """

    def __init__(
        self,
        a: float,
        alpha: float,
        d: float,
        theta: float,
        offset: float = 0.0,
        flip: bool = False,
        hard_limits: Sequence[float] = (-math.inf, math.inf),
        soft_limits: Sequence[float] | None = None,
        hard_velocity_limit: float = math.inf,
        soft_velocity_limit: float | None = None,
        name: str = "joint_no_name",
    ) -> None:
        self.a = float(a)
        self.alpha = float(alpha)
        self._d = float(d)
        self._theta = float(theta)
        self.offset = float(offset)
        self.flip = bool(flip)
        self.hard_limits = hard_limits
        self.soft_limits = hard_limits if soft_limits is None else soft_limits
        self.hard_velocity_limit = hard_velocity_limit
        self.soft_velocity_limit = (
            hard_velocity_limit if soft_velocity_limit is None else soft_velocity_limit
        )
        self.name = name

    # DH parameters that may be the joint variable

    @property
    def d(self) -> float:
        """Link offset."""
        return self._d

    @d.setter
    def d(self, value: float) -> None:
        self._d = float(value)

    @property
    def theta(self) -> float:
        """Link angle."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        self._theta = float(value)

    # Limits

    @property
    def hard_limits(self) -> tuple[float, float]:
        """(lower, higher) hard joint limits in robot convention."""
        return self._hard_limits

    @hard_limits.setter
    def hard_limits(self, limits: Sequence[float]) -> None:
        self._hard_limits = _as_limits(limits)

    @property
    def soft_limits(self) -> tuple[float, float]:
        """(lower, higher) soft joint limits in robot convention."""
        return self._soft_limits

    @soft_limits.setter
    def soft_limits(self, limits: Sequence[float]) -> None:
        self._soft_limits = _as_limits(limits)

    @property
    def hard_velocity_limit(self) -> float:
        """Hard limit on the absolute joint velocity."""
        return self._hard_velocity_limit

    @hard_velocity_limit.setter
    def hard_velocity_limit(self, value: float) -> None:
        if value < 0.0:
            raise RobotError(
                "[Link] Error in hard_velocity_limit: velocity_limit<0.0"
            )
        self._hard_velocity_limit = float(value)

    @property
    def soft_velocity_limit(self) -> float:
        """Soft limit on the absolute joint velocity."""
        return self._soft_velocity_limit

    @soft_velocity_limit.setter
    def soft_velocity_limit(self, value: float) -> None:
        if value < 0.0:
            raise RobotError(
                "[Link] Error in soft_velocity_limit: velocity_limit<0.0"
            )
        self._soft_velocity_limit = float(value)

    # Behaviour

    @property
    @abstractmethod
    def type(self) -> JointType:
        """The joint type of this link."""

    @abstractmethod
    def transform(self, q_dh: float) -> np.ndarray:
        """Link transform matrix for the joint value ``q_dh`` (DH convention)."""

    def clone(self) -> "Link":
        """Return an independent copy of this link."""
        return copy.copy(self)

    def describe(self) -> str:
        """Human-readable summary of the link."""
        soft_lo, soft_hi = self._soft_limits
        hard_lo, hard_hi = self._hard_limits
        return (
            f"Link [{self.name}]\n"
            f"Type: {self.type}\n"
            "Kinematic parameters (DH):\n"
            f"a = {_fmt(self.a)}\n"
            f"alpha = {_fmt(self.alpha)}\n"
            f"theta = {_fmt(self._theta)}\n"
            "Robot2DH Conversion:\n"
            f"offset = {_fmt(self.offset)} | flip = {'yes' if self.flip else 'no'}\n"
            "SoftLimits:\n"
            f"[{_fmt(soft_lo)} | {_fmt(soft_hi)}]\n"
            "HardLimits:\n"
            f"[{_fmt(hard_lo)} | {_fmt(hard_hi)}]\n"
            f"Soft Velocity Limit: {_fmt(self._soft_velocity_limit)}\n"
            f"Hard Velocity Limit: {_fmt(self._hard_velocity_limit)}"
        )

    def display(self) -> None:
        """Print the link summary to standard output."""
        print(self.describe())

    def exceeded_soft_joint_limits(self, q_robot: float) -> bool:
        """True if ``q_robot`` reaches or passes the soft limits."""
        lower, higher = self._soft_limits
        return q_robot <= lower or q_robot >= higher

    def exceeded_hard_joint_limits(self, q_robot: float) -> bool:
        """True if ``q_robot`` reaches or passes the hard limits."""
        lower, higher = self._hard_limits
        return q_robot <= lower or q_robot >= higher

    def exceeded_soft_velocity_limit(self, q_vel: float) -> bool:
        """True if ``|q_vel|`` reaches the soft velocity limit."""
        return abs(q_vel) >= self._soft_velocity_limit

    def exceeded_hard_velocity_limit(self, q_vel: float) -> bool:
        """True if ``|q_vel|`` reaches the hard velocity limit."""
        return abs(q_vel) >= self._hard_velocity_limit

    def joint_robot_to_dh(self, q_robot: float) -> float:
        """Convert a joint value from robot to DH convention."""
        return (-q_robot if self.flip else q_robot) + self.offset

    def joint_dh_to_robot(self, q_dh: float) -> float:
        """Convert a joint value from DH to robot convention."""
        value = q_dh - self.offset
        return -value if self.flip else value

    def jointvel_robot_to_dh(self, q_vel_robot: float) -> float:
        """Convert a joint velocity from robot to DH convention."""
        return -q_vel_robot if self.flip else q_vel_robot

    def jointvel_dh_to_robot(self, q_vel_dh: float) -> float:
        """Convert a joint velocity from DH to robot convention."""
        return -q_vel_dh if self.flip else q_vel_dh