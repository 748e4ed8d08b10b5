"""Concrete prismatic and revolute links."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from serialkin.exceptions import RobotError
from serialkin.link import JointType, Link, dh_transform


class Prismatic(Link):
    """Link driven by a prismatic joint: the DH offset ``d`` is the joint variable."""

    def __init__(
        self,
        a: float,
        alpha: float,
        theta: float,
        offset: float = 0.0,
        flip: bool = False,
        hard_limits: Sequence[float] = (-math.inf, math.inf),
        soft_limits: Sequence[float] | None = None,
        hard_velocity_limit: float = math.inf,
        soft_velocity_limit: float | None = None,
        name: str = "joint_no_name",
    ) -> None:
        super().__init__(
            a,
            alpha,
            math.nan,
            theta,
            offset=offset,
            flip=flip,
            hard_limits=hard_limits,
            soft_limits=soft_limits,
            hard_velocity_limit=hard_velocity_limit,
            soft_velocity_limit=soft_velocity_limit,
            name=name,
        )

    @property
    def d(self) -> float:
        """Always NaN: ``d`` is the joint variable of a prismatic link."""
        return math.nan

    @d.setter
    def d(self, value: float) -> None:
        raise RobotError("[Prismatic] Error in setting d: Cannot set d for Prismatic")

    @property
    def type(self) -> JointType:
        """Always :attr:`JointType.PRISMATIC`."""
        return JointType.PRISMATIC

    def transform(self, q_dh: float) -> np.ndarray:
        """Link transform with ``q_dh`` as the DH offset."""
        return dh_transform(self.a, self.alpha, q_dh, self._theta)


class Revolute(Link):
    """Link driven by a revolute joint: the DH angle ``theta`` is the joint variable."""

    def __init__(
        self,
        a: float,
        alpha: float,
        d: float,
        offset: float = 0.0,
        flip: bool = False,
        hard_limits: Sequence[float] = (-math.inf, math.inf),
        soft_limits: Sequence[float] | None = None,
        hard_velocity_limit: float = math.inf,
        soft_velocity_limit: float | None = None,
        name: str = "joint_no_name",
    ) -> None:
        super().__init__(
            a,
            alpha,
            d,
            math.nan,
            offset=offset,
            flip=flip,
            hard_limits=hard_limits,
            soft_limits=soft_limits,
            hard_velocity_limit=hard_velocity_limit,
            soft_velocity_limit=soft_velocity_limit,
            name=name,
        )

    @property
    def theta(self) -> float:
        """Always NaN: ``theta`` is the joint variable of a revolute link."""
        return math.nan

    @theta.setter
    def theta(self, value: float) -> None:
        raise RobotError(
            "[Revolute] Error in setting theta: Cannot set theta for Revolute"
        )

    @property
    def type(self) -> JointType:
        """Always :attr:`JointType.REVOLUTE`."""
        return JointType.REVOLUTE

    def transform(self, q_dh: float) -> np.ndarray:
        """Link transform with ``q_dh`` as the DH angle."""
        return dh_transform(self.a, self.alpha, self._d, q_dh)


def is_prismatic(link: Link) -> bool:
    """True if ``link`` is driven by a prismatic joint."""
    return link.type == JointType.PRISMATIC


def is_revolute(link: Link) -> bool:
    """True if ``link`` is driven by a revolute joint."""
    return link.type == JointType.REVOLUTE