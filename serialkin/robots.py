"""Kinematic models of specific industrial manipulators."""

from __future__ import annotations

import math

import numpy as np

from serialkin.joints import Revolute
from serialkin.serial_link import SerialLink

FRANKA_EMIKA_PANDA_MODEL = "FrankaEmikaPanda"
LBRIIWA7_MODEL = "LBRiiwa7"
MOTOMANSIA5F_MODEL = "MotomanSIA5F"

_HALF_PI = math.pi / 2.0


def _base_translation(z: float) -> np.ndarray:
    frame = np.eye(4)
    frame[2, 3] = z
    return frame


class FrankaEmikaPanda(SerialLink):
    """Franka Emika Panda, 7 revolute joints.

    The velocity limits depend on the configuration; only constant bounds
    are modelled here.
    """

    def __init__(
        self, n_T_e: np.ndarray | None = None, name: str = "PANDA_NO_NAME"
    ) -> None:
        super().__init__(
            b_T_0=_base_translation(0.333),
            n_T_e=n_T_e,
            name=name,
            model=FRANKA_EMIKA_PANDA_MODEL,
        )
        # (a, alpha, d, hard_limits, hard_velocity_limit, name)
        table = (
            (0.0, -_HALF_PI, 0.0, (-2.8973, 2.8973), 2.1750, "P1"),
            (0.0, _HALF_PI, 0.0, (-1.7628, 1.7628), 2.1750, "P2"),
            (0.0825, _HALF_PI, 0.316, (-2.8973, 2.8973), 2.1750, "P3"),
            (-0.0825, -_HALF_PI, 0.0, (-3.0718, -0.0698), 2.1750, "P4"),
            (0.0, _HALF_PI, 0.384, (-2.8973, 2.8973), 2.61, "P5"),
            (0.088, _HALF_PI, 0.0, (-0.0175, 3.7525), 2.61, "P6"),
            (0.0, 0.0, 0.107, (-2.8973, 2.8973), 2.61, "P7"),
        )
        for a, alpha, d, limits, velocity, joint in table:
            self.append_link(
                Revolute(
                    a,
                    alpha,
                    d,
                    hard_limits=limits,
                    hard_velocity_limit=velocity,
                    name=joint,
                )
            )


class LBRiiwa7(SerialLink):
    """KUKA LBR iiwa 7 R800, 7 revolute joints."""

    def __init__(
        self, n_T_e: np.ndarray | None = None, name: str = "IIWA7_NO_NAME"
    ) -> None:
        super().__init__(
            b_T_0=_base_translation(0.340),
            n_T_e=n_T_e,
            name=name,
            model=LBRIIWA7_MODEL,
        )
        deg120 = math.radians(120.0)
        deg170 = math.radians(170.0)
        deg175 = math.radians(175.0)
        # (a, alpha, d, flip, limit, hard_velocity_limit, name)
        table = (
            (0.0, -_HALF_PI, 0.0, False, deg170, 1.71, "A1"),
            (0.0, _HALF_PI, 0.0, False, deg120, 1.71, "A2"),
            (0.0, -_HALF_PI, 0.400, False, deg170, 1.74, "A3"),
            (0.0, _HALF_PI, 0.0, True, deg120, 2.26, "A4"),
            (0.0, -_HALF_PI, 0.400, False, deg170, 2.44, "A5"),
            (0.0, _HALF_PI, 0.0, False, deg120, 3.14, "A6"),
            (0.0, 0.0, 0.126, False, deg175, 3.14, "A7"),
        )
        for a, alpha, d, flip, limit, velocity, joint in table:
            self.append_link(
                Revolute(
                    a,
                    alpha,
                    d,
                    flip=flip,
                    hard_limits=(-limit, limit),
                    hard_velocity_limit=velocity,
                    name=joint,
                )
            )


class MotomanSIA5F(SerialLink):
    """Yaskawa Motoman SIA5F, 7 revolute joints."""

    def __init__(
        self, n_T_e: np.ndarray | None = None, name: str = "SIA5F_NO_NAME"
    ) -> None:
        super().__init__(
            b_T_0=_base_translation(0.3095),
            n_T_e=n_T_e,
            name=name,
            model=MOTOMANSIA5F_MODEL,
        )
        pi = math.pi
        deg110 = math.radians(110.0)
        deg170 = math.radians(170.0)
        v200 = math.radians(200.0)
        # (a, alpha, d, offset, flip, hard_limits, hard_velocity_limit, name)
        table = (
            (0.0, -_HALF_PI, 0.0, 0.0, False, (-pi, pi), v200, "S"),
            (0.0, _HALF_PI, 0.0, 0.0, False, (-deg110, deg110), v200, "L"),
            (0.085, _HALF_PI, 0.27, 0.0, False, (-deg170, deg170), v200, "E"),
            (
                0.06,
                _HALF_PI,
                0.0,
                _HALF_PI,
                False,
                (-_HALF_PI, math.radians(115.0)),
                v200,
                "U",
            ),
            (0.0, -_HALF_PI, 0.27, 0.0, True, (-pi, pi), v200, "R"),
            (
                0.0,
                _HALF_PI,
                0.0,
                0.0,
                False,
                (-deg110, deg110),
                math.radians(230.0),
                "B",
            ),
            (0.0, 0.0, 0.148, 0.0, True, (-pi, pi), math.radians(350.0), "T"),
        )
        for a, alpha, d, offset, flip, limits, velocity, joint in table:
            self.append_link(
                Revolute(
                    a,
                    alpha,
                    d,
                    offset=offset,
                    flip=flip,
                    hard_limits=limits,
                    hard_velocity_limit=velocity,
                    name=joint,
                )
            )