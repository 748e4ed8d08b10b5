"""Geometric Jacobians of a serial chain."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from serialkin.exceptions import RobotError
from serialkin.link import JointType
from serialkin.serial_link import SerialLink


def _all_transforms(
    robot: SerialLink,
    q_dh: Sequence[float],
    n_joint: int | None,
    j_T_f: np.ndarray | None,
) -> list[np.ndarray]:
    all_T = robot.fkine_all(q_dh, n_joint)
    if j_T_f is not None:
        frame = np.asarray(j_T_f, dtype=float)
        if frame.shape != (4, 4):
            raise ValueError(
                f"homogeneous transform must be 4x4, got shape {frame.shape}"
            )
        all_T[-1] = all_T[-1] @ frame
    return all_T


def _check_transforms(robot: SerialLink, all_T: list[np.ndarray], where: str) -> int:
    if not all_T or len(all_T) > robot.num_joints + 1:
        raise ValueError(f"{where}: invalid input size {len(all_T)}")
    return len(all_T) - 1


def _jacob_p_internal(robot: SerialLink, all_T: list[np.ndarray]) -> np.ndarray:
    num_q = _check_transforms(robot, all_T, "jacob_p_internal")
    p_e = all_T[-1][:3, 3]
    columns = []
    for i, (link, b_T_i) in enumerate(zip(robot.links[:num_q], all_T)):
        z_axis = b_T_i[:3, 2]
        if link.type == JointType.PRISMATIC:
            columns.append(z_axis.copy())
        elif link.type == JointType.REVOLUTE:
            columns.append(np.cross(z_axis, p_e - b_T_i[:3, 3]))
        else:
            raise RobotError(
                f"jacob_p_internal: invalid joint type: links[{i}].type={link.type}"
            )
    if not columns:
        return np.zeros((3, 0))
    return np.column_stack(columns)


def _jacob_o_geometric_internal(
    robot: SerialLink, all_T: list[np.ndarray]
) -> np.ndarray:
    num_q = _check_transforms(robot, all_T, "jacob_o_geometric_internal")
    columns = []
    for i, (link, b_T_i) in enumerate(zip(robot.links[:num_q], all_T)):
        if link.type == JointType.PRISMATIC:
            columns.append(np.zeros(3))
        elif link.type == JointType.REVOLUTE:
            columns.append(b_T_i[:3, 2].copy())
        else:
            raise RobotError(
                "jacob_o_geometric_internal: invalid joint type: "
                f"links[{i}].type={link.type}"
            )
    if not columns:
        return np.zeros((3, 0))
    return np.column_stack(columns)


def jacob_p(
    robot: SerialLink,
    q_dh: Sequence[float],
    n_joint: int | None = None,
    j_T_f: np.ndarray | None = None,
) -> np.ndarray:
    """Position part (3xN) of the Jacobian of frame {f} w.r.t. the base frame.

    The first ``n_joint`` joints are used; ``n_joint`` equal to
    ``num_joints + 1`` (the default) takes the end-effector as the last frame.
    ``j_T_f`` is the pose of {f} in that last frame.
    """
    return _jacob_p_internal(robot, _all_transforms(robot, q_dh, n_joint, j_T_f))


def jacob_o_geometric(
    robot: SerialLink,
    q_dh: Sequence[float],
    n_joint: int | None = None,
    j_T_f: np.ndarray | None = None,
) -> np.ndarray:
    """Orientation part (3xN) of the geometric Jacobian w.r.t. the base frame."""
    return _jacob_o_geometric_internal(
        robot, _all_transforms(robot, q_dh, n_joint, j_T_f)
    )


def jacob_geometric(
    robot: SerialLink,
    q_dh: Sequence[float],
    n_joint: int | None = None,
    j_T_f: np.ndarray | None = None,
) -> np.ndarray:
    """Full geometric Jacobian (6xN): position rows over orientation rows."""
    all_T = _all_transforms(robot, q_dh, n_joint, j_T_f)
    return np.vstack(
        (_jacob_p_internal(robot, all_T), _jacob_o_geometric_internal(robot, all_T))
    )


def change_jacob_frame(b_J: np.ndarray, u_R_b: np.ndarray) -> np.ndarray:
    """Express a Jacobian given in frame {b} in frame {u}.

    ``b_J`` may be a position or orientation part (3xN) or a full Jacobian
    (6xN); ``u_R_b`` is the rotation of {b} w.r.t. {u}.
    """
    jac = np.array(b_J, dtype=float)
    rot = np.asarray(u_R_b, dtype=float)
    if rot.shape != (3, 3):
        raise ValueError(f"rotation must be 3x3, got shape {rot.shape}")
    rows = jac.shape[0] if jac.ndim == 2 else -1
    if rows == 3:
        return rot @ jac
    if rows == 6:
        jac[:3] = rot @ jac[:3]
        jac[3:] = rot @ jac[3:]
        return jac
    raise RobotError(
        f"change_jacob_frame: invalid b_J Matrix rows dimension [{rows}]"
    )