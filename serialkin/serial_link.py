"""Serial kinematic chain built from DH links."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from serialkin.link import Link

_TABLE_WIDTHS = (2, 5, 4, 7, 7, 7, 7)
_TABLE_HEADERS = ("#", "Name", "Type", "a", "alpha", "theta", "d")


def _as_transform(matrix: np.ndarray | Sequence[Sequence[float]] | None) -> np.ndarray:
    if matrix is None:
        return np.eye(4)
    out = np.array(matrix, dtype=float)
    if out.shape != (4, 4):
        raise ValueError(f"homogeneous transform must be 4x4, got shape {out.shape}")
    return out


def _format_matrix(matrix: np.ndarray) -> str:
    cells = [[f"{v:.6g}" for v in row] for row in matrix]
    width = max(len(c) for row in cells for c in row)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def _border(left: str, middle: str, right: str) -> str:
    return left + middle.join("═" * w for w in _TABLE_WIDTHS) + right


def _table_row(values: Iterable[str]) -> str:
    cells = (str(v).rjust(w) for v, w in zip(values, _TABLE_WIDTHS))
    return "║" + "║".join(cells) + "║"


class SerialLink:
    """Open kinematic chain: base frame, ordered links and end-effector frame.

    ``b_T_0`` is the pose of frame 0 in the base frame and ``n_T_e`` the pose
    of the end-effector in the frame of the last link.
    """

    def __init__(
        self,
        links: Iterable[Link] = (),
        b_T_0: np.ndarray | None = None,
        n_T_e: np.ndarray | None = None,
        name: str = "Robot_No_Name",
        model: str = "Robot_No_Model",
    ) -> None:
        self.links: list[Link] = list(links)
        self.b_T_0 = _as_transform(b_T_0)
        self.n_T_e = _as_transform(n_T_e)
        self.name = name
        self.model = model

    # Introspection

    @property
    def num_joints(self) -> int:
        """Number of joints (links) in the chain."""
        return len(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def joint_name(self, i: int) -> str:
        """Name of the ``i``-th joint."""
        return self.links[i].name

    def joint_names_from_mask(self, mask: Sequence[bool]) -> str:
        """Names of the joints selected by ``mask``, joined with ``|``."""
        return "|".join(link.name for link, selected in zip(self.links, mask) if selected)

    def center_of_soft_joint_limits(self) -> np.ndarray:
        """Midpoint of each joint's soft limits, in robot convention."""
        return np.array(
            [(lo + hi) / 2.0 for lo, hi in (link.soft_limits for link in self.links)],
            dtype=float,
        )

    def describe(self) -> str:
        """DH table and base/end-effector transforms as text."""
        lines = [f"Robot [{self.model}] {self.name}", "DH Table: "]
        lines.append(_border("╔", "╦", "╗"))
        lines.append(_table_row(_TABLE_HEADERS))
        lines.append(_border("╠", "╬", "╣"))
        for index, link in enumerate(self.links, start=1):
            lines.append(
                _table_row(
                    (
                        index,
                        link.name,
                        link.type,
                        f"{link.a:.5g}",
                        f"{link.alpha:.5g}",
                        f"{link.theta:.5g}",
                        f"{link.d:.5g}",
                    )
                )
            )
        lines.append(_border("╚", "╩", "╝"))
        lines.append("0_T_b = ")
        lines.append(_format_matrix(self.b_T_0))
        lines.append("n_T_e = ")
        lines.append(_format_matrix(self.n_T_e))
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        """Print :meth:`describe` to standard output."""
        print(self.describe(), end="")

    def position_report(self, q_dh: Sequence[float]) -> str:
        """End-effector pose for ``q_dh`` (DH convention) as text."""
        q = self._joint_vector(q_dh, "position_report")
        separator = "========================="
        return (
            f"{separator}\n"
            f"Robot[ {self.model} ]: {self.name}\n"
            "Teb = \n"
            f"{_format_matrix(self.fkine(q))}\n"
            f"{separator}\n"
        )

    # Chain editing

    def clone(self) -> "SerialLink":
        """Copy of the robot; the link objects are shared, the list is not."""
        return SerialLink(self.links, self.b_T_0, self.n_T_e, self.name, self.model)

    def append_link(self, link: Link) -> None:
        """Add ``link`` to the end of the chain."""
        self.links.append(link)

    def pop_link(self) -> Link:
        """Remove and return the last link of the chain."""
        if not self.links:
            raise IndexError("pop_link from a robot with no links")
        return self.links.pop()

    def __iadd__(self, link: Link) -> "SerialLink":
        self.append_link(link)
        return self

    def __add__(self, link: Link) -> "SerialLink":
        out = self.clone()
        out.append_link(link)
        return out

    # Conversions

    def _joint_vector(self, values: Sequence[float], where: str) -> np.ndarray:
        q = np.asarray(values, dtype=float).ravel()
        if q.size != self.num_joints:
            raise ValueError(
                f"SerialLink.{where}: invalid joint size {q.size}, expected {self.num_joints}"
            )
        return q

    def joints_robot_to_dh(self, q_robot: Sequence[float]) -> np.ndarray:
        """Convert joint positions from robot to DH convention."""
        q = self._joint_vector(q_robot, "joints_robot_to_dh")
        return np.array([link.joint_robot_to_dh(v) for link, v in zip(self.links, q)])

    def joints_dh_to_robot(self, q_dh: Sequence[float]) -> np.ndarray:
        """Convert joint positions from DH to robot convention."""
        q = self._joint_vector(q_dh, "joints_dh_to_robot")
        return np.array([link.joint_dh_to_robot(v) for link, v in zip(self.links, q)])

    def jointsvel_robot_to_dh(self, q_dot_robot: Sequence[float]) -> np.ndarray:
        """Convert joint velocities from robot to DH convention."""
        q = self._joint_vector(q_dot_robot, "jointsvel_robot_to_dh")
        return np.array([link.jointvel_robot_to_dh(v) for link, v in zip(self.links, q)])

    def jointsvel_dh_to_robot(self, q_dot_dh: Sequence[float]) -> np.ndarray:
        """Convert joint velocities from DH to robot convention."""
        q = self._joint_vector(q_dot_dh, "jointsvel_dh_to_robot")
        return np.array([link.jointvel_dh_to_robot(v) for link, v in zip(self.links, q)])

    def jacobian_dh_to_robot(self, jacobian: np.ndarray) -> np.ndarray:
        """Jacobian with the columns of flipped joints negated."""
        j = np.array(jacobian, dtype=float)
        if j.ndim != 2 or j.shape[1] > self.num_joints:
            raise ValueError(
                f"SerialLink.jacobian_dh_to_robot: invalid jacobian shape {j.shape}"
            )
        signs = np.array([-1.0 if link.flip else 1.0 for link in self.links[: j.shape[1]]])
        return j * signs

    def jacobian_robot_to_dh(self, jacobian: np.ndarray) -> np.ndarray:
        """Jacobian from robot to DH convention (same as the inverse direction)."""
        return self.jacobian_dh_to_robot(jacobian)

    # Safety

    def check_hard_joint_limits(self, q_robot: Sequence[float]) -> list[bool]:
        """Per joint, whether ``q_robot`` violates the hard limits."""
        q = self._joint_vector(q_robot, "check_hard_joint_limits")
        return [link.exceeded_hard_joint_limits(v) for link, v in zip(self.links, q)]

    def exceeded_hard_joint_limits(self, q_robot: Sequence[float]) -> bool:
        """True if any joint violates its hard limits."""
        return any(self.check_hard_joint_limits(q_robot))

    def check_soft_joint_limits(self, q_robot: Sequence[float]) -> list[bool]:
        """Per joint, whether ``q_robot`` violates the soft limits."""
        q = self._joint_vector(q_robot, "check_soft_joint_limits")
        return [link.exceeded_soft_joint_limits(v) for link, v in zip(self.links, q)]

    def exceeded_soft_joint_limits(self, q_robot: Sequence[float]) -> bool:
        """True if any joint violates its soft limits."""
        return any(self.check_soft_joint_limits(q_robot))

    def check_hard_velocity_limits(self, q_dot: Sequence[float]) -> list[bool]:
        """Per joint, whether ``q_dot`` violates the hard velocity limit."""
        q = self._joint_vector(q_dot, "check_hard_velocity_limits")
        return [link.exceeded_hard_velocity_limit(v) for link, v in zip(self.links, q)]

    def exceeded_hard_velocity_limits(self, q_dot: Sequence[float]) -> bool:
        """True if any joint violates its hard velocity limit."""
        return any(self.check_hard_velocity_limits(q_dot))

    def check_soft_velocity_limits(self, q_dot: Sequence[float]) -> list[bool]:
        """Per joint, whether ``q_dot`` violates the soft velocity limit."""
        q = self._joint_vector(q_dot, "check_soft_velocity_limits")
        return [link.exceeded_soft_velocity_limit(v) for link, v in zip(self.links, q)]

    def exceeded_soft_velocity_limits(self, q_dot: Sequence[float]) -> bool:
        """True if any joint violates its soft velocity limit."""
        return any(self.check_soft_velocity_limits(q_dot))

    # Forward kinematics

    def _resolve_chain(self, q_dh: Sequence[float], n_joint: int | None) -> tuple[np.ndarray, int, bool]:
        n = self.num_joints + 1 if n_joint is None else int(n_joint)
        if not 0 <= n <= self.num_joints + 1:
            raise ValueError(f"SerialLink.fkine: invalid joint number {n}")
        end_effector = n == self.num_joints + 1
        count = n - 1 if end_effector else n
        q = np.asarray(q_dh, dtype=float).ravel()
        if q.size > self.num_joints or q.size < count:
            raise ValueError(f"SerialLink.fkine: invalid joint size {q.size}")
        return q, count, end_effector

    def fkine_all(self, q_dh: Sequence[float], n_joint: int | None = None) -> list[np.ndarray]:
        """Transforms ``[b_T_0, b_T_1, ..., b_T_n]`` up to joint ``n_joint``.

        With ``n_joint`` equal to ``num_joints + 1`` (the default) the last
        element is the end-effector pose ``b_T_e``.
        """
        q, count, end_effector = self._resolve_chain(q_dh, n_joint)
        out = [self.b_T_0.copy()]
        for link, value in zip(self.links[:count], q):
            out.append(out[-1] @ link.transform(value))
        if end_effector:
            out[-1] = out[-1] @ self.n_T_e
        return out

    def fkine(
        self,
        q_dh: Sequence[float],
        n_joint: int | None = None,
        j_T_f: np.ndarray | None = None,
    ) -> np.ndarray:
        """Pose of joint ``n_joint``'s frame, post-multiplied by ``j_T_f``.

        ``n_joint`` defaults to ``num_joints + 1``, meaning the end-effector.
        """
        q, count, end_effector = self._resolve_chain(q_dh, n_joint)
        b_T_j = self.b_T_0.copy()
        for link, value in zip(self.links[:count], q):
            b_T_j = b_T_j @ link.transform(value)
        if end_effector:
            b_T_j = b_T_j @ self.n_T_e
        if j_T_f is not None:
            b_T_j = b_T_j @ _as_transform(j_T_f)
        return b_T_j


def chain(*args: Link) -> SerialLink:
    """New robot with default frames whose links are ``args`` in order."""
    return SerialLink(args)