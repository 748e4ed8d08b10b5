# serialkin

Kinematics for serial-link robot arms described by Denavit-Hartenberg (DH)
parameters: forward kinematics, geometric Jacobians, conversion between a
robot's own joint convention and the DH convention, and joint and velocity
limit checks. Models of the Franka Emika Panda, the KUKA LBR iiwa 7 R800 and
the Motoman SIA5F are included.

## Installation

```
pip install .
```

The only runtime dependency is `numpy`. Poses are 4×4 homogeneous
transforms held as `numpy` arrays.

## Modules

- `serialkin.exceptions`: `RobotError` (a `RuntimeError`) and its subclass
  `ExceededJointLimits`.
- `serialkin.link`: the abstract `Link`, the `JointType` enum
  (`PRISMATIC`, `REVOLUTE`), `dh_transform(a, alpha, d, theta)` and
  `check_lower_higher(lower, higher)`.
- `serialkin.joints`: `Prismatic` and `Revolute` links, `is_prismatic` and
  `is_revolute`.
- `serialkin.serial_link`: `SerialLink`, the kinematic chain, and
  `chain(*links)`.
- `serialkin.jacobian`: `jacob_p`, `jacob_o_geometric`, `jacob_geometric`
  and `change_jacob_frame`.
- `serialkin.robots`: `FrankaEmikaPanda`, `LBRiiwa7` and `MotomanSIA5F`.

## Building a robot

```python
import numpy as np
from serialkin.joints import Revolute, Prismatic
from serialkin.serial_link import SerialLink, chain

shoulder = Revolute(a=0.3, alpha=0.0, d=0.0, name="shoulder")
slide = Prismatic(a=0.0, alpha=0.0, theta=0.0, name="slide")

robot = chain(shoulder, slide)      # a SerialLink with two links
robot += Revolute(a=0.0, alpha=0.0, d=0.1, name="wrist")
print(robot.num_joints)             # 3

pose = robot.fkine(np.array([0.5, 0.2, -0.1]))   # base -> end-effector
```

`SerialLink(links, b_T_0, n_T_e, name, model)` takes the pose of frame 0 in
the base frame and the pose of the end-effector in the last link's frame;
both default to the identity. `robot + link` returns a new robot (the link
objects are shared), `robot += link` and `append_link` extend it in place,
and `pop_link` removes and returns the last link.

Each link carries `hard_limits` and `soft_limits` as `(lower, higher)` pairs
and `hard_velocity_limit` / `soft_velocity_limit`; soft values default to the
hard ones. Setting a lower limit above the upper one, or a negative velocity
limit, raises `RobotError`. For a revolute link `theta` is the joint variable
and reads as NaN; for a prismatic link the same holds for `d`. Assigning to
either raises `RobotError`.

`fkine(q_dh, n_joint, j_T_f)` gives the pose of joint `n_joint`'s frame,
post-multiplied by `j_T_f` if given; `n_joint` defaults to
`num_joints + 1`, the end-effector. `fkine_all(q_dh, n_joint)` returns the
list `[b_T_0, b_T_1, ..., b_T_n]`, whose last element is the end-effector
pose when `n_joint` is `num_joints + 1`. Wrong joint counts or transforms
that are not 4×4 raise `ValueError`.

## Conventions

Joint values reported by a robot controller may differ from the DH joint
variables by an offset and a sign. Each link holds that `offset` and `flip`,
and the robot converts whole vectors:

```python
q_robot = np.array([0.1, 0.0, 0.2])
q_dh = robot.joints_robot_to_dh(q_robot)
assert np.allclose(robot.joints_dh_to_robot(q_dh), q_robot)
```

`jointsvel_robot_to_dh` and `jointsvel_dh_to_robot` do the same for
velocities, and `jacobian_dh_to_robot` / `jacobian_robot_to_dh` negate the
Jacobian columns of flipped joints.

Limit checks take values in the robot convention. A value equal to a limit
counts as exceeding it:

```python
robot.check_hard_joint_limits(q_robot)          # one bool per joint
robot.exceeded_soft_velocity_limits(np.zeros(3))  # True if any joint is over
robot.joint_names_from_mask([True, False, True])  # "shoulder|wrist"
robot.center_of_soft_joint_limits()             # midpoints, robot convention
```

## Jacobians

```python
from serialkin.jacobian import jacob_geometric, change_jacob_frame

J = jacob_geometric(robot, q_dh)             # 6 x n, in the base frame
rotation_u_b = np.eye(3)
J_u = change_jacob_frame(J, rotation_u_b)    # expressed in frame {u}
```

`jacob_p` and `jacob_o_geometric` give the position and orientation parts
(3 × n) alone. `n_joint` restricts the Jacobian to the first joints, with
`num_joints + 1` meaning up to the end-effector frame; `j_T_f` moves the
reference point to a frame {f} given in that last frame.
`change_jacob_frame` accepts 3-row or 6-row matrices and raises `RobotError`
for any other row count.

## Ready-made robots

```python
from serialkin.robots import FrankaEmikaPanda, LBRiiwa7, MotomanSIA5F

panda = FrankaEmikaPanda()
panda.display()                  # prints the DH table and frames
print(panda.fkine(np.zeros(7)))
print(panda.position_report(np.zeros(7)))
```

Each constructor takes an optional end-effector transform `n_T_e` and a
robot name. `describe()` on a robot or a link returns the text that
`display()` prints.

## What it does not do

The package covers forward kinematics, geometric Jacobians, convention
conversion and limit checks only. It has no inverse kinematics, no
dynamics, no trajectory generation, no connection to real robots and no
command-line program. `ExceededJointLimits` is provided for callers to raise;
the limit checks themselves return booleans.