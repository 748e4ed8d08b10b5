import math

import numpy as np
import pytest

from serialkin.exceptions import RobotError
from serialkin.joints import Revolute
from serialkin.link import JointType, Link, check_lower_higher, dh_transform


def test_check_lower_higher_rejects_inverted():
    with pytest.raises(RobotError, match="lower > higher"):
        check_lower_higher(1.0, -1.0)


def test_check_lower_higher_accepts_equal():
    assert check_lower_higher(0.5, 0.5) is None


def test_dh_transform_zero_is_identity():
    np.testing.assert_allclose(dh_transform(0.0, 0.0, 0.0, 0.0), np.eye(4))


def test_dh_transform_translation_from_parameters():
    t = dh_transform(2.0, 0.0, 3.0, 0.0)
    np.testing.assert_allclose(t[:3, 3], [2.0, 0.0, 3.0])


def test_dh_transform_quarter_turn_maps_x_to_y():
    t = dh_transform(0.0, 0.0, 0.0, math.pi / 2)
    np.testing.assert_allclose(t[:3, 0], [0.0, 1.0, 0.0], atol=1e-12)


def test_dh_transform_is_rigid():
    t = dh_transform(0.3, 1.1, -0.4, 2.7)
    r = t[:3, :3]
    np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(r) == pytest.approx(1.0)
    np.testing.assert_allclose(t[3], [0.0, 0.0, 0.0, 1.0])


def test_link_is_abstract():
    with pytest.raises(TypeError):
        Link(0.0, 0.0, 0.0, 0.0)


def test_transform_uses_link_parameters():
    link = Revolute(0.1, 0.5, 0.2)
    np.testing.assert_allclose(link.transform(0.7), dh_transform(0.1, 0.5, 0.2, 0.7))


def test_soft_limits_default_to_hard():
    link = Revolute(0.1, 0.5, 0.2, hard_limits=(-1.5, 2.0), hard_velocity_limit=3.0)
    assert link.soft_limits == (-1.5, 2.0)
    assert link.hard_limits == (-1.5, 2.0)
    assert link.soft_velocity_limit == 3.0
    assert link.hard_velocity_limit == 3.0


def test_default_limits_are_unbounded():
    link = Revolute(0.1, 0.5, 0.2)
    assert link.hard_limits == (-math.inf, math.inf)
    assert link.hard_velocity_limit == math.inf
    assert link.name == "joint_no_name"


def test_invalid_hard_limits_raise():
    with pytest.raises(RobotError, match="lower > higher"):
        Revolute(0.1, 0.5, 0.2, hard_limits=(1.0, -1.0))


def test_invalid_soft_limits_setter_raises_and_keeps_value():
    link = Revolute(0.1, 0.5, 0.2, soft_limits=(-1.0, 1.0))
    with pytest.raises(RobotError, match="lower > higher"):
        link.soft_limits = [2.0, 1.0]
    assert link.soft_limits == (-1.0, 1.0)


def test_negative_hard_velocity_limit_raises():
    with pytest.raises(RobotError, match="velocity_limit<0.0"):
        Revolute(0.1, 0.5, 0.2, hard_velocity_limit=-1.0)


def test_negative_soft_velocity_limit_setter_raises_and_keeps_value():
    link = Revolute(0.1, 0.5, 0.2, hard_velocity_limit=2.0)
    with pytest.raises(RobotError, match="velocity_limit<0.0"):
        link.soft_velocity_limit = -0.5
    assert link.soft_velocity_limit == 2.0


def test_joint_limits_are_inclusive():
    link = Revolute(0.1, 0.5, 0.2, hard_limits=(-1.0, 1.0), soft_limits=(-0.5, 0.5))
    assert link.exceeded_hard_joint_limits(-1.0) is True
    assert link.exceeded_hard_joint_limits(1.0) is True
    assert link.exceeded_hard_joint_limits(0.9) is False
    assert link.exceeded_soft_joint_limits(0.5) is True
    assert link.exceeded_soft_joint_limits(0.0) is False


def test_velocity_limits_use_absolute_value():
    link = Revolute(0.1, 0.5, 0.2, hard_velocity_limit=2.0, soft_velocity_limit=1.0)
    assert link.exceeded_hard_velocity_limit(-2.0) is True
    assert link.exceeded_hard_velocity_limit(-1.5) is False
    assert link.exceeded_soft_velocity_limit(-1.5) is True
    assert link.exceeded_soft_velocity_limit(0.5) is False


@pytest.mark.parametrize("q", [-0.7, 0.0, 1.3])
@pytest.mark.parametrize("flip", [False, True])
@pytest.mark.parametrize("offset", [0.0, 0.4, -1.2])
def test_joint_conversion_round_trip(q, flip, offset):
    link = Revolute(0.1, 0.5, 0.2, offset=offset, flip=flip)
    assert link.joint_dh_to_robot(link.joint_robot_to_dh(q)) == pytest.approx(q)
    assert link.jointvel_dh_to_robot(link.jointvel_robot_to_dh(q)) == pytest.approx(q)


def test_flip_negates_and_offset_shifts():
    link = Revolute(0.1, 0.5, 0.2, offset=0.4, flip=True)
    assert link.joint_robot_to_dh(0.3) == pytest.approx(0.1)
    assert link.jointvel_robot_to_dh(0.3) == pytest.approx(-0.3)
    plain = Revolute(0.1, 0.5, 0.2, offset=0.4)
    assert plain.joint_robot_to_dh(0.3) == pytest.approx(0.7)
    assert plain.jointvel_dh_to_robot(0.3) == pytest.approx(0.3)


def test_clone_is_independent():
    link = Revolute(0.1, 0.5, 0.2, name="j1", hard_limits=(-1.0, 1.0))
    twin = link.clone()
    twin.name = "j2"
    twin.hard_limits = (-2.0, 2.0)
    assert link.name == "j1"
    assert link.hard_limits == (-1.0, 1.0)
    assert twin.type == link.type


def test_describe_contents():
    link = Revolute(0.1, 0.5, 0.2, name="j1", flip=True, hard_limits=(-1.0, 1.0))
    text = link.describe()
    lines = text.split("\n")
    assert lines[0] == "Link [j1]"
    assert lines[1] == "Type: r"
    assert "flip = yes" in text
    assert "[-1 | 1]" in text
    assert lines[-1] == "Hard Velocity Limit: inf"


def test_display_prints_description(capsys):
    link = Revolute(0.1, 0.5, 0.2, name="j1")
    link.display()
    assert capsys.readouterr().out == link.describe() + "\n"


def test_joint_type_values():
    assert JointType("p") is JointType.PRISMATIC
    assert str(JointType.REVOLUTE) == "r"