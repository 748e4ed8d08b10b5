import pytest

from serialkin.exceptions import ExceededJointLimits, RobotError


def test_robot_error_keeps_message():
    err = RobotError("bad link")
    assert str(err) == "bad link"
    assert err.args == ("bad link",)


def test_robot_error_default_message_is_empty():
    assert str(RobotError()) == ""


def test_robot_error_is_a_runtime_error():
    err = RobotError("boom")
    assert isinstance(err, RuntimeError)
    assert str(err) == "boom"
    with pytest.raises(RuntimeError, match="boom"):
        raise err


def test_exceeded_joint_limits_caught_as_robot_error():
    err = ExceededJointLimits("joint A1 out of range")
    assert isinstance(err, RobotError)
    assert str(err) == "joint A1 out of range"
    with pytest.raises(RobotError) as info:
        raise err
    assert info.value is err


def test_exceeded_joint_limits_default_message_is_empty():
    assert str(ExceededJointLimits()) == ""