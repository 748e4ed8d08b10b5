"""Forward kinematics, geometric Jacobians and limit checks for serial-link robots described by DH parameters."""

__version__ = "0.1.0"
__all__ = ["exceptions", "link", "joints", "serial_link", "jacobian", "robots"]