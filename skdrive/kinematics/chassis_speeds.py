"""Velocity of a robot chassis.

Although :class:`ChassisSpeeds` has the same members as a twist, it does
not represent the same thing. A twist is a change in pose, whereas
:class:`ChassisSpeeds` is a velocity.

A strictly non-holonomic drivetrain, such as a differential drive, should
never have a ``dy`` component because it can never move sideways.
Holonomic drivetrains such as swerve and mecanum will often have all three
components.

Example
-------
>>> from numpy import pi
>>> from skdrive.geometry import Rotation2d
>>> from skdrive.kinematics import ChassisSpeeds
>>> speeds = ChassisSpeeds.from_field_relative_speeds(
...     1.0, 0.0, 0.5, Rotation2d(pi / 2.0))
>>> round(speeds.dx, 6), round(speeds.dy, 6), speeds.dtheta
(0.0, -1.0, 0.5)
"""

from dataclasses import dataclass
from numbers import Number

import numpy as np

from skdrive.geometry.rotation import Rotation2d


def _cos_sin(robot_angle):
    """Return (cos, sin) of a heading.

    Parameters
    ----------
    robot_angle : skdrive.geometry.Rotation2d or float
        any object exposing ``cos`` and ``sin`` (attributes or methods),
        or an angle in radians.

    Returns
    -------
    cos_sin : tuple(float, float)
        cosine and sine of the heading.
    """
    if isinstance(robot_angle, Rotation2d):
        return robot_angle.cos, robot_angle.sin
    if hasattr(robot_angle, 'cos') and hasattr(robot_angle, 'sin'):
        c = robot_angle.cos
        s = robot_angle.sin
        if callable(c):
            c = c()
        if callable(s):
            s = s()
        return c, s
    if isinstance(robot_angle, Number) and not isinstance(robot_angle, bool):
        rot = Rotation2d(robot_angle)
        return rot.cos, rot.sin
    raise TypeError('robot_angle must be Rotation2d or angle in radians. '
                    'get {}'.format(type(robot_angle)))


@dataclass(frozen=True)
class ChassisSpeeds:
    """Velocity of a robot chassis.

    Parameters
    ----------
    dx : float
        forward velocity (forward is positive).
    dy : float
        sideways velocity (left is positive).
    dtheta : float
        angular velocity (counter-clockwise is positive).

    Equality is field-wise across subclasses, so a
    :class:`skdrive.kinematics.RobotRelativeSpeeds` equals the untagged
    ChassisSpeeds with the same components.
    """
    dx: float = 0.0
    dy: float = 0.0
    dtheta: float = 0.0

    def __eq__(self, other):
        if not isinstance(other, ChassisSpeeds):
            return NotImplemented
        return ((self.dx, self.dy, self.dtheta)
                == (other.dx, other.dy, other.dtheta))

    @classmethod
    def from_field_relative_speeds(cls, vx, vy, vtheta, robot_angle):
        """Convert field-relative speeds into robot-relative speeds.

        The field-frame velocity vector (vx, vy) is rotated by the
        inverse of the robot heading. The angular rate is the same in
        both frames and is passed through unchanged.

        Parameters
        ----------
        vx : float
            speed along the field x axis. Positive x is away from your
            alliance wall.
        vy : float
            speed along the field y axis. Positive y is to your left
            when standing behind the alliance wall.
        vtheta : float
            angular rate of the robot.
        robot_angle : skdrive.geometry.Rotation2d or float
            heading of the robot as measured by a gyroscope, counter-
            clockwise positive.

        Returns
        -------
        speeds : ChassisSpeeds
            speeds in the robot's frame of reference.
        """
        c, s = _cos_sin(robot_angle)
        return cls(vx * c + vy * s,
                   -vx * s + vy * c,
                   vtheta)

    def as_array(self):
        """Return [dx, dy, dtheta] vector.

        Returns
        -------
        vec : numpy.ndarray
            vector shape of (3,)
        """
        return np.array([self.dx, self.dy, self.dtheta], dtype=np.float64)


def from_field_relative_speeds(vx, vy, vtheta, robot_angle):
    """Convert field-relative speeds into robot-relative ChassisSpeeds.

    See :meth:`ChassisSpeeds.from_field_relative_speeds`.
    """
    return ChassisSpeeds.from_field_relative_speeds(
        vx, vy, vtheta, robot_angle)
