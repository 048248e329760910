"""Frame-tagged chassis velocities.

:class:`ChassisSpeeds` carries no frame; whether it is field-relative or
robot-relative is left to the caller. The types here make the frame
explicit. A :class:`FieldRelativeSpeeds` can only become robot-relative
through :meth:`FieldRelativeSpeeds.to_robot_relative`, and the drivetrain
kinematics refuse field-relative input.

Example
-------
>>> from skdrive.geometry import Rotation2d
>>> from skdrive.kinematics import FieldRelativeSpeeds
>>> command = FieldRelativeSpeeds(vx=1.0, vy=0.0, vtheta=0.0)
>>> speeds = command.to_robot_relative(Rotation2d.from_degrees(180))
>>> round(speeds.dx, 6)
-1.0
"""

from dataclasses import dataclass

import numpy as np

from skdrive.kinematics.chassis_speeds import ChassisSpeeds


@dataclass(frozen=True, eq=False)
class RobotRelativeSpeeds(ChassisSpeeds):
    """ChassisSpeeds known to be expressed in the robot frame.

    Compares equal to a ChassisSpeeds with the same components.
    """


@dataclass(frozen=True)
class FieldRelativeSpeeds:
    """Velocity command expressed in the field frame.

    Parameters
    ----------
    vx : float
        speed along the field x axis.
    vy : float
        speed along the field y axis.
    vtheta : float
        angular rate of the robot (counter-clockwise is positive).
    """
    vx: float = 0.0
    vy: float = 0.0
    vtheta: float = 0.0

    def to_robot_relative(self, robot_angle):
        """Return these speeds in the robot frame.

        Parameters
        ----------
        robot_angle : skdrive.geometry.Rotation2d or float
            heading of the robot relative to the field.

        Returns
        -------
        speeds : RobotRelativeSpeeds
            robot-relative speeds.
        """
        return RobotRelativeSpeeds.from_field_relative_speeds(
            self.vx, self.vy, self.vtheta, robot_angle)

    def as_array(self):
        return np.array([self.vx, self.vy, self.vtheta], dtype=np.float64)


def to_robot_relative(field_speeds, robot_angle):
    """Convert FieldRelativeSpeeds into RobotRelativeSpeeds.

    Parameters
    ----------
    field_speeds : FieldRelativeSpeeds
        field-relative command.
    robot_angle : skdrive.geometry.Rotation2d or float
        heading of the robot relative to the field.

    Returns
    -------
    speeds : RobotRelativeSpeeds
        robot-relative speeds.
    """
    if not isinstance(field_speeds, FieldRelativeSpeeds):
        raise TypeError('field_speeds must be FieldRelativeSpeeds. '
                        'get {}'.format(type(field_speeds)))
    return field_speeds.to_robot_relative(robot_angle)


def _check_robot_relative(chassis_speeds):
    """Checks that chassis_speeds can drive the robot directly."""
    if isinstance(chassis_speeds, FieldRelativeSpeeds):
        raise TypeError(
            'FieldRelativeSpeeds must be converted with '
            'to_robot_relative before kinematics')
    if not isinstance(chassis_speeds, ChassisSpeeds):
        raise TypeError('chassis_speeds must be ChassisSpeeds. '
                        'get {}'.format(type(chassis_speeds)))
    return chassis_speeds
