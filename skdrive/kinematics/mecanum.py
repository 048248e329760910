"""Mecanum drive kinematics.

The inverse kinematics (converting from a desired chassis velocity to
individual wheel speeds) uses the relative locations of the wheels with
respect to the center of rotation. The center of rotation is variable,
e.g. it can be placed in a corner of the robot for evasive maneuvers.

Forward kinematics (converting wheel speeds into the overall chassis
motion) is an overdetermined system, so a least-squares solution is
computed with the Moore-Penrose pseudoinverse of the inverse kinematics
matrix::

    [wheel_speeds] = [wheel_locations] * [chassis_speeds]
"""

from dataclasses import dataclass
from logging import getLogger

import numpy as np

from skdrive.geometry.translation import Translation2d
from skdrive.kinematics.chassis_speeds import ChassisSpeeds
from skdrive.kinematics.frames import _check_robot_relative
from skdrive.kinematics.utils import normalize_wheel_speeds


logger = getLogger(__name__)


@dataclass(frozen=True)
class MecanumDriveWheelSpeeds:
    """Wheel speeds of a mecanum drive."""
    front_left: float = 0.0
    front_right: float = 0.0
    rear_left: float = 0.0
    rear_right: float = 0.0

    def as_array(self):
        return np.array([self.front_left, self.front_right,
                         self.rear_left, self.rear_right], dtype=np.float64)

    def normalize(self, attainable_max_speed):
        """Scale speeds down so none exceeds the attainable maximum.

        Parameters
        ----------
        attainable_max_speed : float
            absolute max speed a wheel can reach.

        Returns
        -------
        wheel_speeds : MecanumDriveWheelSpeeds
            normalized wheel speeds. Ratios between wheels are kept.
        """
        speeds = normalize_wheel_speeds(self.as_array(), attainable_max_speed)
        return MecanumDriveWheelSpeeds(*speeds.tolist())


def _inverse_kinematics_matrix(fl, fr, rl, rr):
    """Construct inverse kinematics matrix from wheel locations.

    Parameters
    ----------
    fl, fr, rl, rr : skdrive.geometry.Translation2d
        wheel locations relative to the center of rotation.

    Returns
    -------
    matrix : numpy.ndarray
        matrix shape of (4, 3)
    """
    matrix = np.array([[1.0, -1.0, -(fl.x + fl.y)],
                       [1.0, 1.0, fr.x - fr.y],
                       [1.0, 1.0, rl.x - rl.y],
                       [1.0, -1.0, -(rr.x + rr.y)]])
    return matrix / np.sqrt(2.0)


class MecanumDriveKinematics(object):

    """Converts chassis speeds to and from mecanum wheel speeds.

    Parameters
    ----------
    front_left : skdrive.geometry.Translation2d
        location of the front-left wheel relative to the physical
        center of the robot.
    front_right : skdrive.geometry.Translation2d
        location of the front-right wheel.
    rear_left : skdrive.geometry.Translation2d
        location of the rear-left wheel.
    rear_right : skdrive.geometry.Translation2d
        location of the rear-right wheel.
    """

    def __init__(self, front_left, front_right, rear_left, rear_right):
        self._wheels = (front_left, front_right, rear_left, rear_right)
        for wheel in self._wheels:
            if not isinstance(wheel, Translation2d):
                raise TypeError('wheel location must be Translation2d. '
                                'get {}'.format(type(wheel)))
        self._inverse_kinematics = _inverse_kinematics_matrix(*self._wheels)
        self._forward_kinematics = np.linalg.pinv(self._inverse_kinematics)
        self._prev_center_of_rotation = Translation2d()

    @property
    def wheel_locations(self):
        return self._wheels

    def to_wheel_speeds(self, chassis_speeds, center_of_rotation=None):
        """Return wheel speeds from a desired chassis velocity.

        Parameters
        ----------
        chassis_speeds : skdrive.kinematics.ChassisSpeeds
            desired robot-relative chassis speed.
        center_of_rotation : skdrive.geometry.Translation2d or None
            center of rotation. If `None`, the physical center of the
            robot is used. With the center placed at one corner and a
            chassis speed that only has a dtheta component, the robot
            rotates around that corner.

        Returns
        -------
        wheel_speeds : MecanumDriveWheelSpeeds
            wheel speeds. They are not normalized; use
            :meth:`MecanumDriveWheelSpeeds.normalize` to cap them.
        """
        chassis_speeds = _check_robot_relative(chassis_speeds)
        if center_of_rotation is None:
            center_of_rotation = Translation2d()
        if center_of_rotation != self._prev_center_of_rotation:
            logger.debug('recompute mecanum inverse kinematics for center '
                         'of rotation (%s, %s)',
                         center_of_rotation.x, center_of_rotation.y)
            self._inverse_kinematics = _inverse_kinematics_matrix(
                *[wheel - center_of_rotation for wheel in self._wheels])
            self._prev_center_of_rotation = center_of_rotation

        wheel_speeds = self._inverse_kinematics.dot(chassis_speeds.as_array())
        return MecanumDriveWheelSpeeds(*wheel_speeds.tolist())

    def to_chassis_speeds(self, wheel_speeds):
        """Return chassis speed from wheel speeds.

        Parameters
        ----------
        wheel_speeds : MecanumDriveWheelSpeeds
            current wheel speeds.

        Returns
        -------
        speeds : skdrive.kinematics.ChassisSpeeds
            least-squares chassis speed.
        """
        dx, dy, dtheta = self._forward_kinematics.dot(wheel_speeds.as_array())
        return ChassisSpeeds(float(dx), float(dy), float(dtheta))
