"""Differential drive kinematics.

Inverse kinematics converts a desired chassis speed into left and right
wheel velocities, whereas forward kinematics converts left and right wheel
velocities into a linear and angular chassis speed.
"""

from dataclasses import dataclass

from skdrive.kinematics.chassis_speeds import ChassisSpeeds
from skdrive.kinematics.frames import _check_robot_relative
from skdrive.kinematics.utils import normalize_wheel_speeds


@dataclass(frozen=True)
class DifferentialDriveWheelSpeeds:
    """Wheel speeds of a differential drive.

    Parameters
    ----------
    left : float
        speed of the left side of the robot.
    right : float
        speed of the right side of the robot.
    """
    left: float = 0.0
    right: float = 0.0

    def normalize(self, attainable_max_speed):
        """Scale speeds down so none exceeds the attainable maximum.

        The ratio between the two sides is preserved.

        Parameters
        ----------
        attainable_max_speed : float
            absolute max speed a wheel can reach.

        Returns
        -------
        wheel_speeds : DifferentialDriveWheelSpeeds
            normalized wheel speeds.
        """
        left, right = normalize_wheel_speeds(
            [self.left, self.right], attainable_max_speed)
        return DifferentialDriveWheelSpeeds(float(left), float(right))


class DifferentialDriveKinematics(object):

    """Converts chassis speeds to and from differential drive wheel speeds.

    Parameters
    ----------
    drive_radius : float
        radius of the drivetrain. Theoretically this is half the
        distance between the left and right wheels. The empirical value
        may be larger than the measured one due to scrubbing effects.

    Examples
    --------
    >>> from skdrive.kinematics import ChassisSpeeds
    >>> from skdrive.kinematics import DifferentialDriveKinematics
    >>> kinematics = DifferentialDriveKinematics(0.5)
    >>> kinematics.to_wheel_speeds(ChassisSpeeds(dx=1.0, dtheta=1.0))
    DifferentialDriveWheelSpeeds(left=0.5, right=1.5)
    """

    def __init__(self, drive_radius):
        drive_radius = float(drive_radius)
        if not drive_radius > 0.0:
            raise ValueError(
                'drive_radius must be positive. get {}'.format(drive_radius))
        self._drive_radius = drive_radius

    @property
    def drive_radius(self):
        return self._drive_radius

    def to_chassis_speeds(self, wheel_speeds):
        """Return chassis speed from left and right wheel velocities.

        Parameters
        ----------
        wheel_speeds : DifferentialDriveWheelSpeeds
            left and right velocities.

        Returns
        -------
        speeds : skdrive.kinematics.ChassisSpeeds
            chassis speed. dy is always zero.
        """
        return ChassisSpeeds(
            (wheel_speeds.left + wheel_speeds.right) / 2.0,
            0.0,
            (wheel_speeds.right - wheel_speeds.left)
            / (2.0 * self._drive_radius))

    def to_wheel_speeds(self, chassis_speeds):
        """Return left and right wheel velocities from a chassis speed.

        Parameters
        ----------
        chassis_speeds : skdrive.kinematics.ChassisSpeeds
            robot-relative chassis speed. dy is ignored.

        Returns
        -------
        wheel_speeds : DifferentialDriveWheelSpeeds
            left and right velocities.
        """
        chassis_speeds = _check_robot_relative(chassis_speeds)
        return DifferentialDriveWheelSpeeds(
            chassis_speeds.dx - self._drive_radius * chassis_speeds.dtheta,
            chassis_speeds.dx + self._drive_radius * chassis_speeds.dtheta)
