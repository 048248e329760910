import unittest

import numpy as np
from numpy import pi
from numpy import testing

from skdrive.geometry import Translation2d
from skdrive.kinematics import ChassisSpeeds
from skdrive.kinematics import FieldRelativeSpeeds
from skdrive.kinematics import MecanumDriveKinematics
from skdrive.kinematics import MecanumDriveWheelSpeeds


_SQRT2 = np.sqrt(2.0)


class TestMecanumDriveKinematics(unittest.TestCase):

    def setUp(self):
        self.fl = Translation2d(12, 12)
        self.fr = Translation2d(12, -12)
        self.rl = Translation2d(-12, 12)
        self.rr = Translation2d(-12, -12)
        self.kinematics = MecanumDriveKinematics(
            self.fl, self.fr, self.rl, self.rr)

    def test_invalid_wheel(self):
        with self.assertRaises(TypeError):
            MecanumDriveKinematics((12, 12), self.fr, self.rl, self.rr)

    def test_wheel_locations(self):
        self.assertEqual(self.kinematics.wheel_locations,
                         (self.fl, self.fr, self.rl, self.rr))

    def test_straight_line_inverse_kinematics(self):
        wheel_speeds = self.kinematics.to_wheel_speeds(
            ChassisSpeeds(5.0, 0.0, 0.0))
        testing.assert_almost_equal(
            wheel_speeds.as_array(), np.full(4, 5.0 / _SQRT2))

    def test_straight_line_forward_kinematics(self):
        value = 5.0 / _SQRT2
        speeds = self.kinematics.to_chassis_speeds(
            MecanumDriveWheelSpeeds(value, value, value, value))
        self.assertAlmostEqual(speeds.dx, 5.0)
        self.assertAlmostEqual(speeds.dy, 0.0)
        self.assertAlmostEqual(speeds.dtheta, 0.0)

    def test_strafe_inverse_kinematics(self):
        wheel_speeds = self.kinematics.to_wheel_speeds(
            ChassisSpeeds(0.0, 4.0, 0.0))
        value = 4.0 / _SQRT2
        testing.assert_almost_equal(
            wheel_speeds.as_array(), [-value, value, value, -value])

    def test_strafe_forward_kinematics(self):
        value = 4.0 / _SQRT2
        speeds = self.kinematics.to_chassis_speeds(
            MecanumDriveWheelSpeeds(-value, value, value, -value))
        self.assertAlmostEqual(speeds.dx, 0.0)
        self.assertAlmostEqual(speeds.dy, 4.0)
        self.assertAlmostEqual(speeds.dtheta, 0.0)

    def test_rotation_inverse_kinematics(self):
        wheel_speeds = self.kinematics.to_wheel_speeds(
            ChassisSpeeds(0.0, 0.0, 2 * pi))
        value = 24 * 2 * pi / _SQRT2
        testing.assert_almost_equal(
            wheel_speeds.as_array(), [-value, value, -value, value])

    def test_round_trip(self):
        speeds = ChassisSpeeds(2.0, 3.0, 1.0)
        recovered = self.kinematics.to_chassis_speeds(
            self.kinematics.to_wheel_speeds(speeds))
        testing.assert_almost_equal(recovered.as_array(), speeds.as_array())

    def test_off_center_rotation(self):
        with self.assertLogs('skdrive.kinematics.mecanum', level='DEBUG'):
            wheel_speeds = self.kinematics.to_wheel_speeds(
                ChassisSpeeds(0.0, 0.0, 1.0), self.fl)
        testing.assert_almost_equal(
            wheel_speeds.as_array(),
            np.array([0.0, 24.0, -24.0, 48.0]) / _SQRT2)

        # back to the physical center
        wheel_speeds = self.kinematics.to_wheel_speeds(
            ChassisSpeeds(0.0, 0.0, 1.0))
        value = 24 / _SQRT2
        testing.assert_almost_equal(
            wheel_speeds.as_array(), [-value, value, -value, value])

    def test_rejects_field_speeds(self):
        with self.assertRaises(TypeError):
            self.kinematics.to_wheel_speeds(FieldRelativeSpeeds(1.0, 0, 0))


class TestMecanumDriveWheelSpeeds(unittest.TestCase):

    def test_normalize(self):
        wheel_speeds = MecanumDriveWheelSpeeds(5.0, 6.0, 4.0, 7.0)
        normalized = wheel_speeds.normalize(5.5)
        factor = 5.5 / 7.0
        testing.assert_almost_equal(
            normalized.as_array(),
            [5.0 * factor, 6.0 * factor, 4.0 * factor, 5.5])

    def test_normalize_within_limit(self):
        wheel_speeds = MecanumDriveWheelSpeeds(1.0, -2.0, 0.5, 0.0)
        self.assertEqual(wheel_speeds.normalize(3.0), wheel_speeds)

    def test_normalize_invalid(self):
        with self.assertRaises(ValueError):
            MecanumDriveWheelSpeeds().normalize(-1.0)
