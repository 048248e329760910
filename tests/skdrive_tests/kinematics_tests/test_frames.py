import unittest

from skdrive.geometry import Rotation2d
from skdrive.kinematics import ChassisSpeeds
from skdrive.kinematics import DifferentialDriveKinematics
from skdrive.kinematics import FieldRelativeSpeeds
from skdrive.kinematics import RobotRelativeSpeeds
from skdrive.kinematics import to_robot_relative


class TestFrames(unittest.TestCase):

    def test_to_robot_relative(self):
        command = FieldRelativeSpeeds(1.0, 0.0, 0.25)
        speeds = command.to_robot_relative(Rotation2d.from_degrees(90))
        self.assertIsInstance(speeds, RobotRelativeSpeeds)
        self.assertIsInstance(speeds, ChassisSpeeds)
        self.assertAlmostEqual(speeds.dx, 0.0)
        self.assertAlmostEqual(speeds.dy, -1.0)
        self.assertEqual(speeds.dtheta, 0.25)

    def test_module_function(self):
        command = FieldRelativeSpeeds(0.3, 0.4, 0.5)
        heading = Rotation2d(1.1)
        self.assertEqual(to_robot_relative(command, heading),
                         command.to_robot_relative(heading))
        with self.assertRaises(TypeError):
            to_robot_relative(ChassisSpeeds(0.3, 0.4, 0.5), heading)

    def test_matches_untyped_conversion(self):
        heading = Rotation2d(0.7)
        speeds = FieldRelativeSpeeds(2.0, -1.0, 0.1).to_robot_relative(
            heading)
        untyped = ChassisSpeeds.from_field_relative_speeds(
            2.0, -1.0, 0.1, heading)
        self.assertEqual(speeds, untyped)
        self.assertEqual(untyped, speeds)

    def test_eq_across_chassis_speeds(self):
        typed = RobotRelativeSpeeds(1.0, 2.0, 3.0)
        untyped = ChassisSpeeds(1.0, 2.0, 3.0)
        self.assertEqual(typed, untyped)
        self.assertEqual(hash(typed), hash(untyped))
        self.assertNotEqual(typed, ChassisSpeeds(1.0, 2.0, 0.0))
        self.assertNotEqual(FieldRelativeSpeeds(1.0, 2.0, 3.0), untyped)

    def test_field_speeds_are_not_chassis_speeds(self):
        self.assertNotIsInstance(FieldRelativeSpeeds(), ChassisSpeeds)

    def test_kinematics_rejects_field_speeds(self):
        kinematics = DifferentialDriveKinematics(0.5)
        with self.assertRaises(TypeError):
            kinematics.to_wheel_speeds(FieldRelativeSpeeds(1.0, 0.0, 0.0))
        with self.assertRaises(TypeError):
            kinematics.to_wheel_speeds((1.0, 0.0, 0.0))

        speeds = FieldRelativeSpeeds(1.0, 0.0, 0.0).to_robot_relative(
            Rotation2d())
        wheel_speeds = kinematics.to_wheel_speeds(speeds)
        self.assertEqual(wheel_speeds.left, 1.0)
        self.assertEqual(wheel_speeds.right, 1.0)
