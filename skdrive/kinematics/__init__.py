# flake8: noqa

from .chassis_speeds import ChassisSpeeds
from .chassis_speeds import from_field_relative_speeds

from .swerve_module_state import SwerveModuleState

from .frames import FieldRelativeSpeeds
from .frames import RobotRelativeSpeeds
from .frames import to_robot_relative

from .differential import DifferentialDriveKinematics
from .differential import DifferentialDriveWheelSpeeds

from .mecanum import MecanumDriveKinematics
from .mecanum import MecanumDriveWheelSpeeds
