from dataclasses import dataclass
from dataclasses import field

from skdrive.geometry.rotation import Rotation2d


@dataclass(frozen=True)
class SwerveModuleState:
    """State of one swerve module.

    Speed is not clamped and angle is not normalized here; the actuator
    layer consuming this state owns both conventions.

    Instances are unhashable, like :class:`skdrive.geometry.Rotation2d`,
    whose tolerance based equality has no consistent hash.

    Parameters
    ----------
    speed : float
        speed of the wheel of the module.
    angle : skdrive.geometry.Rotation2d
        steering angle of the module.
    """
    speed: float = 0.0
    angle: Rotation2d = field(default_factory=Rotation2d)

    __hash__ = None
