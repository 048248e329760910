# flake8: noqa

from .rotation import Rotation2d
from .translation import Translation2d

from .math import angle_modulus
from .math import normalize_angle
from .math import rotate_vector_2d
from .math import rotation_matrix_2d
