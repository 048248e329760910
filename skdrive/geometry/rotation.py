from logging import getLogger
import math
from numbers import Number

import numpy as np

from skdrive.config import get_rotation_tolerance
from skdrive.config import get_validity_check_enabled


logger = getLogger(__name__)

# below this norm a (cos, sin) pair carries no direction.
_DEGENERATE_NORM = 1e-6


class Rotation2d(object):

    """Planar rotation (heading) of the robot or of a module.

    The angle is stored together with its cosine and sine. Rotations are
    immutable; every operation returns a new instance.

    Parameters
    ----------
    radians : float
        rotation angle [rad], counter-clockwise positive.

    Examples
    --------
    >>> from numpy import pi
    >>> from skdrive.geometry import Rotation2d
    >>> rot = Rotation2d(pi / 2.0)
    >>> rot.degrees
    90.0
    >>> (rot + Rotation2d.from_degrees(90)).degrees
    180.0
    >>> Rotation2d(pi) == Rotation2d(-pi)
    True
    """

    __slots__ = ('_radians', '_cos', '_sin')

    def __init__(self, radians=0.0):
        radians = float(radians)
        self._radians = radians
        self._cos = math.cos(radians)
        self._sin = math.sin(radians)

    @classmethod
    def _from_components(cls, radians, cos, sin):
        rot = cls.__new__(cls)
        rot._radians = radians
        rot._cos = cos
        rot._sin = sin
        return rot

    @classmethod
    def from_degrees(cls, degrees):
        """Create rotation from an angle in degrees.

        Parameters
        ----------
        degrees : float
            rotation angle [deg].

        Returns
        -------
        rot : skdrive.geometry.Rotation2d
            new rotation
        """
        return cls(math.radians(degrees))

    @classmethod
    def from_cos_sin(cls, x, y):
        """Create rotation from a (cos, sin) direction.

        The pair does not need to be normalized.

        Parameters
        ----------
        x : float
            x component (cosine direction).
        y : float
            y component (sine direction).

        Returns
        -------
        rot : skdrive.geometry.Rotation2d
            new rotation

        Raises
        ------
        ValueError
            If (x, y) is too close to the origin and validity checking
            is enabled.
        """
        x = float(x)
        y = float(y)
        magnitude = math.hypot(x, y)
        if magnitude > _DEGENERATE_NORM or math.isnan(magnitude):
            c = x / magnitude
            s = y / magnitude
            return cls._from_components(math.atan2(s, c), c, s)
        if get_validity_check_enabled():
            raise ValueError(
                'x and y components of Rotation2d are zero. '
                'get ({}, {})'.format(x, y))
        logger.warning(
            'x and y components of Rotation2d are zero (%s, %s), '
            'using the zero rotation', x, y)
        return cls()

    @property
    def radians(self):
        """Return angle [rad]

        Returns
        -------
        self._radians : float
            angle as given, not wrapped.
        """
        return self._radians

    @property
    def degrees(self):
        """Return angle [deg]

        Returns
        -------
        degrees : float
            angle converted from radians, not wrapped.
        """
        return math.degrees(self._radians)

    @property
    def cos(self):
        """Return cosine of this rotation

        Returns
        -------
        self._cos : float
            cosine of the angle.
        """
        return self._cos

    @property
    def sin(self):
        """Return sine of this rotation

        Returns
        -------
        self._sin : float
            sine of the angle.
        """
        return self._sin

    @property
    def tan(self):
        """Return tangent of this rotation

        Returns
        -------
        tan : float
            tangent of the angle. Signed infinity when the cosine
            is exactly zero.

        Examples
        --------
        >>> from skdrive.geometry import Rotation2d
        >>> Rotation2d.from_cos_sin(0.0, -1.0).tan
        -inf
        """
        if self._cos == 0.0:
            return math.copysign(math.inf, self._sin)
        return self._sin / self._cos

    def as_matrix(self):
        """Return 2x2 rotation matrix.

        Returns
        -------
        matrix : numpy.ndarray
            rotation matrix shape of (2, 2)
        """
        return np.array([[self._cos, -self._sin],
                         [self._sin, self._cos]])

    def rotate_by(self, other):
        """Return this rotation composed with other.

        Parameters
        ----------
        other : skdrive.geometry.Rotation2d
            rotation applied after this rotation.

        Returns
        -------
        rot : skdrive.geometry.Rotation2d
            rotation by the sum of the two angles.
        """
        if not isinstance(other, Rotation2d):
            raise TypeError('Rotation2d can only be rotated by Rotation2d. '
                            'get {}'.format(type(other)))
        return Rotation2d.from_cos_sin(
            self._cos * other._cos - self._sin * other._sin,
            self._cos * other._sin + self._sin * other._cos)

    def inverse(self):
        return Rotation2d._from_components(
            -self._radians, self._cos, -self._sin)

    def __add__(self, other):
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self.rotate_by(other)

    def __sub__(self, other):
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self.rotate_by(other.inverse())

    def __neg__(self):
        return self.inverse()

    def __mul__(self, scalar):
        if isinstance(scalar, Number):
            return Rotation2d(self._radians * scalar)
        raise TypeError("Rotation2d's multiplication is only supported "
                        'Number. get {}'.format(type(scalar)))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, Number):
            return Rotation2d(self._radians / scalar)
        raise TypeError("Rotation2d's division is only supported "
                        'Number. get {}'.format(type(scalar)))

    def __eq__(self, other):
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return math.hypot(self._cos - other._cos,
                          self._sin - other._sin) < get_rotation_tolerance()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __reduce__(self):
        return (Rotation2d._from_components,
                (self._radians, self._cos, self._sin))

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        prefix = self.__class__.__name__
        return '#<{} {} radians: {} degrees: {}>'.format(
            prefix,
            hex(id(self)),
            self._radians,
            self.degrees)
