import math
from numbers import Number

import numpy as np

from skdrive.geometry.math import _check_valid_vector2
from skdrive.geometry.rotation import Rotation2d


_EQUALITY_TOLERANCE = 1e-9


class Translation2d(object):

    """Planar translation, e.g. a wheel location on the chassis.

    x is forward and y is left of the robot center.

    Parameters
    ----------
    x : float
        x component.
    y : float
        y component.

    Examples
    --------
    >>> from skdrive.geometry import Rotation2d
    >>> from skdrive.geometry import Translation2d
    >>> t = Translation2d(3.0, 4.0)
    >>> t.norm
    5.0
    >>> t.rotate_by(Rotation2d.from_degrees(90)).as_array().round(6)
    array([-4.,  3.])
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x=0.0, y=0.0):
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def from_array(cls, vec):
        x, y = _check_valid_vector2(vec).reshape(2)
        return cls(x, y)

    @classmethod
    def from_polar(cls, distance, angle):
        """Create translation from distance and direction.

        Parameters
        ----------
        distance : float
            norm of the translation.
        angle : skdrive.geometry.Rotation2d
            direction of the translation.
        """
        return cls(distance * angle.cos, distance * angle.sin)

    @property
    def x(self):
        """Return x element

        Returns
        -------
        self._x : float
            x component (forward).
        """
        return self._x

    @property
    def y(self):
        """Return y element

        Returns
        -------
        self._y : float
            y component (left).
        """
        return self._y

    @property
    def norm(self):
        """Return euclidean norm

        Returns
        -------
        norm : float
            distance from the origin.
        """
        return math.hypot(self._x, self._y)

    @property
    def angle(self):
        """Return direction of this translation

        Returns
        -------
        angle : skdrive.geometry.Rotation2d
            angle of (x, y) from the x axis.

        Raises
        ------
        ValueError
            If this translation is zero and validity checking is
            enabled.
        """
        return Rotation2d.from_cos_sin(self._x, self._y)

    def distance(self, other):
        return math.hypot(other._x - self._x, other._y - self._y)

    def rotate_by(self, rotation):
        """Rotate this translation counter-clockwise about the origin.

        Parameters
        ----------
        rotation : skdrive.geometry.Rotation2d
            rotation to apply.

        Returns
        -------
        translation : skdrive.geometry.Translation2d
            rotated translation.
        """
        return Translation2d(
            self._x * rotation.cos - self._y * rotation.sin,
            self._x * rotation.sin + self._y * rotation.cos)

    def as_array(self):
        return np.array([self._x, self._y])

    def __add__(self, other):
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self._x + other._x, self._y + other._y)

    def __sub__(self, other):
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self._x - other._x, self._y - other._y)

    def __neg__(self):
        return Translation2d(-self._x, -self._y)

    def __mul__(self, scalar):
        if isinstance(scalar, Number):
            return Translation2d(self._x * scalar, self._y * scalar)
        raise TypeError("Translation2d's multiplication is only supported "
                        'Number. get {}'.format(type(scalar)))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, Number):
            return Translation2d(self._x / scalar, self._y / scalar)
        raise TypeError("Translation2d's division is only supported "
                        'Number. get {}'.format(type(scalar)))

    def __eq__(self, other):
        if not isinstance(other, Translation2d):
            return NotImplemented
        return (abs(self._x - other._x) < _EQUALITY_TOLERANCE
                and abs(self._y - other._y) < _EQUALITY_TOLERANCE)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __reduce__(self):
        return (Translation2d, (self._x, self._y))

    def __repr__(self):
        return self.__str__()

    def __str__(self):
        prefix = self.__class__.__name__
        return '#<{} {} x: {} y: {}>'.format(
            prefix, hex(id(self)), self._x, self._y)
