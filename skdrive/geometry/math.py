from math import cos
from math import pi
from math import sin

import numpy as np


def _check_valid_vector2(vec):
    """Checks that the given planar vector is valid.

    Parameters
    ----------
    vec : list or tuple or numpy.ndarray
        vector of shape (2,) or batch of vectors of shape (n, 2).

    Returns
    -------
    vec : numpy.ndarray
        the vector converted to float numpy array.
    """
    vec = np.array(vec)
    if not np.issubdtype(vec.dtype, np.number):
        raise ValueError('vector must be specified as numeric numpy array')
    if vec.ndim not in (1, 2) or vec.shape[-1] != 2:
        raise ValueError(
            'vector must be specified as a 2-vector or nx2 ndarray. '
            'get shape {}'.format(vec.shape))
    return vec.astype(np.float64)


def rotation_matrix_2d(theta):
    """Return counter-clockwise planar rotation matrix.

    Parameters
    ----------
    theta : float
        rotation angle [rad].

    Returns
    -------
    matrix : numpy.ndarray
        2x2 rotation matrix.

    Examples
    --------
    >>> from numpy import pi
    >>> from skdrive.geometry.math import rotation_matrix_2d
    >>> rotation_matrix_2d(pi / 2.0).round(6)
    array([[ 0., -1.],
           [ 1.,  0.]])
    """
    c = cos(theta)
    s = sin(theta)
    return np.array([[c, -s],
                     [s, c]])


def rotate_vector_2d(vec, theta):
    """Rotate planar vector (or vectors) counter-clockwise by theta.

    Parameters
    ----------
    vec : list or numpy.ndarray
        vector of shape (2,) or vectors of shape (n, 2).
    theta : float
        rotation angle [rad].

    Returns
    -------
    rotated : numpy.ndarray
        rotated vector (or vectors). Same shape as `vec`.

    Examples
    --------
    >>> from numpy import pi
    >>> from skdrive.geometry.math import rotate_vector_2d
    >>> rotate_vector_2d([1, 0], pi).round(6)
    array([-1.,  0.])
    """
    vec = _check_valid_vector2(vec)
    matrix = rotation_matrix_2d(theta)
    if vec.ndim == 1:
        return matrix.dot(vec)
    return matrix.dot(vec.T).T


def angle_modulus(theta, minimum, maximum):
    """Wrap theta into [minimum, maximum).

    Parameters
    ----------
    theta : float
        angle to be wrapped.
    minimum : float
        lower bound of the range.
    maximum : float
        upper bound of the range.

    Returns
    -------
    theta : float
        wrapped angle.
    """
    modulus = maximum - minimum
    if modulus <= 0.0:
        raise ValueError(
            'maximum must be greater than minimum. get [{}, {})'.format(
                minimum, maximum))
    wrapped = (theta - minimum) % modulus + minimum
    # rounding can land exactly on the open upper bound
    if wrapped >= maximum:
        return minimum
    return wrapped


def normalize_angle(theta):
    """Wrap angle into [-pi, pi).

    Examples
    --------
    >>> from numpy import pi
    >>> from skdrive.geometry.math import normalize_angle
    >>> normalize_angle(3 * pi / 2)
    -1.5707963267948966
    """
    return angle_modulus(theta, -pi, pi)
