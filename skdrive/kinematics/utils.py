import numpy as np


def check_max_speed(attainable_max_speed):
    """Checks that the attainable max wheel speed is valid.

    Parameters
    ----------
    attainable_max_speed : float
        absolute max speed a wheel can reach.

    Returns
    -------
    attainable_max_speed : float
        the value converted to float.
    """
    attainable_max_speed = float(attainable_max_speed)
    if not attainable_max_speed > 0.0:
        raise ValueError('attainable_max_speed must be positive. '
                         'get {}'.format(attainable_max_speed))
    return attainable_max_speed


def normalize_wheel_speeds(wheel_speeds, attainable_max_speed):
    """Scale wheel speeds so none exceeds the attainable maximum.

    Parameters
    ----------
    wheel_speeds : list or numpy.ndarray
        speed of each wheel.
    attainable_max_speed : float
        absolute max speed a wheel can reach.

    Returns
    -------
    wheel_speeds : numpy.ndarray
        scaled speeds. Ratios between wheels are kept and speeds
        already within the limit are returned unchanged.

    Examples
    --------
    >>> from skdrive.kinematics.utils import normalize_wheel_speeds
    >>> normalize_wheel_speeds([4.0, -2.0], 2.0)
    array([ 2., -1.])
    """
    attainable_max_speed = check_max_speed(attainable_max_speed)
    wheel_speeds = np.array(wheel_speeds, dtype=np.float64)
    real_max_speed = np.max(np.abs(wheel_speeds))
    if real_max_speed > attainable_max_speed:
        wheel_speeds = wheel_speeds * (attainable_max_speed / real_max_speed)
    return wheel_speeds
