"""
Runtime configuration for skdrive.

Settings are kept per thread. Their initial values can be controlled with
environment variables:

``SKDRIVE_DISABLE_VALIDITY_CHECK``
    ``1``, ``true`` or ``yes`` disables input validity checks.
``SKDRIVE_ROTATION_TOLERANCE``
    tolerance used when comparing two rotations.
"""

from contextlib import contextmanager
import os
from threading import local


_DEFAULT_ROTATION_TOLERANCE = 1e-9

# Thread-local storage for configuration state
_state = local()


def _get_global_validity_check():
    if not hasattr(_state, 'validity_check'):
        env_disabled = os.environ.get(
            'SKDRIVE_DISABLE_VALIDITY_CHECK', '').lower()
        _state.validity_check = env_disabled not in ('1', 'true', 'yes')
    return _state.validity_check


def _check_tolerance(tolerance):
    tolerance = float(tolerance)
    if not tolerance > 0.0:
        raise ValueError(
            'rotation tolerance must be positive. get {}'.format(tolerance))
    return tolerance


def set_validity_check_enabled(enabled):
    """Set global input validity checking state.

    Parameters
    ----------
    enabled : bool
        If `False`, degenerate inputs are logged and replaced by
        a neutral value instead of raising `ValueError`.

    Examples
    --------
    >>> from skdrive.config import set_validity_check_enabled
    >>> set_validity_check_enabled(False)
    """
    _state.validity_check = bool(enabled)


def get_validity_check_enabled():
    """Return current input validity checking state.

    Returns
    -------
    bool
        Whether validity checking is enabled in the current context.
    """
    if getattr(_state, 'context_stack', None):
        return _state.context_stack[-1]
    return _get_global_validity_check()


@contextmanager
def validity_check(enabled=True):
    """Context manager to override validity checking temporarily.

    Parameters
    ----------
    enabled : bool
        Whether validity checking is enabled inside this context.

    Examples
    --------
    >>> from skdrive.config import validity_check
    >>> from skdrive.geometry import Rotation2d
    >>> with validity_check(False):
    ...     rot = Rotation2d.from_cos_sin(0.0, 0.0)
    >>> rot.radians
    0.0
    """
    if not hasattr(_state, 'context_stack'):
        _state.context_stack = []
    _state.context_stack.append(bool(enabled))
    try:
        yield
    finally:
        _state.context_stack.pop()


def set_rotation_tolerance(tolerance):
    """Set tolerance used to compare rotations.

    Parameters
    ----------
    tolerance : float
        Positive tolerance on the distance between (cos, sin) pairs.
    """
    _state.rotation_tolerance = _check_tolerance(tolerance)


def get_rotation_tolerance():
    """Return tolerance used to compare rotations.

    Returns
    -------
    float
        Current rotation tolerance.
    """
    if not hasattr(_state, 'rotation_tolerance'):
        env_value = os.environ.get('SKDRIVE_ROTATION_TOLERANCE')
        if env_value:
            _state.rotation_tolerance = _check_tolerance(env_value)
        else:
            _state.rotation_tolerance = _DEFAULT_ROTATION_TOLERANCE
    return _state.rotation_tolerance


def reset():
    """Drop all settings of the current thread.

    Subsequent reads fall back to environment variables and defaults.
    """
    for name in ('validity_check', 'rotation_tolerance', 'context_stack'):
        if hasattr(_state, name):
            delattr(_state, name)
