"""4x4 matrix and quaternion helpers using column-vector conventions.

Matrices are ``numpy`` arrays of shape (4, 4) indexed ``[row, column]`` and
applied as ``matrix @ vector``.  Quaternions are arrays ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

Vec = Union[Sequence[float], np.ndarray]

_QUAT_EPSILON = float(np.finfo(np.float32).eps)


def _vec3(value: Vec) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def identity() -> np.ndarray:
    """Return a fresh 4x4 identity matrix."""
    return np.eye(4)


def translate(matrix: np.ndarray, offset: Vec) -> np.ndarray:
    """Return ``matrix`` multiplied by a translation by ``offset``."""
    t = np.eye(4)
    t[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ t


def rotate(matrix: np.ndarray, angle: float, axis: Vec) -> np.ndarray:
    """Return ``matrix`` multiplied by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    r = np.eye(4)
    r[:3, :3] = [
        [c + x * x * k, x * y * k - z * s, x * z * k + y * s],
        [y * x * k + z * s, c + y * y * k, y * z * k - x * s],
        [z * x * k - y * s, z * y * k + x * s, c + z * z * k],
    ]
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix: np.ndarray, factors: Union[float, Vec]) -> np.ndarray:
    """Return ``matrix`` multiplied by a scaling; ``factors`` may be a scalar or a 3-vector."""
    s = np.eye(4)
    s[[0, 1, 2], [0, 1, 2]] = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    return np.asarray(matrix, dtype=float) @ s


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0 or near == far:
        raise ValueError("aspect must be non-zero and near must differ from far")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye: Vec, center: Vec, up: Vec) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` toward ``center``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    m = np.eye(4)
    m[0, :3] = side
    m[1, :3] = upward
    m[2, :3] = -forward
    m[0, 3] = -float(side @ eye_v)
    m[1, 3] = -float(upward @ eye_v)
    m[2, 3] = float(forward @ eye_v)
    return m


def mix(a, b, t: float) -> np.ndarray:
    """Linear interpolation ``a * (1 - t) + b * t``."""
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    return a_arr * (1.0 - t) + b_arr * t


def quat_slerp(a, b, t: float) -> np.ndarray:
    """Spherical interpolation of quaternions along the shortest path."""
    qa = np.asarray(a, dtype=float).reshape(4)
    qb = np.asarray(b, dtype=float).reshape(4)
    cos_theta = float(qa @ qb)
    if cos_theta < 0.0:
        qb = -qb
        cos_theta = -cos_theta
    if cos_theta > 1.0 - _QUAT_EPSILON:
        return mix(qa, qb, t)
    angle = math.acos(cos_theta)
    return (math.sin((1.0 - t) * angle) * qa + math.sin(t * angle) * qb) / math.sin(angle)


def quat_to_mat4(q) -> np.ndarray:
    """Rotation matrix of a unit quaternion ``(w, x, y, z)``."""
    w, x, y, z = np.asarray(q, dtype=float).reshape(4)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def mat4_from_row_major(values) -> np.ndarray:
    """Build a matrix from 16 values (or nested rows) given in row-major order."""
    arr = np.array(values, dtype=float)
    if arr.size != 16:
        raise ValueError(f"expected 16 values, got {arr.size}")
    return arr.reshape(4, 4)