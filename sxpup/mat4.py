"""4x4 matrices stored as flat, row-major lists of 16 floats."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "SingularMatrixError",
    "zero",
    "identity",
    "add",
    "sub",
    "mul",
    "mul_vec",
    "tmul_vec",
    "transpose",
    "inverse",
    "from_mat3",
    "format_matrix",
]


class SingularMatrixError(ValueError):
    """Raised when a matrix with zero determinant is inverted."""


def _matrix(m: Sequence[float], size: int = 16) -> list[float]:
    values = [float(x) for x in m]
    if len(values) != size:
        raise ValueError(f"expected {size} values, got {len(values)}")
    return values


def zero() -> list[float]:
    """Return the zero matrix."""
    return [0.0] * 16


def identity() -> list[float]:
    """Return the identity matrix."""
    m = zero()
    m[0] = m[5] = m[10] = m[15] = 1.0
    return m


def add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum ``a + b``."""
    return [x + y for x, y in zip(_matrix(a), _matrix(b))]


def sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise difference ``a - b``."""
    return [x - y for x, y in zip(_matrix(a), _matrix(b))]


def mul(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the matrix product ``a * b``."""
    a, b = _matrix(a), _matrix(b)
    return [
        sum(a[4 * j + k] * b[4 * k + i] for k in range(4))
        for j in range(4)
        for i in range(4)
    ]


def mul_vec(a: Sequence[float], v: Sequence[float]) -> list[float]:
    """Return the product of matrix ``a`` with the 4-vector ``v``."""
    a, v = _matrix(a), _matrix(v, 4)
    return [sum(a[4 * j + i] * v[i] for i in range(4)) for j in range(4)]


def tmul_vec(a: Sequence[float], v: Sequence[float]) -> list[float]:
    """Return the product of the transpose of ``a`` with the 4-vector ``v``."""
    a, v = _matrix(a), _matrix(v, 4)
    return [sum(a[4 * i + j] * v[i] for i in range(4)) for j in range(4)]


def transpose(m: Sequence[float]) -> list[float]:
    """Return the transpose of ``m``."""
    m = _matrix(m)
    return [m[4 * i + k] for k in range(4) for i in range(4)]


def _det3(m: list[float], rows: list[int], cols: list[int]) -> float:
    (r0, r1, r2), (c0, c1, c2) = rows, cols

    def at(r: int, c: int) -> float:
        return m[4 * r + c]

    return (
        at(r0, c0) * (at(r1, c1) * at(r2, c2) - at(r1, c2) * at(r2, c1))
        - at(r0, c1) * (at(r1, c0) * at(r2, c2) - at(r1, c2) * at(r2, c0))
        + at(r0, c2) * (at(r1, c0) * at(r2, c1) - at(r1, c1) * at(r2, c0))
    )


def _cofactor(m: list[float], row: int, col: int) -> float:
    rows = [r for r in range(4) if r != row]
    cols = [c for c in range(4) if c != col]
    sign = -1.0 if (row + col) % 2 else 1.0
    return sign * _det3(m, rows, cols)


def inverse(m: Sequence[float]) -> list[float]:
    """Return the inverse of ``m``.

    Raises :class:`SingularMatrixError` if the determinant is zero.
    """
    m = _matrix(m)
    adjugate = [_cofactor(m, c, r) for r in range(4) for c in range(4)]
    det = sum(m[j] * adjugate[4 * j] for j in range(4))
    if det == 0:
        raise SingularMatrixError("matrix is singular")
    scale = 1.0 / det
    return [x * scale for x in adjugate]


def from_mat3(
    mat3: Sequence[float], trans: Sequence[float] | None = None
) -> list[float]:
    """Build an affine 4x4 matrix from a 3x3 matrix and optional translation."""
    r = _matrix(mat3, 9)
    t = _matrix(trans, 3) if trans is not None else [0.0, 0.0, 0.0]
    return [
        r[0], r[1], r[2], t[0],
        r[3], r[4], r[5], t[1],
        r[6], r[7], r[8], t[2],
        0.0, 0.0, 0.0, 1.0,
    ]


def format_matrix(m: Sequence[float]) -> str:
    """Format ``m`` as four lines of four ``%g`` numbers."""
    m = _matrix(m)
    return "".join(
        "%g %g %g %g\n" % tuple(m[4 * row : 4 * row + 4]) for row in range(4)
    )