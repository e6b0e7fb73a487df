"""
Matrix multiplication kernels.

Two algorithms over flat row-major lists:

    blocked_multiply  - transpose-then-dot product, accumulating the inner
                        dimension in blocks of min(n_inner, 16)
    strassen_multiply - Strassen's seven-product recursion on operands
                        padded to a common power-of-two square

Both run all arithmetic through a Numerical capability.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.tolerances import MULTIPLY_BLOCK_SIZE
from pymatrix.math_utils import next_power_of_two
from pymatrix.matrix import _structure
from pymatrix.numerical import Numerical


def blocked_multiply(
    a: list[Any],
    a_rows: int,
    n_inner: int,
    b: list[Any],
    b_columns: int,
    numerical: Numerical,
) -> list[Any]:
    """
    Product of an a_rows x n_inner matrix and an n_inner x b_columns matrix.

    B is transposed once so both operands are read along contiguous runs;
    row j of the transpose starts at j * n_inner.
    """
    add, mul, zero = numerical.add, numerical.multiply, numerical.zero
    bt = _structure.transpose(b, n_inner, b_columns)
    block_size = min(n_inner, MULTIPLY_BLOCK_SIZE)

    result = [zero] * (a_rows * b_columns)
    for i in range(a_rows):
        a_offset = i * n_inner
        for j in range(b_columns):
            b_offset = j * n_inner
            acc = zero
            for start in range(0, n_inner, block_size):
                stop = min(start + block_size, n_inner)
                partial = zero
                for k in range(start, stop):
                    partial = add(partial, mul(a[a_offset + k], bt[b_offset + k]))
                acc = add(acc, partial)
            result[i * b_columns + j] = acc
    return result


def _quadrants(m: list[Any], n: int) -> tuple[list[Any], list[Any], list[Any], list[Any]]:
    h = n // 2
    return (
        _structure.block(m, n, 0, h, 0, h),
        _structure.block(m, n, 0, h, h, n),
        _structure.block(m, n, h, n, 0, h),
        _structure.block(m, n, h, n, h, n),
    )


def _strassen(a: list[Any], b: list[Any], n: int, numerical: Numerical) -> list[Any]:
    if n == 1:
        return [numerical.multiply(a[0], b[0])]

    def plus(x, y):
        return [numerical.add(p, q) for p, q in zip(x, y)]

    def minus(x, y):
        return [numerical.subtract(p, q) for p, q in zip(x, y)]

    h = n // 2
    a11, a12, a21, a22 = _quadrants(a, n)
    b11, b12, b21, b22 = _quadrants(b, n)

    p1 = _strassen(plus(a11, a22), plus(b11, b22), h, numerical)
    p2 = _strassen(plus(a21, a22), b11, h, numerical)
    p3 = _strassen(a11, minus(b12, b22), h, numerical)
    p4 = _strassen(a22, minus(b21, b11), h, numerical)
    p5 = _strassen(plus(a11, a12), b22, h, numerical)
    p6 = _strassen(minus(a21, a11), plus(b11, b12), h, numerical)
    p7 = _strassen(minus(a12, a22), plus(b21, b22), h, numerical)

    c11 = plus(minus(plus(p1, p4), p5), p7)
    c12 = plus(p3, p5)
    c21 = plus(p2, p4)
    c22 = plus(minus(p1, p2), plus(p3, p6))

    top = _structure.hstack(c11, c12, h, h, h)
    bottom = _structure.hstack(c21, c22, h, h, h)
    return top + bottom


def strassen_multiply(
    a: list[Any],
    a_rows: int,
    n_inner: int,
    b: list[Any],
    b_columns: int,
    numerical: Numerical,
) -> list[Any]:
    """
    Strassen product of conformable operands.

    Both operands are zero-padded to the same n x n square, n the next
    power of two covering every dimension, and the product is sliced back
    to a_rows x b_columns before returning.
    """
    n = next_power_of_two(max(a_rows, n_inner, b_columns))
    zero = numerical.zero
    padded_a = _structure.pad(a, a_rows, n_inner, n, n, zero)
    padded_b = _structure.pad(b, n_inner, b_columns, n, n, zero)
    product = _strassen(padded_a, padded_b, n, numerical)
    return _structure.block(product, n, 0, a_rows, 0, b_columns)
