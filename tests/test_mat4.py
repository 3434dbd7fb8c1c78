import pytest

from sxpup import mat4

SAMPLE = [
    2.0, 0.0, 1.0, 3.0,
    1.0, 3.0, 0.0, -1.0,
    0.0, 1.0, 4.0, 2.0,
    0.0, 0.0, 0.0, 1.0,
]
OTHER = [
    1.0, 2.0, 0.0, 0.0,
    0.0, 1.0, 5.0, 1.0,
    3.0, 0.0, 1.0, 0.0,
    1.0, 1.0, 1.0, 1.0,
]


def test_zero_is_additive_neutral():
    assert mat4.add(mat4.zero(), SAMPLE) == SAMPLE
    assert mat4.zero() == [0.0] * 16


def test_identity_is_multiplicative_neutral():
    assert mat4.mul(mat4.identity(), SAMPLE) == SAMPLE
    assert mat4.mul(SAMPLE, mat4.identity()) == SAMPLE


def test_add_sub_round_trip():
    assert mat4.sub(mat4.add(SAMPLE, OTHER), OTHER) == SAMPLE


def test_mul_matches_successive_vector_products():
    v = [1.0, -2.0, 0.5, 3.0]
    combined = mat4.mul_vec(mat4.mul(SAMPLE, OTHER), v)
    stepwise = mat4.mul_vec(SAMPLE, mat4.mul_vec(OTHER, v))
    assert combined == pytest.approx(stepwise)


def test_mul_vec_identity():
    v = [4.0, 5.0, 6.0, 1.0]
    assert mat4.mul_vec(mat4.identity(), v) == v


def test_tmul_vec_uses_transpose():
    v = [1.0, 2.0, 3.0, 4.0]
    assert mat4.tmul_vec(SAMPLE, v) == mat4.mul_vec(mat4.transpose(SAMPLE), v)


def test_transpose_twice_is_original():
    t = mat4.transpose(SAMPLE)
    assert t[1] == SAMPLE[4]
    assert mat4.transpose(t) == SAMPLE


def test_inverse_times_matrix_is_identity():
    inv = mat4.inverse(SAMPLE)
    assert mat4.mul(inv, SAMPLE) == pytest.approx(mat4.identity(), abs=1e-12)
    assert mat4.mul(SAMPLE, inv) == pytest.approx(mat4.identity(), abs=1e-12)


def test_inverse_of_identity():
    assert mat4.inverse(mat4.identity()) == mat4.identity()


def test_singular_matrix_raises():
    with pytest.raises(mat4.SingularMatrixError):
        mat4.inverse(mat4.zero())
    repeated = SAMPLE[:4] * 4
    with pytest.raises(mat4.SingularMatrixError):
        mat4.inverse(repeated)


def test_from_mat3_with_translation():
    rot = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]
    m = mat4.from_mat3(rot, [10.0, 11.0, 12.0])
    assert m == [
        1.0, 2.0, 3.0, 10.0,
        4.0, 5.0, 6.0, 11.0,
        7.0, 8.0, 9.0, 12.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def test_from_mat3_without_translation():
    rot = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
    assert mat4.from_mat3(rot) == mat4.identity()


def test_format_identity():
    assert mat4.format_matrix(mat4.identity()) == (
        "1 0 0 0\n0 1 0 0\n0 0 1 0\n0 0 0 1\n"
    )


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        mat4.transpose([1.0, 2.0, 3.0])