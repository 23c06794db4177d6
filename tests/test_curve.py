import pytest

from keypair import curve
from keypair.curve import has_even_y, is_point, is_point_compressed, is_private, is_x_coord, lift_x, point_from_scalar
from keypair.errors import ConstructorError, OutOfRangeError
from keypair.field import SECP256K1_FIELD_SIZE as P, SECP256K1_G, SECP256K1_ORDER as N

from test_utils import G, G_X, G_Y, NOT_ON_CURVE_X, PRIVATE_KEY_BYTES, point_mul, point_to_bytes


def on_curve(point: bytes) -> bool:
    x = int.from_bytes(point[1:33], 'big')
    y = int.from_bytes(point[33:65], 'big')
    return (y * y - x**3 - 7) % P == 0


def test_lift_x():
    point = lift_x(G_X)

    assert len(point) == 65
    assert point[0] == 0x04
    assert point[1:33] == G_X
    assert on_curve(point)
    assert point[33:65] in (G_Y, (P - G[1]).to_bytes(32, 'big'))


def test_lift_x_parity():
    # the generator has an even y
    assert lift_x(G_X, 0x02) == b'\x04' + G_X + G_Y
    assert lift_x(G_X, 0x03) == b'\x04' + G_X + (P - G[1]).to_bytes(32, 'big')
    assert has_even_y(lift_x(G_X, 0x02))
    assert not has_even_y(lift_x(G_X, 0x03))


@pytest.mark.parametrize("x", [0, P, P + 1, 2**256 - 1])
def test_lift_x_out_of_range(x: int):
    with pytest.raises(OutOfRangeError):
        lift_x(x.to_bytes(32, 'big'))


@pytest.mark.parametrize("length", [0, 31, 33, 65])
def test_lift_x_wrong_length(length: int):
    with pytest.raises(ConstructorError):
        lift_x(bytes([1] * length))


def test_lift_x_wrong_parity():
    with pytest.raises(ConstructorError):
        lift_x(G_X, 0x04)


def test_lift_x_not_on_curve():
    with pytest.raises(OutOfRangeError):
        lift_x(NOT_ON_CURVE_X)


def test_is_x_coord():
    assert is_x_coord(G[0])
    assert not is_x_coord(0)
    assert not is_x_coord(P)
    assert not is_x_coord(int.from_bytes(NOT_ON_CURVE_X, 'big'))


def test_has_even_y_wrong_input():
    with pytest.raises(ConstructorError):
        has_even_y(b'\x02' + G_X)


def test_point_from_scalar():
    one = (1).to_bytes(32, 'big')
    assert point_from_scalar(one) == b'\x02' + G_X
    assert point_from_scalar(one, compressed=False) == b'\x04' + G_X + G_Y

    assert point_from_scalar(bytes(32)) is None
    assert point_from_scalar(N.to_bytes(32, 'big')) is None


def test_point_from_scalar_matches_reference():
    for k in [2, 3, 7, N - 1, int.from_bytes(PRIVATE_KEY_BYTES, 'big')]:
        expected = point_mul(G, k)
        scalar = k.to_bytes(32, 'big')
        assert point_from_scalar(scalar) == point_to_bytes(expected)
        assert point_from_scalar(scalar, compressed=False) == point_to_bytes(expected, compressed=False)


def test_lift_x_agrees_with_curve_library():
    for k in [2, 3, 7, int.from_bytes(PRIVATE_KEY_BYTES, 'big')]:
        compressed = point_from_scalar(k.to_bytes(32, 'big'))
        uncompressed = point_from_scalar(k.to_bytes(32, 'big'), compressed=False)
        assert lift_x(compressed[1:], compressed[0]) == uncompressed


def test_is_private():
    assert is_private((1).to_bytes(32, 'big'))
    assert is_private((N - 1).to_bytes(32, 'big'))
    assert not is_private(bytes(32))
    assert not is_private(N.to_bytes(32, 'big'))
    assert not is_private(bytes([1] * 31))


def test_is_point():
    assert is_point(b'\x02' + G_X)
    assert is_point(b'\x04' + G_X + G_Y)
    assert is_point_compressed(b'\x02' + G_X)
    assert not is_point_compressed(b'\x04' + G_X + G_Y)
    assert not is_point(b'\x02' + NOT_ON_CURVE_X)
    assert not is_point(G_X)


def test_point_from_scalar_rejection_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level("DEBUG", logger=curve.__name__):
        assert point_from_scalar(bytes(32)) is None
    assert "rejected" in caplog.text


def test_generator_constant():
    x, y = SECP256K1_G
    assert (y * y - x**3 - 7) % P == 0
    assert point_from_scalar((1).to_bytes(32, 'big'), compressed=False) == b'\x04' + G_X + G_Y
