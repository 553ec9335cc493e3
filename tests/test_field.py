import random

import pytest

from silentpcg.field import F2, MODULUS, Field128


def test_f2_arithmetic():
    zero = F2.zero()
    one = F2.one()

    assert zero + zero == zero
    assert zero + one == one
    assert one + zero == one
    assert one + one == zero

    assert zero * zero == zero
    assert zero * one == one * zero
    assert one * one == one


def test_f2_predicates_and_inverse():
    assert F2.zero().is_zero()
    assert F2.one().is_one()
    assert not F2.one().is_zero()
    assert F2.one().inverse() == F2.one()
    with pytest.raises(ZeroDivisionError):
        F2.zero().inverse()


def test_f2_random_is_a_bit():
    rng = random.Random(7)
    values = {F2.random(rng) for _ in range(64)}
    assert values == {F2.zero(), F2.one()}


def test_f2_reduces_integers():
    assert F2(3) == F2.one()
    assert F2(4) == F2.zero()
    assert int(F2(5)) == 1


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_field128_arithmetic(seed):
    rng = random.Random(seed)
    a = Field128.random(rng)
    b = Field128.random(rng)
    c = Field128.random(rng)
    one = Field128.one()
    zero = Field128.zero()

    assert a + zero == a
    assert a * one == a
    assert a * zero == zero

    assert a + b == b + a
    assert a * b == b * a

    assert a + (b + c) == (a + b) + c
    assert a * (b * c) == (a * b) * c

    assert a * (b + c) == a * b + a * c

    assert a + (-a) == zero
    assert a - a == zero

    if a != zero:
        a_inv = a.inverse()
        assert a * a_inv == one
        assert a / a == one
    if b != zero:
        assert a / b == a * b.inverse()


def test_field128_from_int():
    x_f = Field128(12345678901234567890)
    assert int(x_f) == 12345678901234567890
    assert Field128(1) == Field128.one()
    assert Field128(0) == Field128.zero()


def test_field128_reduces_modulo_prime():
    assert Field128(MODULUS) == Field128.zero()
    assert Field128(MODULUS + 1) == Field128.one()
    assert Field128(-1) + Field128.one() == Field128.zero()


def test_field128_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Field128.zero().inverse()
    with pytest.raises(ZeroDivisionError):
        Field128.one() / Field128.zero()


def test_field128_to_bytes_round_trip():
    rng = random.Random(11)
    element = Field128.random(rng)
    encoded = element.to_bytes()
    assert len(encoded) == 16
    assert Field128(int.from_bytes(encoded, "little")) == element
    assert Field128.one().to_bytes() == b"\x01" + bytes(15)


def test_field128_to_f2_uses_parity():
    assert Field128(10).to_f2() == F2.zero()
    assert Field128(11).to_f2() == F2.one()


def test_field128_mixes_with_f2():
    delta = Field128(12345678901234567890)
    assert F2.one() * delta == delta
    assert delta * F2.zero() == Field128.zero()
    assert delta + F2.one() == delta + Field128.one()