import pytest

from chessbits.misc import PRNG, HashTable, RunningAverage, mul_hi64


def test_prng_is_deterministic():
    a = PRNG(1070372)
    b = PRNG(1070372)
    assert [a.rand() for _ in range(20)] == [b.rand() for _ in range(20)]


def test_prng_different_seeds_differ():
    a = PRNG(728)
    b = PRNG(8977)
    assert [a.rand() for _ in range(5)] != [b.rand() for _ in range(5)]


def test_prng_zero_seed_rejected():
    with pytest.raises(ValueError):
        PRNG(0)


def test_prng_values_fit_64_bits():
    rng = PRNG(44560)
    for _ in range(100):
        assert 0 <= rng.rand() < 2**64


def test_sparse_rand_has_few_bits():
    rng = PRNG(54343)
    samples = [rng.sparse_rand() for _ in range(400)]
    assert all(0 <= x < 2**64 for x in samples)
    average_bits = sum(x.bit_count() for x in samples) / len(samples)
    assert average_bits < 16


def test_mul_hi64_small_product_is_zero():
    assert mul_hi64(123456789, 1) == 0


def test_mul_hi64_shift_identity():
    a = 0xDEADBEEFCAFEBABE
    assert mul_hi64(a, 1 << 32) == a >> 32


def test_mul_hi64_bounds_product():
    a, b = 0x9E3779B97F4A7C15, 0xC2B2AE3D27D4EB4F
    hi = mul_hi64(a, b)
    assert hi * 2**64 <= a * b < (hi + 1) * 2**64


def test_running_average_set_and_value():
    avg = RunningAverage()
    avg.set(10, 2)
    assert avg.value() == 5


def test_running_average_truncates_toward_zero():
    avg = RunningAverage()
    avg.set(-7, 2)
    assert avg.value() == -3


def test_running_average_stable_under_same_value():
    avg = RunningAverage()
    avg.set(5, 1)
    for _ in range(50):
        avg.update(5)
    assert avg.value() == 5


def test_running_average_converges():
    avg = RunningAverage()
    avg.set(0, 1)
    for _ in range(100000):
        avg.update(100)
    assert avg.value() in (99, 100)


def test_running_average_is_greater():
    avg = RunningAverage()
    avg.set(1, 2)
    assert avg.is_greater(1, 3)
    assert not avg.is_greater(1, 2)
    assert not avg.is_greater(2, 3)


def test_running_average_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        RunningAverage().set(1, 0)


def test_hashtable_same_key_same_entry():
    table = HashTable(dict, 8)
    table[42]["x"] = 1
    assert table[42] == {"x": 1}
    assert table[42] is table[42 + 8]


def test_hashtable_uses_low_32_bits():
    table = HashTable(list, 16)
    assert table[7] is table[7 + (1 << 32)]


def test_hashtable_distinct_slots():
    table = HashTable(list, 16)
    assert table[1] is not table[2]
    assert len(table) == 16


@pytest.mark.parametrize("size", [0, 3, 12, -4])
def test_hashtable_rejects_bad_size(size):
    with pytest.raises(ValueError):
        HashTable(list, size)