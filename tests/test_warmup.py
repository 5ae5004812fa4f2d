import pytest

from algodrills.warmup import counting_valleys, jumping_on_clouds, sock_merchant


def test_sock_merchant_sample():
    assert sock_merchant([10, 20, 20, 10, 10, 30, 50, 10, 20]) == 3


@pytest.mark.parametrize("pairs", [1, 2, 7])
def test_sock_merchant_single_colour(pairs):
    assert sock_merchant([5] * (2 * pairs)) == pairs
    assert sock_merchant([5] * (2 * pairs + 1)) == pairs


def test_sock_merchant_all_distinct_has_no_pairs():
    assert sock_merchant(range(10)) == sock_merchant([])


def test_sock_merchant_order_does_not_matter():
    socks = [1, 2, 1, 2, 1, 3, 3, 3, 2]
    assert sock_merchant(socks) == sock_merchant(sorted(socks))
    assert sock_merchant(socks) == sock_merchant(reversed(socks))


def test_counting_valleys_sample():
    assert counting_valleys("UDDDUDUU") == 1


@pytest.mark.parametrize("valleys", [1, 3, 10])
def test_counting_valleys_repeated_dips(valleys):
    assert counting_valleys("DU" * valleys) == valleys


def test_counting_valleys_mountains_are_not_valleys():
    assert counting_valleys("UD" * 4) == counting_valleys("")


def test_counting_valleys_deep_valley_counts_once():
    assert counting_valleys("DDDUUU") == counting_valleys("DU")


def test_jumping_on_clouds_sample():
    assert jumping_on_clouds([0, 0, 1, 0, 0, 1, 0]) == 4


@pytest.mark.parametrize("double_jumps", [1, 2, 5])
def test_jumping_on_clouds_all_safe(double_jumps):
    assert jumping_on_clouds([0] * (2 * double_jumps + 1)) == double_jumps


def test_jumping_on_clouds_single_cloud_needs_no_jump():
    assert jumping_on_clouds([0]) == jumping_on_clouds([])


def test_jumping_on_clouds_bounds():
    clouds = [0, 1, 0, 0, 0, 1, 0, 0, 1, 0]
    jumps = jumping_on_clouds(clouds)
    last = len(clouds) - 1
    assert (last + 1) // 2 <= jumps <= last