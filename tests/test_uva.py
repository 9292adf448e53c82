import pytest

from algokit.uva import is_light_on, process_queue


@pytest.mark.parametrize("k", [1, 2, 3, 10, 65535, 10**6])
def test_squares_are_on(k):
    assert is_light_on(k * k)
    assert not is_light_on(k * k + 1)


def test_negative_rejected():
    with pytest.raises(ValueError):
        is_light_on(-1)


def test_serving_in_order():
    assert process_queue(5, ["N"] * 5) == list(range(1, 6))


def test_serving_wraps_around():
    served = process_queue(3, ["N"] * 7)
    assert served[:3] == served[3:6]
    assert served[6] == served[0]


def test_expedite():
    assert process_queue(5, ["N", ("E", 4), "N", "N"]) == [1, 4, 2]


def test_expedite_outsider():
    assert process_queue(5, [("E", 5000), "N", "N"]) == [5000, 1]


def test_queue_is_capped():
    served = process_queue(2000, ["N"] * 1000)
    assert served[:999] == list(range(1, 1000))
    assert served[999] == served[0]


def test_errors():
    with pytest.raises(ValueError):
        process_queue(0, ["N"])
    with pytest.raises(ValueError):
        process_queue(3, ["X"])
    with pytest.raises(ValueError):
        process_queue(3, [("E",)])