import pytest

from bojkit.arrays import erase, has_pair_summing_to_100, insert, iterator_demo


def test_insert_sequence_from_exercise():
    values = [10, 20, 30]
    values = insert(values, 3, 40)
    assert values == [10, 20, 30, 40]
    values = insert(values, 1, 50)
    assert values == [10, 50, 20, 30, 40]
    values = insert(values, 0, 15)
    assert values == [15, 10, 50, 20, 30, 40]


def test_erase_sequence_from_exercise():
    values = [10, 50, 40, 30, 70, 20]
    values = erase(values, 4)
    assert values == [10, 50, 40, 30, 20]
    values = erase(values, 1)
    assert values == [10, 40, 30, 20]
    values = erase(values, 3)
    assert values == [10, 40, 30]


def test_insert_at_last_index_appends():
    result = insert([10, 20, 30], 2, 99)
    assert result[-1] == 99
    assert result[:3] == [10, 20, 30]


def test_insert_does_not_modify_input():
    original = [1, 2, 3]
    insert(original, 0, 7)
    erase(original, 0)
    assert original == [1, 2, 3]


@pytest.mark.parametrize("idx", [0, 1, 2, 4])
def test_insert_then_erase_round_trip(idx):
    values = [5, 6, 7, 8]
    assert erase(insert(values, idx, 42), idx) == values


def test_insert_grows_by_one():
    values = [3, 1, 4, 1, 5]
    for idx in range(len(values) + 1):
        result = insert(values, idx, 9)
        assert len(result) == len(values) + 1
        assert sorted(result) == sorted(values + [9])


def test_single_element_insert_at_front():
    assert insert([7], 0, 8) == [8, 7]


@pytest.mark.parametrize("idx", [-1, 4])
def test_insert_out_of_range(idx):
    with pytest.raises(IndexError):
        insert([1, 2, 3], idx, 0)


@pytest.mark.parametrize("idx", [-1, 3])
def test_erase_out_of_range(idx):
    with pytest.raises(IndexError):
        erase([1, 2, 3], idx)


def test_iterator_demo():
    result = iterator_demo()
    assert result.seen == 1
    assert result.items == [10, 6, 1, 5]


def test_pair_summing_to_100():
    assert has_pair_summing_to_100([30, 70]) is True
    assert has_pair_summing_to_100([30, 40, 20]) is False
    assert has_pair_summing_to_100([50]) is True
    assert has_pair_summing_to_100([]) is False


def test_pair_order_does_not_matter():
    assert has_pair_summing_to_100([1, 2, 99]) == has_pair_summing_to_100([99, 2, 1])


def test_pair_rejects_out_of_range():
    with pytest.raises(ValueError):
        has_pair_summing_to_100([101])