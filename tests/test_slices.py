import pytest

from ekit.errors import IndexOutOfRangeError
from ekit.slices import add, calculate_capacity, delete


@pytest.mark.parametrize(
    "src, value, index, expected",
    [
        ([123, 100], 233, 0, [233, 123, 100]),
        ([123, 124, 125], 233, 1, [123, 233, 124, 125]),
        ([123, 100, 101, 102, 102, 102], 233, 5, [123, 100, 101, 102, 102, 233, 102]),
    ],
)
def test_add(src, value, index, expected):
    assert add(src, value, index) == expected


@pytest.mark.parametrize("index", [12, -1])
def test_add_out_of_range(index):
    with pytest.raises(IndexOutOfRangeError) as info:
        add([123, 100], 0, index)
    assert info.value.length == 2
    assert info.value.index == index


def test_add_leaves_source_untouched():
    src = [1, 2]
    add(src, 9, 0)
    assert src == [1, 2]


@pytest.mark.parametrize(
    "src, index, expected, removed",
    [
        ([123, 100], 0, [100], 123),
        ([123, 124, 125], 1, [123, 125], 124),
        ([123, 100, 101, 102, 102, 102], 5, [123, 100, 101, 102, 102], 102),
    ],
)
def test_delete(src, index, expected, removed):
    result, value = delete(src, index)
    assert result == expected
    assert value == removed


@pytest.mark.parametrize("index", [12, -1])
def test_delete_out_of_range(index):
    with pytest.raises(IndexOutOfRangeError) as info:
        delete([123, 100], index)
    assert info.value.length == 2
    assert info.value.index == index


@pytest.mark.parametrize(
    "capacity, length, expected",
    [
        (32, 6, 32),
        (1000, 20, 500),
        (1000, 400, 1000),
        (3000, 60, 1875),
        (3000, 2000, 3000),
    ],
)
def test_calculate_capacity(capacity, length, expected):
    new_capacity, changed = calculate_capacity(capacity, length)
    assert new_capacity == expected
    assert changed == (new_capacity != capacity)