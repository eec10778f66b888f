import pytest

from dsakit.linked_list import LinkedList


def build_example():
    items = LinkedList()
    items.append(10)
    items.append(20)
    items.append(30)
    items.prepend(5)
    items.insert(2, 15)
    return items


def test_worked_example():
    items = build_example()
    assert str(items) == "5 -> 10 -> 15 -> 20 -> 30 -> NULL"
    assert items[3] == 20

    items.pop_front()
    items.pop_back()
    items.remove_at(1)
    assert str(items) == "10 -> 20 -> NULL"
    assert len(items) == 2


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert str(items) == "NULL"


def test_constructor_values_and_iteration():
    values = [3, 1, 4, 1, 5]
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)
    assert [items[i] for i in range(len(values))] == values


def test_insert_matches_python_list():
    items = LinkedList([1, 2, 3])
    model = [1, 2, 3]
    for index, value in [(0, 10), (4, 20), (2, 30), (len(model) + 2, 40)]:
        items.insert(index, value)
        model.insert(index, value)
        assert list(items) == model
        assert len(items) == len(model)
        assert items[len(items) - 1] == model[-1]


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_invalid_index(index):
    items = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.insert(index, 99)
    assert list(items) == [1, 2, 3]


@pytest.mark.parametrize("index", [-1, 3])
def test_getitem_invalid_index(index):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3])[index]


def test_getitem_rejects_non_int():
    with pytest.raises(TypeError):
        LinkedList([1])["0"]


def test_pop_front_and_back_return_values():
    items = LinkedList([1, 2, 3])
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]


def test_pop_back_single_element_then_reuse():
    items = LinkedList([7])
    assert items.pop_back() == 7
    assert len(items) == 0
    items.append(8)
    assert list(items) == [8]
    assert items[0] == 8


def test_pop_front_single_element_then_append():
    items = LinkedList([7])
    assert items.pop_front() == 7
    items.append(9)
    items.append(10)
    assert list(items) == [9, 10]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


@pytest.mark.parametrize("index", [-1, 2])
def test_remove_at_invalid_index(index):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.remove_at(index)
    assert len(items) == 2