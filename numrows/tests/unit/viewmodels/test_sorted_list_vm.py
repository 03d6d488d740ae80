import random

import pytest

from numrows.domain.edits import Delete, Initial, Insert
from numrows.domain.errors import OutOfRangeError
from numrows.viewmodels.sorted_list_vm import SortedListVM


class _FixedRandom:
    def __init__(self, *values):
        self.values = list(values)
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.values.pop(0)


def _vm_with_recorder(items=(1, 2, 3), **kwargs):
    states = []
    vm = SortedListVM(items, on_state_changed=states.append, **kwargs)
    return vm, states


def test_constructor_starts_with_initial_edit_without_notifying():
    vm, states = _vm_with_recorder()

    assert vm.items == (1, 2, 3)
    assert vm.edit == Initial()
    assert vm.count == 3
    assert states == []


def test_initialize_replaces_items_and_notifies_once():
    vm, states = _vm_with_recorder()

    vm.initialize([4, 5])

    assert len(states) == 1
    assert states[0].items == (4, 5)
    assert states[0].edit == Initial()
    assert vm.items == (4, 5)


@pytest.mark.parametrize(
    "start, value, expected_items, expected_edit",
    [
        ([1, 2, 3], 0, (0, 1, 2, 3), Insert(0, 0)),
        ([1, 2, 3], 5, (1, 2, 3, 5), Insert(5, 3)),
        ([1, 2, 2, 3], 2, (1, 2, 2, 2, 3), Insert(2, 3)),
        ([], 7, (7,), Insert(7, 0)),
    ],
)
def test_add_value_inserts_at_upper_boundary(start, value, expected_items, expected_edit):
    vm, states = _vm_with_recorder(start)

    edit = vm.add_value(value)

    assert edit == expected_edit
    assert vm.items == expected_items
    assert [s.edit for s in states] == [expected_edit]
    assert states[0].items == expected_items


def test_add_value_without_argument_draws_from_random_source():
    rng = _FixedRandom(2)
    vm, states = _vm_with_recorder([1, 2, 3], rng=rng, random_upper=10)

    edit = vm.add_value()

    assert rng.stops == [10]
    assert edit == Insert(2, 2)
    assert states[-1].items == (1, 2, 2, 3)


def test_add_value_rejects_non_integers_without_notifying():
    vm, states = _vm_with_recorder()

    with pytest.raises(TypeError):
        vm.add_value(1.5)
    with pytest.raises(TypeError):
        vm.add_value(True)

    assert vm.items == (1, 2, 3)
    assert states == []


def test_remove_value_deletes_row_and_reports_position():
    vm, states = _vm_with_recorder()

    edit = vm.remove_value(1)

    assert edit == Delete(1)
    assert vm.items == (1, 3)
    assert states[-1].items == (1, 3)
    assert states[-1].edit == Delete(1)


@pytest.mark.parametrize("position", [-1, 3, 99])
def test_remove_value_out_of_range_leaves_state_untouched(position):
    vm, states = _vm_with_recorder()

    with pytest.raises(OutOfRangeError) as excinfo:
        vm.remove_value(position)

    assert excinfo.value.position == position
    assert excinfo.value.length == 3
    assert vm.items == (1, 2, 3)
    assert vm.edit == Initial()
    assert states == []


def test_remove_value_from_empty_list_fails():
    vm, _ = _vm_with_recorder([])
    with pytest.raises(OutOfRangeError):
        vm.remove_value(0)


def test_random_inserts_keep_rows_sorted_and_counts_add_up():
    rng = random.Random(42)
    vm, states = _vm_with_recorder([1, 2, 3], rng=random.Random(7))
    inserts = deletes = 0

    for _ in range(300):
        if vm.count and rng.random() < 0.4:
            position = rng.randrange(vm.count)
            before = vm.items
            edit = vm.remove_value(position)
            deletes += 1
            assert edit == Delete(position)
            assert vm.items == before[:position] + before[position + 1:]
        else:
            before = vm.items
            edit = vm.add_value(rng.randrange(-5, 15) if rng.random() < 0.5 else None)
            inserts += 1
            assert vm.items[edit.position] == edit.value
            assert vm.items[:edit.position] + vm.items[edit.position + 1:] == before

        items = states[-1].items
        assert all(a <= b for a, b in zip(items, items[1:]))

    assert len(states) == inserts + deletes
    assert vm.count == 3 + inserts - deletes


def test_snapshots_are_detached_from_internal_state():
    vm, states = _vm_with_recorder()

    vm.add_value(4)
    snapshot = states[-1]
    vm.remove_value(0)

    assert snapshot.items == (1, 2, 3, 4)
    assert vm.items == (2, 3, 4)


def test_observer_can_be_replaced_at_runtime():
    vm, first = _vm_with_recorder()
    second = []
    vm.on_state_changed = second.append

    vm.add_value(1)

    assert first == []
    assert len(second) == 1


def test_read_helpers_follow_rows():
    vm = SortedListVM([10, 20, 30])
    assert vm.text_at(2) == "30"
    assert vm.upper_boundary(20) == 2
    assert vm.state.items == (10, 20, 30)


def test_random_upper_must_be_positive():
    with pytest.raises(ValueError):
        SortedListVM(random_upper=0)
