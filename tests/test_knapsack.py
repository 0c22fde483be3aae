"""
Tests for the knapsack allocator.
"""

import itertools

import pytest

from commission_queue.engine.knapsack import select_items
from commission_queue.evaluation.generator import TaskGenerator
from commission_queue.models.task import ScoredTask, Task


def item(task_id, value, units):
    return ScoredTask(task=Task(task_id=task_id), value=value, effort_units=units)


def brute_force_best(items, capacity):
    best = 0.0
    for r in range(len(items) + 1):
        for combo in itertools.combinations(items, r):
            if sum(i.effort_units for i in combo) <= capacity:
                best = max(best, sum(i.value for i in combo))
    return best


class TestSelectItems:
    """Test cases for 0/1 knapsack selection."""

    def test_picks_single_best_item(self):
        """Y alone beats X alone, and both together do not fit."""
        x = item("X", 50.0, 20)
        y = item("Y", 90.0, 40)

        selected = select_items([x, y], 50)

        assert [s.task_id for s in selected] == ["Y"]

    def test_takes_everything_when_it_fits(self):
        items = [item("a", 10.0, 5), item("b", 20.0, 5), item("c", 5.0, 5)]

        selected = select_items(items, 15)

        assert [s.task_id for s in selected] == ["a", "b", "c"]

    def test_combination_beats_greedy(self):
        """Greedy by value would take the 60-unit item; two smaller ones win."""
        items = [item("big", 100.0, 60), item("s1", 70.0, 50), item("s2", 70.0, 50)]

        selected = select_items(items, 100)

        assert sorted(s.task_id for s in selected) == ["s1", "s2"]

    @pytest.mark.parametrize("capacity", [0, -5])
    def test_no_capacity(self, capacity):
        assert select_items([item("a", 10.0, 0)], capacity) == []

    def test_no_items(self):
        assert select_items([], 80) == []

    def test_zero_effort_item_always_affordable(self):
        items = [item("free", 5.0, 0), item("heavy", 50.0, 10)]

        selected = select_items(items, 10)

        assert sorted(s.task_id for s in selected) == ["free", "heavy"]

    def test_zero_value_item_left_out(self):
        """Ties between taking and skipping leave the item out."""
        selected = select_items([item("nothing", 0.0, 3)], 10)

        assert selected == []

    def test_selection_in_input_order(self):
        items = [item("a", 1.0, 1), item("b", 2.0, 1), item("c", 3.0, 1)]

        selected = select_items(items, 3)

        assert [s.task_id for s in selected] == ["a", "b", "c"]


class TestKnapsackProperties:
    """Optimality and capacity checks over generated item sets."""

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_brute_force(self, seed):
        generator = TaskGenerator(seed=seed)
        n = generator.random.randint(0, 12)
        capacity = generator.random.randint(0, 80)
        items = generator.generate_scored_items(n, max_units=30)

        selected = select_items(items, capacity)

        assert sum(s.value for s in selected) == pytest.approx(brute_force_best(items, capacity))
        assert sum(s.effort_units for s in selected) <= max(capacity, 0)

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, seed):
        items = TaskGenerator(seed=seed).generate_scored_items(10)

        first = select_items(items, 60)
        second = select_items(items, 60)

        assert [s.task_id for s in first] == [s.task_id for s in second]
