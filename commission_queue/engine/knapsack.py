"""0/1 knapsack over discretized effort."""

import logging
from typing import List, Sequence

from ..models.task import ScoredTask

logger = logging.getLogger(__name__)


def select_items(items: Sequence[ScoredTask], capacity: int) -> List[ScoredTask]:
    """Pick the value-maximizing subset whose effort units fit in capacity.

    dp[i][w] is the best value reachable with the first i items under budget
    w. Backtracking takes item i only when dp[i][w] > dp[i - 1][w]; both
    sides come from the same additions, so the comparison is exact and ties
    leave the item out. Selected items are returned in input order.
    """
    if capacity <= 0 or not items:
        return []

    n = len(items)
    dp = [[0.0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        item = items[i - 1]
        weight = item.effort_units
        previous = dp[i - 1]
        row = dp[i]
        for w in range(capacity + 1):
            skip = previous[w]
            if weight <= w:
                take = previous[w - weight] + item.value
                row[w] = take if take > skip else skip
            else:
                row[w] = skip

    selected = []
    w = capacity
    for i in range(n, 0, -1):
        if dp[i][w] > dp[i - 1][w]:
            chosen = items[i - 1]
            selected.append(chosen)
            w -= chosen.effort_units

    selected.reverse()

    logger.debug(
        f"Knapsack selected {len(selected)}/{n} items, "
        f"{capacity - w}/{capacity} units, value {dp[n][capacity]:.2f}"
    )

    return selected
