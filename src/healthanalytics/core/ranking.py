"""Window-style ranking of grouped rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from healthanalytics.core.types import RankStrategy


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def rank(
    rows: Iterable[T],
    key: Callable[[T], Any],
    strategy: RankStrategy = RankStrategy.DENSE,
) -> list[tuple[int, T]]:
    """Rank rows by descending key.

    Rows with equal keys share a rank. With ``RankStrategy.DENSE`` the next
    distinct key gets the following rank number (1, 1, 2); with
    ``RankStrategy.STANDARD`` tied rows consume their positions (1, 1, 3).
    Rows with equal keys keep their input order.

    Args:
        rows: Rows to rank.
        key: Value to rank on, higher is better.
        strategy: Tie policy.

    Returns:
        ``(rank, row)`` pairs in rank order.
    """
    ranked: list[tuple[int, T]] = []
    current, previous = 0, None
    for position, row in enumerate(sorted(rows, key=key, reverse=True), start=1):
        value = key(row)
        if position == 1 or value != previous:
            current = current + 1 if strategy is RankStrategy.DENSE else position
            previous = value
        ranked.append((current, row))
    return ranked


def dense_rank(rows: Iterable[T], key: Callable[[T], Any]) -> list[tuple[int, T]]:
    return rank(rows, key, RankStrategy.DENSE)


def standard_rank(rows: Iterable[T], key: Callable[[T], Any]) -> list[tuple[int, T]]:
    return rank(rows, key, RankStrategy.STANDARD)
