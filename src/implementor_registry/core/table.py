"""Implementor table types and shape helpers.

An implementor table maps a crate name to the ordered list of descriptors for
the types in that crate which implement one trait. Descriptors are opaque
payloads (HTML fragments in generated artifacts) and are never inspected here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

Descriptor = Any
ImplementorTable = dict[str, list[Descriptor]]


@dataclass(frozen=True, slots=True)
class TableSummary:
    """Descriptor counts for one implementor table.

    Parameters
    ----------
    crate_counts : dict[str, int]
        Number of descriptors listed under each crate.
    total : int
        Sum of all per-crate counts.
    """

    crate_counts: dict[str, int]
    total: int

    @property
    def crates(self) -> tuple[str, ...]:
        """Crate names in sorted order."""

        return tuple(sorted(self.crate_counts))


def table_from_mapping(raw: Any) -> ImplementorTable:
    """Build an implementor table from an externally loaded mapping.

    Parameters
    ----------
    raw : Any
        Decoded payload, usually the result of ``json.loads``.

    Returns
    -------
    dict[str, list[Any]]
        Fresh table with fresh descriptor lists in source order.

    Raises
    ------
    ValueError
        If ``raw`` is not a mapping, a crate name is not a string, or a crate
        entry is not a list.
    """

    if not isinstance(raw, Mapping):
        raise ValueError("implementor table must be a mapping of crate name to list")

    table: ImplementorTable = {}
    for crate, descriptors in raw.items():
        if not isinstance(crate, str):
            raise ValueError(f"crate name must be a string; got {crate!r}")
        if not isinstance(descriptors, list):
            raise ValueError(
                f"implementors for crate {crate!r} must be a list; "
                f"got {type(descriptors).__name__}"
            )
        table[crate] = list(descriptors)
    return table


def copy_table(table: Mapping[str, list[Descriptor]]) -> ImplementorTable:
    """Copy the mapping and each descriptor list (descriptors are shared)."""

    return {crate: list(descriptors) for crate, descriptors in table.items()}


def summarize_table(table: Mapping[str, list[Descriptor]]) -> TableSummary:
    """Count descriptors per crate.

    Parameters
    ----------
    table : Mapping[str, list[Any]]
        Implementor table to summarize.

    Returns
    -------
    TableSummary
        Per-crate counts and their total.
    """

    counts = {crate: len(descriptors) for crate, descriptors in table.items()}
    return TableSummary(crate_counts=counts, total=sum(counts.values()))


__all__ = [
    "Descriptor",
    "ImplementorTable",
    "TableSummary",
    "copy_table",
    "summarize_table",
    "table_from_mapping",
]
