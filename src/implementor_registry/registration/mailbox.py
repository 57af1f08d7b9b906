"""Deferred hand-off of implementor tables to a consumer.

An artifact produces its table once, usually before the consumer (a search or
navigation index) has initialized. :class:`RegistrationMailbox` is the
rendezvous between the two: the producer calls :meth:`RegistrationMailbox.load`,
which forwards the table to the registered callback if there is one and
otherwise parks it in a single pending slot. The consumer drains the slot when
it attaches.
"""

from __future__ import annotations

import logging
from typing import Callable

from implementor_registry.core.table import ImplementorTable

logger = logging.getLogger(__name__)

ImplementorConsumer = Callable[[ImplementorTable], object]


class RegistrationMailbox:
    """Optional consumer callback plus a single-slot pending buffer.

    Attributes
    ----------
    register_implementors : Callable[[dict[str, list[Any]]], object] | None
        Callback of the live consumer, or ``None`` before it attaches.
    pending_implementors : dict[str, list[Any]] | None
        Most recently loaded table awaiting consumption.

    Notes
    -----
    The slot holds at most one table. A second load while no consumer is
    attached replaces the first table; tables are never merged.
    """

    def __init__(self) -> None:
        self.register_implementors: ImplementorConsumer | None = None
        self.pending_implementors: ImplementorTable | None = None

    @property
    def has_consumer(self) -> bool:
        return self.register_implementors is not None

    @property
    def has_pending(self) -> bool:
        return self.pending_implementors is not None

    def load(self, table: ImplementorTable) -> None:
        """Forward ``table`` to the consumer, or queue it when none is attached.

        Parameters
        ----------
        table : dict[str, list[Any]]
            Implementor table produced by one artifact.

        Notes
        -----
        Exceptions raised by the consumer callback propagate unchanged.
        Repeated loads are not deduplicated.
        """

        consumer = self.register_implementors
        if consumer is not None:
            logger.debug("forwarding implementor table with %d crate(s)", len(table))
            consumer(table)
            return

        if self.pending_implementors is not None:
            logger.debug("replacing pending implementor table")
        logger.debug("queueing implementor table with %d crate(s)", len(table))
        self.pending_implementors = table

    def take_pending(self) -> ImplementorTable | None:
        """Return the pending table and clear the slot.

        Returns
        -------
        dict[str, list[Any]] | None
            Pending table, or ``None`` when the slot is empty.
        """

        table = self.pending_implementors
        self.pending_implementors = None
        if table is not None:
            logger.debug("drained pending implementor table")
        return table

    def attach(self, consumer: ImplementorConsumer, *, drain: bool = True) -> ImplementorTable | None:
        """Register the consumer callback.

        Parameters
        ----------
        consumer : Callable[[dict[str, list[Any]]], object]
            Callback receiving each implementor table.
        drain : bool, optional
            When true, a pending table is removed from the slot and passed to
            ``consumer`` once.

        Returns
        -------
        dict[str, list[Any]] | None
            Table delivered while draining, if any.

        Notes
        -----
        If ``consumer`` raises while draining, the exception propagates, the
        table stays pending and the consumer is not left registered.
        """

        self.register_implementors = consumer
        if not drain or self.pending_implementors is None:
            return None

        table = self.pending_implementors
        try:
            consumer(table)
        except BaseException:
            self.register_implementors = None
            raise
        self.pending_implementors = None
        logger.debug("drained pending implementor table")
        return table

    def detach(self) -> ImplementorConsumer | None:
        """Unregister and return the current consumer callback."""

        consumer = self.register_implementors
        self.register_implementors = None
        return consumer

    def reset(self) -> None:
        """Drop the consumer and any pending table."""

        self.register_implementors = None
        self.pending_implementors = None


_GLOBAL_MAILBOX = RegistrationMailbox()


def global_mailbox() -> RegistrationMailbox:
    """Return the process-wide mailbox shared by all artifacts."""

    return _GLOBAL_MAILBOX


def load_implementors(table: ImplementorTable, *, mailbox: RegistrationMailbox | None = None) -> None:
    """Deliver ``table`` through ``mailbox`` (process-wide mailbox by default)."""

    target = mailbox if mailbox is not None else _GLOBAL_MAILBOX
    target.load(table)


__all__ = [
    "ImplementorConsumer",
    "RegistrationMailbox",
    "global_mailbox",
    "load_implementors",
]
