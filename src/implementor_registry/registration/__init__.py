"""Forward-or-queue registration of implementor tables."""

from .mailbox import ImplementorConsumer, RegistrationMailbox, global_mailbox, load_implementors

__all__ = [
    "ImplementorConsumer",
    "RegistrationMailbox",
    "global_mailbox",
    "load_implementors",
]
