"""Top-level package for ``implementor_registry``.

Generated documentation ships one artifact per trait listing the types that
implement it, grouped by crate. Running an artifact hands its table to the
consumer registered on a :class:`~implementor_registry.registration.RegistrationMailbox`,
or parks it in the mailbox's pending slot until the consumer attaches.
"""

from .artifact import (
    ArtifactFormatError,
    TraitArtifact,
    discover_trait_artifacts,
    parse_artifact_text,
    read_artifact,
    render_artifact_text,
    run_artifact,
    run_artifacts,
    write_artifact,
)
from .core.table import ImplementorTable, summarize_table, table_from_mapping
from .registration import RegistrationMailbox, global_mailbox, load_implementors

__version__ = "0.1.0"

__all__ = [
    "ArtifactFormatError",
    "ImplementorTable",
    "RegistrationMailbox",
    "TraitArtifact",
    "discover_trait_artifacts",
    "global_mailbox",
    "load_implementors",
    "parse_artifact_text",
    "read_artifact",
    "render_artifact_text",
    "run_artifact",
    "run_artifacts",
    "summarize_table",
    "table_from_mapping",
    "write_artifact",
]
