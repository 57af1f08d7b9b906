"""Tests for locating artifacts in a trait.impl tree."""

from __future__ import annotations

import pytest

from implementor_registry.artifact import (
    discover_trait_artifacts,
    run_artifacts,
    trait_path_from_artifact,
    write_artifact,
)
from implementor_registry.registration import RegistrationMailbox


def _build_tree(root):
    """Write a small trait.impl tree with two artifacts and some noise."""

    write_artifact({"tower": ["descA", "descB"]}, root / "core" / "default" / "trait.Default.js")
    write_artifact({"tower_layer": ["descC"]}, root / "tower_layer" / "trait.Layer.js")
    (root / "core" / "default" / "README.md").write_text("not an artifact", encoding="utf-8")
    (root / "core" / "trait.Not-Valid.js").write_text("", encoding="utf-8")
    return root


def test_trait_path_from_artifact_joins_module_path(tmp_path) -> None:
    """Directory segments plus the trait name should form the trait path."""

    path = tmp_path / "core" / "default" / "trait.Default.js"

    assert trait_path_from_artifact(path, tmp_path) == "core::default::Default"


def test_trait_path_from_artifact_rejects_foreign_names(tmp_path) -> None:
    """Files not named ``trait.<Name>.js`` are rejected."""

    with pytest.raises(ValueError, match="not an implementor artifact name"):
        trait_path_from_artifact(tmp_path / "core" / "struct.Foo.js", tmp_path)


def test_trait_path_from_artifact_rejects_paths_outside_root(tmp_path) -> None:
    """The artifact must live under the given root."""

    with pytest.raises(ValueError, match="is not under"):
        trait_path_from_artifact(tmp_path / "other" / "trait.Default.js", tmp_path / "trait.impl")


def test_discover_trait_artifacts_sorted_and_filtered(tmp_path) -> None:
    """Discovery should skip noise and sort by trait path."""

    root = _build_tree(tmp_path / "trait.impl")

    records = discover_trait_artifacts(root)

    assert [record.trait_path for record in records] == ["core::default::Default", "tower_layer::Layer"]
    assert records[0].path == root / "core" / "default" / "trait.Default.js"
    assert records[1].crate == "tower_layer"


def test_discover_trait_artifacts_crate_filter(tmp_path) -> None:
    """The crate filter should match the first path segment."""

    root = _build_tree(tmp_path / "trait.impl")

    records = discover_trait_artifacts(root, crate="core")

    assert [record.trait_path for record in records] == ["core::default::Default"]


def test_discover_trait_artifacts_requires_directory(tmp_path) -> None:
    """A missing root should raise ``FileNotFoundError``."""

    with pytest.raises(FileNotFoundError, match="not a directory"):
        discover_trait_artifacts(tmp_path / "missing")


def test_run_artifacts_without_consumer_keeps_last_table(tmp_path) -> None:
    """Loading artifacts in sequence should leave only the last table pending."""

    root = _build_tree(tmp_path / "trait.impl")
    mailbox = RegistrationMailbox()

    tables = run_artifacts(discover_trait_artifacts(root), mailbox=mailbox)

    assert tables == ({"tower": ["descA", "descB"]}, {"tower_layer": ["descC"]})
    assert mailbox.pending_implementors == {"tower_layer": ["descC"]}


def test_run_artifacts_with_consumer_forwards_each_table(tmp_path) -> None:
    """A consumer attached before loading should see every table in order."""

    root = _build_tree(tmp_path / "trait.impl")
    mailbox = RegistrationMailbox()
    calls = []
    mailbox.attach(calls.append)

    run_artifacts(discover_trait_artifacts(root), mailbox=mailbox)

    assert calls == [{"tower": ["descA", "descB"]}, {"tower_layer": ["descC"]}]
    assert mailbox.pending_implementors is None
