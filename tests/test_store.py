"""Tests for the concept document store."""

from __future__ import annotations

import pytest
from pathlib import Path

from collab.concepts.store import ConceptStore, DocumentStore, InMemoryStore


@pytest.fixture
def root(tmp_path: Path) -> Path:
    d = tmp_path / "concepts"
    d.mkdir()
    return d


@pytest.fixture
def store(root: Path) -> ConceptStore:
    return ConceptStore(root)


class TestLoad:
    def test_existing(self, store: ConceptStore, root: Path):
        (root / "ooda.md").write_text("Observe, orient, decide, act.", encoding="utf-8")
        assert store.load("ooda") == "Observe, orient, decide, act."

    def test_missing(self, store: ConceptStore):
        assert store.load("nope") is None

    def test_directory_with_concept_name(self, store: ConceptStore, root: Path):
        (root / "dir.md").mkdir()
        assert store.load("dir") is None

    def test_root_missing(self, tmp_path: Path):
        store = ConceptStore(tmp_path / "absent")
        assert store.load("anything") is None

    def test_invalid_name_not_probed(self, store: ConceptStore, root: Path):
        (root.parent / "secret.md").write_text("x", encoding="utf-8")
        assert store.load("../secret") is None

    def test_undecodable(self, store: ConceptStore, root: Path):
        (root / "binary.md").write_bytes(b"\xff\xfe\xfa")
        assert store.load("binary") is None

    def test_custom_extension(self, root: Path):
        (root / "note.txt").write_text("plain", encoding="utf-8")
        store = ConceptStore(root, ".txt")
        assert store.load("note") == "plain"

    def test_reads_fresh_each_time(self, store: ConceptStore, root: Path):
        path = root / "live.md"
        path.write_text("v1", encoding="utf-8")
        assert store.load("live") == "v1"
        path.write_text("v2", encoding="utf-8")
        assert store.load("live") == "v2"


class TestListAvailable:
    def test_sorted_names(self, store: ConceptStore, root: Path):
        for name in ["zeta", "alpha", "mid"]:
            (root / f"{name}.md").write_text(name, encoding="utf-8")
        assert store.list_available() == ["alpha", "mid", "zeta"]

    def test_ignores_other_files(self, store: ConceptStore, root: Path):
        (root / "a.md").write_text("a", encoding="utf-8")
        (root / "b.txt").write_text("b", encoding="utf-8")
        (root / "sub").mkdir()
        (root / "sub" / "c.md").write_text("c", encoding="utf-8")
        (root / "bad name.md").write_text("d", encoding="utf-8")
        assert store.list_available() == ["a"]

    def test_missing_root_returns_empty(self, tmp_path: Path):
        assert ConceptStore(tmp_path / "absent").list_available() == []

    def test_root_is_a_file(self, tmp_path: Path):
        f = tmp_path / "file"
        f.write_text("", encoding="utf-8")
        assert ConceptStore(f).list_available() == []


class TestDescribe:
    def test_frontmatter_summary(self, store: ConceptStore, root: Path):
        (root / "ooda.md").write_text(
            "---\nsummary: Decision loop\n---\n\n# OODA\n\nBody", encoding="utf-8"
        )
        assert store.describe("ooda") == "Decision loop"

    def test_first_line_fallback(self, store: ConceptStore, root: Path):
        (root / "plain.md").write_text("\n\n# Plain heading\n\nBody", encoding="utf-8")
        assert store.describe("plain") == "Plain heading"

    def test_frontmatter_without_summary(self, store: ConceptStore, root: Path):
        (root / "tagged.md").write_text("---\ntags: [x]\n---\nFirst line", encoding="utf-8")
        assert store.describe("tagged") == "First line"

    def test_malformed_frontmatter(self, store: ConceptStore, root: Path):
        (root / "bad.md").write_text("---\n: : [\n---\nStill here", encoding="utf-8")
        assert isinstance(store.describe("bad"), str)

    def test_missing(self, store: ConceptStore):
        assert store.describe("nope") == ""


class TestProtocol:
    def test_implementations(self, store: ConceptStore):
        assert isinstance(store, DocumentStore)
        assert isinstance(InMemoryStore(), DocumentStore)

    def test_in_memory(self):
        mem = InMemoryStore({"b": "B", "a": "A"})
        assert mem.load("a") == "A"
        assert mem.load("c") is None
        assert mem.list_available() == ["a", "b"]
