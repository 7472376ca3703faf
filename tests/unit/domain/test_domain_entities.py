"""Tests for tracking configuration, document and report entities."""
import pytest
from pathlib import Path

from src.domain.entities import (
    Article, CodeBlock, Image, IntegrityIssue, IntegrityReport, Link, TrackingConfiguration
)


class TestTrackingConfiguration:
    """Test cases for TrackingConfiguration."""

    def test_defaults_are_disabled(self):
        """Test tracking is off unless asked for."""
        config = TrackingConfiguration()

        assert config.mode == "disabled"
        assert config.enabled is False
        assert config.tags == []

    def test_enabled_modes(self, sample_tracking_config):
        """Test online and offline count as enabled."""
        assert sample_tracking_config.enabled is True
        assert TrackingConfiguration(mode="online").enabled is True

    @pytest.mark.parametrize("kwargs", [
        {'mode': 'cloud'},
        {'project': ''},
        {'project': '   '},
        {'log_every_n_steps': 0},
        {'project': 123},
        {'entity': 5},
        {'log_every_n_steps': 2.5},
        {'tags': 'single-tag'},
    ])
    def test_invalid_values(self, kwargs):
        """Test validation in __post_init__."""
        with pytest.raises(ValueError):
            TrackingConfiguration(**kwargs)

    def test_tags_are_copied(self):
        """Test the tag list is not shared with the caller."""
        tags = ["a"]
        config = TrackingConfiguration(tags=tags)
        tags.append("b")

        assert config.to_dict()['tags'] == ["a"]


class TestLinks:
    """Test cases for Link and Image helpers."""

    def test_external_link(self):
        assert Link("W&B", "https://wandb.ai", 1).is_external
        assert Link("mail", "mailto:someone@example.com", 1).is_external
        assert not Link("doc", "other.md", 1).is_external

    def test_anchor_link(self):
        link = Link("usage", "#usage", 3)

        assert link.is_anchor
        assert link.path == ""
        assert link.anchor == "usage"

    def test_path_and_anchor_split(self):
        link = Link("x", "guide.md?plain=1#setup", 1)

        assert link.path == "guide.md"
        assert link.anchor == "setup"

    def test_image_alt(self):
        image = Image("diagram", "images/d.svg", 5)

        assert image.alt == "diagram"
        assert image.path == "images/d.svg"
        assert image.anchor is None


class TestArticle:
    """Test cases for Article."""

    def test_next_link_is_last_next_link(self):
        """Test the closing Next link wins over earlier ones."""
        article = Article(path=Path("a.md"), title="A", links=[
            Link("Next steps", "b.md", 2),
            Link("next: C", "c.md", 9),
            Link("Next on the web", "https://example.com", 10),
        ])

        assert article.next_link.target == "c.md"

    def test_next_link_ignores_anchors(self):
        article = Article(path=Path("a.md"), title="A", links=[Link("Next section", "#more", 1)])

        assert article.next_link is None

    def test_internal_links(self):
        article = Article(path=Path("a.md"), title="A", links=[
            Link("x", "https://example.com", 1), Link("y", "b.md", 2)
        ])

        assert [link.target for link in article.internal_links] == ["b.md"]


class TestIntegrityReport:
    """Test cases for IntegrityIssue and IntegrityReport."""

    def test_issue_validation(self):
        with pytest.raises(ValueError):
            IntegrityIssue(Path("a.md"), 1, "typo", "bad kind")
        with pytest.raises(ValueError):
            IntegrityIssue(Path("a.md"), 1, "broken_link", "msg", severity="fatal")

    def test_issue_format(self):
        issue = IntegrityIssue(Path("docs/a.md"), 4, "broken_link", "link target does not exist: b.md")

        assert issue.format() == "docs/a.md:4: error: [broken_link] link target does not exist: b.md"
        assert IntegrityIssue(Path("a.md"), 0, "reading_order", "m").format().startswith("a.md: ")

    def test_report_sorting_and_counts(self):
        issues = [
            IntegrityIssue(Path("b.md"), 1, "invalid_code", "x"),
            IntegrityIssue(Path("a.md"), 9, "missing_anchor", "y", severity="warning"),
            IntegrityIssue(Path("a.md"), 2, "missing_image", "z"),
        ]
        report = IntegrityReport(documents_checked=2, issues=issues)

        assert [(str(i.path), i.line) for i in report.issues] == [("a.md", 2), ("a.md", 9), ("b.md", 1)]
        assert len(report.errors) == 2
        assert len(report.warnings) == 1
        assert report.ok is False
        assert list(report.by_document()) == [Path("a.md"), Path("b.md")]

    def test_report_ok_with_only_warnings(self):
        report = IntegrityReport(1, [IntegrityIssue(Path("a.md"), 1, "missing_anchor", "w", "warning")])

        assert report.ok is True
        data = report.to_dict()
        assert data['warning_count'] == 1
        assert data['issues'][0]['path'] == "a.md"

    def test_code_block_is_frozen(self):
        block = CodeBlock("python", "x = 1", 3)

        with pytest.raises(Exception):
            block.language = "yaml"
