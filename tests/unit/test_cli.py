"""Tests for the govfeed command line.

Run with:
    pytest tests/unit/test_cli.py
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from govfeed.cli import main
from govfeed.taxonomy.schema import SCHEMA_ID

if typ.TYPE_CHECKING:
    from pathlib import Path


class TestLint:
    """Tests for ``govfeed lint``."""

    def test_valid_taxonomy(
        self, taxonomy_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A valid file reports its entity counts."""
        assert main(["lint", str(taxonomy_path)]) == 0

        out = capsys.readouterr().out
        assert f"taxonomy {taxonomy_path} is valid" in out
        assert "(7 organisations / 6 topics / 2 policies)" in out

    def test_exports(self, taxonomy_path: Path, tmp_path: Path) -> None:
        """Schema and JSON exports are written on request."""
        schema_out = tmp_path / "schema" / "taxonomy.json"
        json_out = tmp_path / "taxonomy.json"

        status = main(
            [
                "lint",
                str(taxonomy_path),
                "--schema-out",
                str(schema_out),
                "--json-out",
                str(json_out),
            ]
        )

        assert status == 0
        assert json.loads(schema_out.read_text(encoding="utf-8"))["$id"] == SCHEMA_ID
        exported = json.loads(json_out.read_text(encoding="utf-8"))
        assert exported["topical_events"][0]["start_date"] == "2012-07-27"

    def test_invalid_taxonomy(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Validation issues are listed and the exit code is 1."""
        path = tmp_path / "broken.yaml"
        path.write_text(
            "version: 1\ntopics:\n  - slug: Bad Slug\n    name: Bad\n",
            encoding="utf-8",
        )

        assert main(["lint", str(path)]) == 1

        out = capsys.readouterr().out
        assert f"Taxonomy validation failed for {path}:" in out
        assert "  - topic.slug 'Bad Slug' must match" in out


class TestDescribe:
    """Tests for ``govfeed describe``."""

    def test_describes_each_url(
        self, taxonomy_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """One line is printed per URL."""
        status = main(
            [
                "describe",
                "--taxonomy",
                str(taxonomy_path),
                "/government/feed.atom?relevant_to_local_government=1",
                "/government/world/france.atom",
            ]
        )

        assert status == 0
        assert capsys.readouterr().out.splitlines() == [
            "documents which are relevant to local government",
            "France",
        ]

    def test_unrecognised_url(
        self, taxonomy_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unrecognised URLs are reported on stderr and fail the run."""
        status = main(
            [
                "describe",
                "--taxonomy",
                str(taxonomy_path),
                "/government/nowhere",
                "/government/feed.atom",
            ]
        )

        captured = capsys.readouterr()
        assert status == 1
        assert captured.out.splitlines() == ["documents"]
        assert "error: Feed not recognised: '/government/nowhere'" in captured.err

    def test_locale_and_prefix(
        self, taxonomy_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Locale and prefix options are honoured."""
        status = main(
            [
                "describe",
                "--taxonomy",
                str(taxonomy_path),
                "--locale",
                "cy",
                "--prefix",
                "/llywodraeth",
                "/llywodraeth/announcements.atom?world_locations[]=spain",
            ]
        )

        assert status == 0
        assert capsys.readouterr().out.strip() == "announcements related to Sbaen"

    def test_rejects_root_prefix(self, taxonomy_path: Path) -> None:
        """argparse rejects a prefix without a path segment."""
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "describe",
                    "--taxonomy",
                    str(taxonomy_path),
                    "--prefix",
                    "/",
                    "/feed.atom",
                ]
            )
        assert excinfo.value.code == 2

    def test_missing_taxonomy(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unreadable taxonomy fails before describing anything."""
        missing = tmp_path / "missing.yaml"
        status = main(
            ["describe", "--taxonomy", str(missing), "/government/feed.atom"]
        )
        assert status == 1
        assert "Taxonomy validation failed" in capsys.readouterr().out


class TestOptions:
    """Tests for ``govfeed options``."""

    def test_prints_option_set(
        self, taxonomy_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The option set is printed as JSON."""
        status = main(
            ["options", "--taxonomy", str(taxonomy_path), "document_type"]
        )

        assert status == 0
        assert json.loads(capsys.readouterr().out) == {
            "all_label": "All document types",
            "ungrouped": [
                {"label": "Announcements", "value": "announcements"},
                {"label": "Policies", "value": "policies"},
                {"label": "Publications", "value": "publications"},
            ],
            "grouped": [],
        }

    def test_rejects_unknown_dimension(self, taxonomy_path: Path) -> None:
        """argparse rejects dimensions outside the enum."""
        with pytest.raises(SystemExit) as excinfo:
            main(["options", "--taxonomy", str(taxonomy_path), "colour"])
        assert excinfo.value.code == 2
