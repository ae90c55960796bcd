"""
UI Integration Tests for GeneForge Workbench.

Editor selection and edit mapping, and the app build with injected services.
"""

import tempfile
from pathlib import Path

from geneforge.schemas.config import AppSettings, EditorSettings
from geneforge.schemas.sequence import Region


class TestEditorSelection:
    """Textbox and range inputs mapped to raw regions."""

    def test_triplet_selection_maps_to_raw(self):
        from geneforge.ui.tabs.editor import selection_from_display
        # "ATG CCC A": display 4..7 is "CCC".
        assert selection_from_display("ATGCCCA", "triplet", [4, 7]) == Region(start=3, end=6)
        assert selection_from_display("ATGCCCA", "triplet", (7, 4)) == Region(start=3, end=6)

    def test_protein_in_triplet_mode_is_raw(self):
        from geneforge.ui.tabs.editor import selection_from_display
        assert selection_from_display("MKVLAW", "triplet", [4, 6]) == Region(start=4, end=6)

    def test_separator_only_selection(self):
        from geneforge.ui.tabs.editor import selection_from_display
        assert selection_from_display("ATGCCCA", "triplet", [3, 4]) is None

    def test_malformed_index(self):
        from geneforge.ui.tabs.editor import selection_from_display
        assert selection_from_display("ATGC", "raw", 2) is None
        assert selection_from_display("ATGC", "raw", None) is None

    def test_range_is_one_based_inclusive(self):
        from geneforge.ui.tabs.editor import selection_from_range
        assert selection_from_range(1, 3, 7) == Region(start=0, end=3)
        assert selection_from_range(5.0, 7.0, 7) == Region(start=4, end=7)

    def test_range_out_of_bounds(self):
        from geneforge.ui.tabs.editor import selection_from_range
        assert selection_from_range(None, 3, 7) is None
        assert selection_from_range(0, 3, 7) is None
        assert selection_from_range(5, 8, 7) is None
        assert selection_from_range(4, 3, 7) is None


class TestEditorEdits:
    """Edited textbox contents before they are committed."""

    def test_triplet_grouping_is_stripped(self):
        from geneforge.ui.tabs.editor import edited_sequence
        assert edited_sequence("ATG CCC AA", "ATGCCCA", "triplet") == "ATGCCCAA"

    def test_unchanged_text_is_none(self):
        from geneforge.ui.tabs.editor import edited_sequence
        assert edited_sequence("ATG CCC A", "ATGCCCA", "triplet") is None
        assert edited_sequence("MKV", "MKV", "triplet") is None

    def test_raw_mode_keeps_text(self):
        from geneforge.ui.tabs.editor import edited_sequence
        assert edited_sequence("atg c", "ATGCCC", "raw") == "atg c"

    def test_cleared_box(self):
        from geneforge.ui.tabs.editor import edited_sequence
        assert edited_sequence(None, "ATGC", "triplet") == ""
        assert edited_sequence("", "", "triplet") is None


class TestAppBuild:
    """The Blocks app builds without launching a server."""

    def test_create_app_with_workspace(self):
        import gradio as gr
        from geneforge.app import create_app
        from geneforge.services.workspace_service import WorkspaceService

        with tempfile.TemporaryDirectory() as td:
            workspace = WorkspaceService(path=Path(td) / "workspace.json")
            workspace.set_sequence("ATGAAACCCTAA")
            workspace.add_annotation(Region(start=0, end=3), "Start")
            app = create_app(
                settings=AppSettings(editor=EditorSettings(display_mode="triplet")),
                workspace_service=workspace,
                offline_assistant=True,
            )
            assert isinstance(app, gr.Blocks)

    def test_create_app_with_empty_workspace(self):
        import gradio as gr
        from geneforge.app import create_app
        from geneforge.services.workspace_service import WorkspaceService

        with tempfile.TemporaryDirectory() as td:
            app = create_app(
                settings=AppSettings(),
                workspace_service=WorkspaceService(path=Path(td) / "workspace.json"),
                offline_assistant=True,
            )
            assert isinstance(app, gr.Blocks)


class TestStatsSummary:
    def test_summary_markdown(self):
        from geneforge.services.sequence_service import SequenceService
        from geneforge.ui.tabs.stats import summary_markdown

        service = SequenceService()
        assert summary_markdown(service.analyze(""), 0) == "No sequence data available"

        dna = summary_markdown(service.analyze("ATGC"), 2)
        assert "| 4 bp | 50.0% | 2 | 0 |" in dna

        protein = summary_markdown(service.analyze("MKV"), 0)
        assert "| 3 aa | n/a | 0 | n/a |" in protein

    def test_kind_badge(self):
        from geneforge.ui.tabs.editor import kind_badge

        assert kind_badge("ATGC") == "**Type: DNA**"
        assert kind_badge("") == "**Type: Unknown**"
