"""Tests for the HTML sequence viewer and its failure boundary."""

import pytest

from geneforge.schemas.sequence import Annotation, Region
from geneforge.visualization.sequence_viz import (
    HtmlSequenceViewer,
    ViewerError,
    render_viewer,
)


class BrokenViewer:
    def render(self, sequence, annotations, selection=None, show_complement=True):
        raise RuntimeError("viewer crashed")


def _annotation(start, end, label="Gene", category="misc"):
    return Annotation(region=Region(start=start, end=end), label=label, category=category)


class TestHtmlSequenceViewer:
    def test_rows_follow_line_width(self):
        html = HtmlSequenceViewer(line_width=3).render("ATGCCC", [])
        assert html.count('class="gf-row"') == 2

    def test_complement_for_nucleotides(self):
        viewer = HtmlSequenceViewer()
        assert "TTTT" in viewer.render("AAAA", [], show_complement=True)
        assert "TTTT" not in viewer.render("AAAA", [], show_complement=False)

    def test_rna_complement_uses_uracil(self):
        html = HtmlSequenceViewer().render("AUGC", [], show_complement=True)
        assert "UACG" in html
        assert "TACG" not in html

    def test_no_complement_for_protein(self):
        html = HtmlSequenceViewer().render("MKKK", [], show_complement=True)
        assert html.count("<br>") == 0

    def test_annotation_label_and_legend(self):
        html = HtmlSequenceViewer().render("ATGCCCTAA", [_annotation(0, 3, label="MyGene")])
        assert "MyGene (1-3)" in html
        assert "#3B82F6" in html

    def test_codon_highlights_are_not_labelled_per_row(self):
        html = HtmlSequenceViewer().render(
            "ATGCCC", [_annotation(0, 3, label="Start codon", category="start_codon")]
        )
        assert "Start codon (1-3)" not in html
        assert "start codon" in html

    def test_selection_outline(self):
        html = HtmlSequenceViewer().render("ATGC", [], selection=Region(start=1, end=3))
        assert html.count("outline:1px solid") == 2

    def test_escapes_labels(self):
        html = HtmlSequenceViewer().render("ATGC", [_annotation(0, 2, label="<b>x</b>")])
        assert "<b>x</b>" not in html
        assert "&lt;b&gt;x&lt;/b&gt;" in html

    def test_out_of_bounds_annotation_raises(self):
        with pytest.raises(ViewerError):
            HtmlSequenceViewer().render("ATG", [_annotation(0, 10)])

    def test_line_width_minimum(self):
        with pytest.raises(ValueError):
            HtmlSequenceViewer(line_width=2)


class TestRenderViewer:
    def test_empty_sequence_placeholder(self):
        html, error = render_viewer(HtmlSequenceViewer(), "", [])
        assert "No Sequence Available" in html
        assert error is None

    def test_viewer_error_becomes_placeholder(self):
        html, error = render_viewer(HtmlSequenceViewer(), "ATG", [_annotation(0, 10)])
        assert "Visualization unavailable" in html
        assert error.startswith("Error rendering sequence")

    def test_any_viewer_failure_is_contained(self):
        html, error = render_viewer(BrokenViewer(), "ATGC", [])
        assert "Visualization unavailable" in html
        assert "viewer crashed" in error

    def test_success_has_no_error(self):
        html, error = render_viewer(HtmlSequenceViewer(), "ATGC", [])
        assert "gf-viewer" in html
        assert error is None
