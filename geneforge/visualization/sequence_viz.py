"""Linear sequence viewer.

Renders the canonical sequence in fixed-width rows with:
- coloured spans for annotations and motif/ORF highlights
- an optional complement strand (nucleotides only)
- the current selection outlined

The viewer is a strategy object (SequenceViewer); callers go through
render_viewer(), which turns any viewer failure into a placeholder.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from geneforge.schemas.sequence import Annotation, Region
from geneforge.utils.translation import complement

logger = logging.getLogger(__name__)

_NUCLEOTIDES = set("ACGTUN")
# Too frequent to label row by row; colour and legend only.
_UNLABELLED_CATEGORIES = {"start_codon", "stop_codon"}


class ViewerError(RuntimeError):
    """The viewer could not render the given sequence/annotation shape."""


class SequenceViewer(Protocol):
    def render(
        self,
        sequence: str,
        annotations: Sequence[Annotation],
        selection: Optional[Region] = None,
        show_complement: bool = True,
    ) -> str:
        ...


def _escape(s: str) -> str:
    """HTML-escape a string."""
    return html.escape(str(s) if s else "")


def placeholder_html(title: str, message: str) -> str:
    return f'''<div style="display:flex;flex-direction:column;align-items:center;justify-content:center;
min-height:240px;background:#f8fafc;border-radius:8px;color:#64748b;font-family:sans-serif;">
    <h3 style="margin:0 0 8px 0;color:#334155;">{_escape(title)}</h3>
    <p style="margin:0;max-width:28rem;text-align:center;">{_escape(message)}</p>
</div>'''


class HtmlSequenceViewer:
    """Plain HTML linear map; one row per ``line_width`` symbols."""

    def __init__(self, line_width: int = 60):
        if line_width < 3:
            raise ValueError("line_width must be >= 3")
        self.line_width = line_width

    @staticmethod
    def _validate(sequence: str, annotations: Sequence[Annotation]) -> None:
        for annotation in annotations:
            if not annotation.region.fits(len(sequence)):
                raise ViewerError(
                    f"Annotation '{annotation.label}' ({annotation.region.start + 1}-"
                    f"{annotation.region.end}) lies outside the {len(sequence)} symbol sequence"
                )

    @staticmethod
    def _row_annotations(row: Region, annotations: Sequence[Annotation]) -> List[Annotation]:
        return [a for a in annotations if a.region.overlaps(row)]

    @staticmethod
    def _symbol_colors(length: int, annotations: Sequence[Annotation]) -> List[Optional[str]]:
        # Later annotations paint over earlier ones; user annotations come last.
        colors: List[Optional[str]] = [None] * length
        for annotation in annotations:
            for idx in range(annotation.region.start, annotation.region.end):
                colors[idx] = annotation.color
        return colors

    def _render_row(
        self,
        sequence: str,
        row_start: int,
        row_end: int,
        colors: List[Optional[str]],
        selection: Optional[Region],
    ) -> str:
        cells = []
        for idx in range(row_start, row_end):
            color = colors[idx]
            style = []
            if color:
                style.append(f"background:{color}33;border-bottom:2px solid {color}")
            if selection is not None and selection.contains(idx):
                style.append("outline:1px solid #0f172a")
            attr = f' style="{";".join(style)}"' if style else ""
            cells.append(f"<span{attr}>{_escape(sequence[idx])}</span>")
        return "".join(cells)

    def render(
        self,
        sequence: str,
        annotations: Sequence[Annotation],
        selection: Optional[Region] = None,
        show_complement: bool = True,
    ) -> str:
        self._validate(sequence, annotations)
        is_nucleotide = set(sequence) <= _NUCLEOTIDES
        comp = ""
        if show_complement and is_nucleotide:
            comp = complement(sequence.replace("U", "T"))
            if "U" in sequence:
                comp = comp.replace("T", "U")
        colors = self._symbol_colors(len(sequence), annotations)

        rows = []
        for row_start in range(0, len(sequence), self.line_width):
            row_end = min(row_start + self.line_width, len(sequence))
            labels = ", ".join(
                f"{_escape(a.label)} ({a.region.start + 1}-{a.region.end})"
                for a in self._row_annotations(Region(start=row_start, end=row_end), annotations)
                if a.category not in _UNLABELLED_CATEGORIES
            )
            row_html = [
                f'<div class="gf-row" style="margin-bottom:6px;">',
                f'<span style="color:#94a3b8;display:inline-block;width:4.5em;">{row_start + 1}</span>',
                self._render_row(sequence, row_start, row_end, colors, selection),
            ]
            if comp:
                row_html.append(
                    f'<br><span style="display:inline-block;width:4.5em;"></span>'
                    f'<span style="color:#94a3b8;">{_escape(comp[row_start:row_end])}</span>'
                )
            if labels:
                row_html.append(f'<div style="font-size:11px;color:#475569;">{labels}</div>')
            row_html.append("</div>")
            rows.append("".join(row_html))

        legend = "".join(
            f'<span style="margin-right:12px;"><span style="display:inline-block;width:10px;height:10px;'
            f'background:{color};margin-right:4px;"></span>{_escape(label)}</span>'
            for label, color in _legend(annotations)
        )
        return f'''<div class="gf-viewer" style="font-family:'SF Mono',Monaco,Consolas,monospace;font-size:13px;
padding:12px;background:#ffffff;border-radius:8px;overflow-x:auto;">
    <div style="font-size:12px;margin-bottom:8px;color:#334155;">{legend}</div>
    {"".join(rows)}
</div>'''


def _legend(annotations: Sequence[Annotation]) -> List[Tuple[str, str]]:
    seen = {}
    for annotation in annotations:
        key = annotation.category if annotation.category != "misc" else annotation.label
        seen.setdefault(key.replace("_", " "), annotation.color)
    return list(seen.items())


def render_viewer(
    viewer: SequenceViewer,
    sequence: str,
    annotations: Sequence[Annotation],
    selection: Optional[Region] = None,
    show_complement: bool = True,
) -> Tuple[str, Optional[str]]:
    """Render through ``viewer``; returns (html, error message or None)."""
    if not sequence:
        return placeholder_html(
            "No Sequence Available",
            "Enter a DNA, RNA, or protein sequence in the editor to visualize it here.",
        ), None
    try:
        return viewer.render(sequence, annotations, selection=selection, show_complement=show_complement), None
    except Exception as e:
        logger.warning("Viewer failed to render %d symbol sequence: %s", len(sequence), e)
        message = f"Error rendering sequence: {e}"
        return placeholder_html("Visualization unavailable", message), message
