import logging
import tempfile
from pathlib import Path
from typing import Optional

import gradio as gr

from geneforge.core.alphabet import classify, sanitize
from geneforge.core.coordinates import effective_mode, format_display, raw_region_of, strip_display
from geneforge.core.elements import elements_for, find_element, insert_element
from geneforge.core.motifs import RESTRICTION_SITES
from geneforge.schemas.config import DisplayMode, EditorSettings
from geneforge.schemas.sequence import Region
from geneforge.services.sequence_service import SequenceService
from geneforge.services.workspace_service import WorkspaceService
from geneforge.utils.sequence_io import SUPPORTED_UPLOAD_EXTENSIONS, read_upload_text, write_fasta
from geneforge.visualization.sequence_viz import SequenceViewer, render_viewer

logger = logging.getLogger(__name__)

ENZYME_CHOICES = [name for name, _ in RESTRICTION_SITES]
HIGHLIGHT_CHOICES = {
    "Start codons": "start_codon",
    "Stop codons": "stop_codon",
    "Promoters": "promoter",
    "ORFs": "orf",
}
DEFAULT_HIGHLIGHTS = ["Promoters", "ORFs"]


def kind_badge(canonical: str) -> str:
    kind = classify(canonical)
    if kind == "unknown":
        return "**Type: Unknown**"
    return f"**Type: {kind.upper()}**"


def edited_sequence(text: Optional[str], canonical: str, mode: DisplayMode) -> Optional[str]:
    """Textbox contents with display grouping removed, or None when nothing changed."""
    new_text = strip_display(text or "", effective_mode(mode, classify(canonical)))
    if sanitize(new_text) == canonical:
        return None
    return new_text


def selection_from_display(canonical: str, mode: DisplayMode, index) -> Optional[Region]:
    """Map a textbox selection ``[start, end]`` (display coordinates) to a raw region."""
    if not isinstance(index, (list, tuple)) or len(index) != 2:
        return None
    shown_mode = effective_mode(mode, classify(canonical))
    return raw_region_of(int(index[0]), int(index[1]), shown_mode, len(canonical))


def selection_from_range(start, end, length: int) -> Optional[Region]:
    """1-based inclusive form inputs to a raw region; None when out of range."""
    if start is None or end is None:
        return None
    lo, hi = int(start) - 1, int(end)
    if 0 <= lo < hi <= length:
        return Region(start=lo, end=hi)
    return None


def create_editor_tab(
    sequence_service: SequenceService,
    workspace_service: WorkspaceService,
    viewer: SequenceViewer,
    editor_settings: EditorSettings,
    sequence_state: gr.State,
    selection_state: gr.State,
    revision_state: gr.State,
):
    """Create the Sequence Editor tab (editor, annotations, notes, viewer)."""

    def viewer_html(canonical, selection, show_complement, enzymes, highlights):
        analysis = sequence_service.analyze(canonical, enzymes=enzymes or [])
        # Restriction sites are governed by the enzyme toggles, the rest by the highlight toggles.
        wanted = {HIGHLIGHT_CHOICES[h] for h in (highlights or [])} | {"restriction_site"}
        features = [a for a in analysis.highlights if a.category in wanted]
        features += workspace_service.annotations
        html, error = render_viewer(viewer, canonical, features, selection=selection, show_complement=show_complement)
        return html, error

    def element_choices(canonical):
        names = [e.name for e in elements_for(classify(canonical))]
        return gr.update(choices=names, value=names[0] if names else None)

    def view(canonical, mode, selection, show_complement, enzymes, highlights):
        """Everything shown in this tab, derived from the canonical sequence."""
        kind = classify(canonical)
        html, error = viewer_html(canonical, selection, show_complement, enzymes, highlights)
        unit = "aa" if kind == "protein" else "bp"
        return (
            format_display(canonical, effective_mode(mode, kind)),
            kind_badge(canonical),
            element_choices(canonical),
            sequence_service.describe_selection(selection, unit=unit),
            html,
            workspace_service.annotations_frame(),
            workspace_service.notes_frame(),
            error or "",
        )

    with gr.TabItem("Editor"):
        gr.Markdown("### Sequence Editor")
        gr.Markdown(
            "Paste or type a DNA, RNA or protein sequence. Whitespace, digits and FASTA `>` "
            "markers are removed; invalid characters are dropped."
        )

        with gr.Row():
            kind_md = gr.Markdown(kind_badge(workspace_service.sequence))
            display_mode = gr.Radio(
                label="Display",
                choices=["raw", "triplet"],
                value=editor_settings.display_mode,
                scale=2,
            )

        sequence_box = gr.Textbox(
            label="Sequence",
            lines=10,
            max_lines=20,
            placeholder="Paste or type your DNA, RNA, or protein sequence here...",
            value=format_display(
                workspace_service.sequence,
                effective_mode(editor_settings.display_mode, classify(workspace_service.sequence)),
            ),
        )

        with gr.Row():
            upload_file = gr.File(
                label="Upload (.txt, .fasta, .fa, .gb)",
                file_count="single",
                file_types=sorted(SUPPORTED_UPLOAD_EXTENSIONS),
                scale=3,
            )
            with gr.Column(scale=2):
                initial_elements = [e.name for e in elements_for(classify(workspace_service.sequence))]
                element_select = gr.Dropdown(
                    label="Common element",
                    choices=initial_elements,
                    value=initial_elements[0] if initial_elements else None,
                    interactive=True,
                )
                insert_btn = gr.Button("Insert at selection")
                with gr.Row():
                    export_btn = gr.Button("Export FASTA")
                    clear_btn = gr.Button("Clear", variant="stop")
                export_file = gr.File(label="Exported FASTA", interactive=False)

        with gr.Row():
            sel_start = gr.Number(label="Selection start (1-based)", precision=0)
            sel_end = gr.Number(label="Selection end (inclusive)", precision=0)
            select_btn = gr.Button("Select range")
        selection_md = gr.Markdown("No selection")
        status_md = gr.Markdown()

        with gr.Accordion("Annotations", open=True):
            with gr.Row():
                ann_label = gr.Textbox(label="Annotation name", placeholder="e.g. Promoter, CDS", scale=3)
                ann_color = gr.ColorPicker(label="Color", value=workspace_service.DEFAULT_ANNOTATION_COLOR)
                ann_direction = gr.Radio(label="Direction", choices=["forward", "reverse"], value="forward")
                ann_add_btn = gr.Button("Add Annotation")
            annotations_df = gr.DataFrame(
                value=workspace_service.annotations_frame(),
                label="Annotations",
                interactive=False,
            )
            with gr.Row():
                ann_remove_idx = gr.Number(label="Row # to remove (1-based)", precision=0)
                ann_remove_btn = gr.Button("Remove Annotation")

        with gr.Accordion("Notes", open=False):
            with gr.Row():
                note_title = gr.Textbox(label="Title", scale=1)
                note_content = gr.Textbox(label="Content", lines=2, scale=3)
                note_add_btn = gr.Button("Add Note")
            notes_df = gr.DataFrame(
                value=workspace_service.notes_frame(),
                label="Notes",
                interactive=False,
            )

        gr.Markdown("---")
        gr.Markdown("#### Sequence Visualization")
        with gr.Row():
            show_complement = gr.Checkbox(label="Show Complement", value=editor_settings.show_complement)
            highlight_select = gr.CheckboxGroup(
                label="Highlight",
                choices=list(HIGHLIGHT_CHOICES),
                value=DEFAULT_HIGHLIGHTS,
            )
            enzyme_select = gr.CheckboxGroup(label="Restriction enzymes", choices=ENZYME_CHOICES, value=[])
        viewer_out = gr.HTML(
            value=viewer_html(
                workspace_service.sequence, None, editor_settings.show_complement, [], DEFAULT_HIGHLIGHTS
            )[0]
        )

        view_inputs = [display_mode, show_complement, enzyme_select, highlight_select]
        view_outputs = [
            sequence_box,
            kind_md,
            element_select,
            selection_md,
            viewer_out,
            annotations_df,
            notes_df,
            status_md,
        ]

        # ------------------------------------------------------------------
        # Sequence changes: all reset the selection.
        # ------------------------------------------------------------------
        def commit(new_text: str, status: str, mode, show_comp, enzymes, highlights):
            canonical = workspace_service.set_sequence(new_text)
            outputs = view(canonical, mode, None, show_comp, enzymes, highlights)
            if status and not outputs[-1]:
                outputs = outputs[:-1] + (status,)
            return (canonical, None) + outputs

        def edit_handler(text, canonical, selection, mode, show_comp, enzymes, highlights):
            new_text = edited_sequence(text, canonical, mode)
            if new_text is None:
                # Focus left the box without an edit; keep the selection.
                return (canonical, selection) + view(canonical, mode, selection, show_comp, enzymes, highlights)
            return commit(new_text, "", mode, show_comp, enzymes, highlights)

        def upload_handler(file_obj, canonical, mode, show_comp, enzymes, highlights):
            if file_obj is None:
                return (canonical, gr.update()) + view(canonical, mode, None, show_comp, enzymes, highlights)
            path = Path(file_obj if isinstance(file_obj, str) else file_obj.name)
            try:
                text = read_upload_text(path)
            except (ValueError, OSError) as e:
                logger.warning("Upload failed for %s: %s", path.name, e)
                outputs = view(canonical, mode, None, show_comp, enzymes, highlights)
                return (canonical, None) + outputs[:-1] + (f"Failed to process file: {e}",)
            return commit(text, f"Sequence uploaded from **{path.name}**", mode, show_comp, enzymes, highlights)

        def clear_handler(mode, show_comp, enzymes, highlights):
            workspace_service.clear()
            return commit("", "Sequence cleared", mode, show_comp, enzymes, highlights)

        def insert_handler(element_name, canonical, selection, mode, show_comp, enzymes, highlights):
            element = find_element(classify(canonical), element_name) if element_name else None
            if element is None:
                outputs = view(canonical, mode, selection, show_comp, enzymes, highlights)
                return (canonical, selection) + outputs[:-1] + ("Select an element to insert.",)
            if selection is None:
                new_seq = insert_element(canonical, element.sequence)
            else:
                new_seq = insert_element(canonical, element.sequence, selection.start, selection.end)
            return commit(new_seq, f"Inserted {element.name}: `{element.sequence}`", mode, show_comp, enzymes, highlights)

        def export_handler(canonical):
            if not canonical:
                return None, "No sequence to export."
            with tempfile.NamedTemporaryFile(mode="w", suffix=".fasta", delete=False) as tmp:
                path = Path(tmp.name)
            write_fasta("geneforge_sequence", canonical, path, description=classify(canonical))
            return str(path), f"Exported {len(canonical)} symbols to FASTA"

        export_btn.click(export_handler, inputs=[sequence_state], outputs=[export_file, status_md])

        state_and_view = [sequence_state, selection_state] + view_outputs
        sequence_box.blur(
            edit_handler,
            inputs=[sequence_box, sequence_state, selection_state] + view_inputs,
            outputs=state_and_view,
        )
        upload_file.upload(
            upload_handler,
            inputs=[upload_file, sequence_state] + view_inputs,
            outputs=state_and_view,
        )
        clear_btn.click(clear_handler, inputs=view_inputs, outputs=state_and_view)
        insert_btn.click(
            insert_handler,
            inputs=[element_select, sequence_state, selection_state] + view_inputs,
            outputs=state_and_view,
        )

        # ------------------------------------------------------------------
        # Display options: re-render only.
        # ------------------------------------------------------------------
        def refresh_handler(canonical, selection, mode, show_comp, enzymes, highlights):
            return view(canonical, mode, selection, show_comp, enzymes, highlights)

        for component in (display_mode, show_complement, enzyme_select, highlight_select):
            component.change(
                refresh_handler,
                inputs=[sequence_state, selection_state] + view_inputs,
                outputs=view_outputs,
            )

        def records_changed_handler(canonical, selection, mode, show_comp, enzymes, highlights):
            # Keep whatever status the annotation/note handler just reported.
            return view(canonical, mode, selection, show_comp, enzymes, highlights)[:-1]

        revision_state.change(
            records_changed_handler,
            inputs=[sequence_state, selection_state] + view_inputs,
            outputs=view_outputs[:-1],
        )

        # ------------------------------------------------------------------
        # Selection: textbox selections arrive in display coordinates.
        # ------------------------------------------------------------------
        def apply_selection(region: Optional[Region], canonical, show_comp, enzymes, highlights):
            unit = "aa" if classify(canonical) == "protein" else "bp"
            html, error = viewer_html(canonical, region, show_comp, enzymes, highlights)
            start = region.start + 1 if region else None
            end = region.end if region else None
            return region, sequence_service.describe_selection(region, unit=unit), html, start, end, error or ""

        selection_outputs = [selection_state, selection_md, viewer_out, sel_start, sel_end, status_md]

        def textbox_select_handler(canonical, mode, show_comp, enzymes, highlights, evt: gr.SelectData):
            region = selection_from_display(canonical, mode, evt.index) if evt.selected else None
            return apply_selection(region, canonical, show_comp, enzymes, highlights)

        def range_select_handler(start, end, canonical, show_comp, enzymes, highlights):
            region = selection_from_range(start, end, len(canonical))
            return apply_selection(region, canonical, show_comp, enzymes, highlights)

        sequence_box.select(
            textbox_select_handler,
            inputs=[sequence_state, display_mode, show_complement, enzyme_select, highlight_select],
            outputs=selection_outputs,
        )
        select_btn.click(
            range_select_handler,
            inputs=[sel_start, sel_end, sequence_state, show_complement, enzyme_select, highlight_select],
            outputs=selection_outputs,
        )

        # ------------------------------------------------------------------
        # Annotations and notes (host-owned records keyed by Region).
        # ------------------------------------------------------------------
        def add_annotation_handler(label, color, direction, canonical, selection, revision):
            if selection is None:
                return "Please select a sequence range first", gr.update(), revision
            try:
                annotation = workspace_service.add_annotation(
                    selection,
                    label,
                    color=color,
                    direction=1 if direction == "forward" else -1,
                )
            except ValueError as e:
                return f"Error adding annotation: {e}", gr.update(), revision
            return f"Added annotation: {annotation.label}", "", revision + 1

        def remove_annotation_handler(row, revision):
            if row is None:
                return "No annotation selected.", revision
            if workspace_service.remove_annotation(int(row) - 1):
                return f"Removed annotation #{int(row)}", revision + 1
            return f"Failed to remove annotation #{int(row)}", revision

        def add_note_handler(title, content, selection, revision):
            if selection is None:
                return "Please select a sequence range first", gr.update(), gr.update(), revision
            try:
                note = workspace_service.add_note(selection, title, content or "")
            except ValueError as e:
                return f"Error adding note: {e}", gr.update(), gr.update(), revision
            return f"Added note: {note.title}", "", "", revision + 1

        ann_add_btn.click(
            add_annotation_handler,
            inputs=[ann_label, ann_color, ann_direction, sequence_state, selection_state, revision_state],
            outputs=[status_md, ann_label, revision_state],
        )
        ann_remove_btn.click(
            remove_annotation_handler,
            inputs=[ann_remove_idx, revision_state],
            outputs=[status_md, revision_state],
        )
        note_add_btn.click(
            add_note_handler,
            inputs=[note_title, note_content, selection_state, revision_state],
            outputs=[status_md, note_title, note_content, revision_state],
        )

    return {
        "sequence_box": sequence_box,
        "display_mode": display_mode,
        "viewer": viewer_out,
        "status": status_md,
    }
