import gradio as gr

from geneforge.schemas.sequence import SequenceAnalysis
from geneforge.services.sequence_service import SequenceService
from geneforge.services.workspace_service import WorkspaceService


def summary_markdown(analysis: SequenceAnalysis, annotation_count: int) -> str:
    if not analysis.canonical:
        return "No sequence data available"
    unit = "aa" if analysis.kind == "protein" else "bp"
    lines = [
        "| Length | GC Content | Annotations | ORFs Found |",
        "|--------|------------|-------------|------------|",
    ]
    gc = f"{analysis.gc_content:.1f}%" if analysis.gc_content is not None else "n/a"
    orfs = str(len(analysis.orfs)) if analysis.kind == "dna" else "n/a"
    lines.append(f"| {analysis.length} {unit} | {gc} | {annotation_count} | {orfs} |")
    return "\n".join(lines)


def create_stats_tab(
    sequence_service: SequenceService,
    workspace_service: WorkspaceService,
    sequence_state: gr.State,
    selection_state: gr.State,
    revision_state: gr.State,
):
    """Create the Sequence Stats tab."""

    def stats_handler(canonical):
        analysis = sequence_service.analyze(canonical)
        return (
            summary_markdown(analysis, len(workspace_service.annotations)),
            sequence_service.composition_frame(analysis),
            sequence_service.orf_frame(analysis),
            sequence_service.motif_frame(analysis),
        )

    def translate_handler(canonical, selection):
        if not canonical:
            return "", "No sequence to translate."
        analysis = sequence_service.analyze(canonical)
        if analysis.kind not in ("dna", "rna"):
            return "", f"Translation needs a DNA or RNA sequence (current type: {analysis.kind})."
        protein = sequence_service.translate_region(canonical, selection)
        scope = sequence_service.describe_selection(selection) if selection else "Whole sequence"
        return protein, f"{scope}: {len(protein)} codons translated."

    initial = stats_handler(workspace_service.sequence)

    with gr.TabItem("Stats"):
        gr.Markdown("### Sequence Stats")
        summary_md = gr.Markdown(initial[0])

        gr.Markdown("#### Composition")
        composition_df = gr.DataFrame(value=initial[1], label="Composition", interactive=False)

        gr.Markdown("#### Open Reading Frames (ATG to stop, >= 30 bp, forward strand)")
        orf_df = gr.DataFrame(value=initial[2], label="ORFs", interactive=False)

        with gr.Accordion("Motif hits", open=False):
            motif_df = gr.DataFrame(value=initial[3], label="Motifs", interactive=False)

        gr.Markdown("---")
        gr.Markdown("#### Translation")
        translate_btn = gr.Button("Translate selection (or whole sequence)")
        translate_status = gr.Markdown()
        protein_out = gr.Textbox(label="Protein", lines=4, interactive=False)

        stats_outputs = [summary_md, composition_df, orf_df, motif_df]
        sequence_state.change(stats_handler, inputs=[sequence_state], outputs=stats_outputs)
        revision_state.change(stats_handler, inputs=[sequence_state], outputs=stats_outputs)
        translate_btn.click(
            translate_handler,
            inputs=[sequence_state, selection_state],
            outputs=[protein_out, translate_status],
        )

    return {
        "summary": summary_md,
        "composition": composition_df,
        "orfs": orf_df,
        "motifs": motif_df,
    }
