import gradio as gr

from geneforge.core.alphabet import classify
from geneforge.services.assistant_service import AssistantService
from geneforge.services.sequence_service import SequenceService
from geneforge.services.workspace_service import WorkspaceService

AI_ANNOTATION_COLOR = "#8B5CF6"


def create_assistant_tab(
    assistant_service: AssistantService,
    sequence_service: SequenceService,
    workspace_service: WorkspaceService,
    sequence_state: gr.State,
    selection_state: gr.State,
    revision_state: gr.State,
):
    """Create the AI Assistant tab (analyze selection, custom prompt, annotate)."""

    def selection_handler(canonical, selection):
        unit = "aa" if classify(canonical) == "protein" else "bp"
        if selection is None:
            return "Select a region in the sequence editor to analyze or annotate."
        return sequence_service.describe_selection(selection, unit=unit)

    def analyze_handler(canonical, selection):
        reply = assistant_service.analyze_selection(canonical, selection, classify(canonical))
        return reply.text

    def prompt_handler(prompt, canonical, selection):
        reply = assistant_service.run_prompt(canonical, prompt, classify(canonical), region=selection)
        return reply.text

    def annotate_handler(name, selection, revision):
        if selection is None:
            return "Please select a sequence region first", gr.update(), revision
        if not name or not name.strip():
            return "Please provide a name for the annotation", gr.update(), revision
        try:
            annotation = workspace_service.add_annotation(selection, name, color=AI_ANNOTATION_COLOR)
        except ValueError as e:
            return f"Error adding annotation: {e}", gr.update(), revision
        return f"Added annotation: {annotation.label}", "", revision + 1

    with gr.TabItem("AI Assistant"):
        gr.Markdown("### AI Assistant")
        selection_md = gr.Markdown("Select a region in the sequence editor to analyze or annotate.")

        with gr.Tabs():
            with gr.TabItem("Analyze"):
                analyze_btn = gr.Button("Analyze Selection", variant="primary")
            with gr.TabItem("Annotate"):
                annotation_name = gr.Textbox(
                    label="Annotation name",
                    placeholder="Annotation name (e.g., Promoter, CDS, etc.)",
                )
                annotate_btn = gr.Button("Add Annotation")
                annotate_status = gr.Markdown()
            with gr.TabItem("Custom"):
                prompt_box = gr.Textbox(
                    label="Custom AI Prompt",
                    placeholder="Enter your prompt (e.g., 'Optimize this sequence for E. coli expression')",
                    lines=3,
                )
                prompt_btn = gr.Button("Execute")

        response_md = gr.Markdown()
        if assistant_service.is_simulated:
            gr.Markdown("*AI analyses are simulated (no assistant endpoint configured).*")

        selection_state.change(
            selection_handler,
            inputs=[sequence_state, selection_state],
            outputs=[selection_md],
        )
        analyze_btn.click(
            analyze_handler,
            inputs=[sequence_state, selection_state],
            outputs=[response_md],
        )
        prompt_btn.click(
            prompt_handler,
            inputs=[prompt_box, sequence_state, selection_state],
            outputs=[response_md],
        )
        annotate_btn.click(
            annotate_handler,
            inputs=[annotation_name, selection_state, revision_state],
            outputs=[annotate_status, annotation_name, revision_state],
        )

    return {
        "response": response_md,
        "selection": selection_md,
    }
