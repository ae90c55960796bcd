"""
GeneForge Workbench - Main Application

Gradio-based GUI for editing and analyzing biological sequences.
"""

import logging
from typing import Optional

import gradio as gr

from geneforge import __version__
from geneforge.config.settings_io import load_active_settings
from geneforge.schemas.config import AppSettings
from geneforge.services.assistant_service import AssistantService, SimulatedTextGenerator
from geneforge.services.sequence_service import SequenceService
from geneforge.services.workspace_service import WorkspaceService
from geneforge.visualization.sequence_viz import HtmlSequenceViewer, SequenceViewer
# UI Tabs
from geneforge.ui.tabs.editor import create_editor_tab
from geneforge.ui.tabs.stats import create_stats_tab
from geneforge.ui.tabs.assistant import create_assistant_tab

logger = logging.getLogger(__name__)

# Custom CSS for clean system fonts
CUSTOM_CSS = """
* {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif !important;
}
code, pre, .code, textarea, .gf-viewer {
    font-family: "SF Mono", Monaco, Consolas, "Liberation Mono", "Courier New", monospace !important;
}
"""

APP_THEME = gr.themes.Base(
    primary_hue="slate",
    secondary_hue="slate",
    neutral_hue="gray",
)


def create_app(
    settings: Optional[AppSettings] = None,
    workspace_service: Optional[WorkspaceService] = None,
    assistant_service: Optional[AssistantService] = None,
    viewer: Optional[SequenceViewer] = None,
    offline_assistant: bool = False,
) -> gr.Blocks:
    """Create the main Gradio application.

    External collaborators (assistant backend, viewer) can be injected; by
    default they are built from the active settings.
    """
    settings = settings or load_active_settings()

    # Initialize Services
    sequence_service = SequenceService()
    workspace_service = workspace_service or WorkspaceService()
    if assistant_service is None:
        generator = SimulatedTextGenerator() if offline_assistant else None
        assistant_service = AssistantService(generator=generator, settings=settings.assistant)
    viewer = viewer or HtmlSequenceViewer(line_width=settings.editor.line_width)
    logger.info(
        "Starting GeneForge v%s (assistant: %s)",
        __version__,
        "simulated" if assistant_service.is_simulated else settings.assistant.endpoint,
    )

    with gr.Blocks(
        title="GeneForge Workbench",
    ) as app:

        gr.Markdown(f"""
        # GeneForge Workbench v{__version__}

        Edit, annotate and analyze DNA, RNA and protein sequences.
        """)

        # Shared session state: canonical sequence, raw-coordinate selection,
        # and a counter bumped whenever user annotations change.
        sequence_state = gr.State(value=workspace_service.sequence)
        selection_state = gr.State(value=None)
        revision_state = gr.State(value=0)

        with gr.Tabs():

            # ================================================================
            # Tab 1: Sequence Editor + Viewer
            # ================================================================
            create_editor_tab(
                sequence_service,
                workspace_service,
                viewer,
                settings.editor,
                sequence_state,
                selection_state,
                revision_state,
            )

            # ================================================================
            # Tab 2: Sequence Stats
            # ================================================================
            create_stats_tab(
                sequence_service,
                workspace_service,
                sequence_state,
                selection_state,
                revision_state,
            )

            # ================================================================
            # Tab 3: AI Assistant
            # ================================================================
            create_assistant_tab(
                assistant_service,
                sequence_service,
                workspace_service,
                sequence_state,
                selection_state,
                revision_state,
            )

            # ================================================================
            # Tab 4: About
            # ================================================================
            with gr.TabItem("About"):
                gr.Markdown(f"""
                # GeneForge Workbench v{__version__}

                A sequence editor with built-in analysis.

                ## Features

                - **Editor:** paste, type or upload (.txt, .fasta, .fa, .gb) sequences; raw or triplet view
                - **Annotations & notes:** attach labels and notes to selected regions
                - **Stats:** length, GC content, composition, ORFs (>= 30 bp), motif hits
                - **Assistant:** send a selected fragment to a text-generation backend

                ## Highlighted motifs

                | Category | Patterns |
                |----------|----------|
                | Start codon | ATG |
                | Stop codons | TAA, TAG, TGA |
                | Restriction sites | EcoRI, BamHI, HindIII, PstI, SalI, XbaI |
                | Promoter elements | TATAAT (-10), TTGACA (-35), TATAAA (TATA box) |

                Coordinates are shown 1-based and inclusive; selections always refer to
                the ungrouped sequence, whichever display mode is active.
                """)

    return app
