"""
Main entry point for GeneForge Workbench.

Usage:
    python -m geneforge                        # Launch UI
    python -m geneforge --offline-assistant    # Never call the assistant endpoint
"""

import sys
import argparse
import logging


def main():
    """Launch the GeneForge Workbench application."""
    parser = argparse.ArgumentParser(description="GeneForge Workbench - sequence editor and analyzer")
    parser.add_argument(
        "--port",
        type=int,
        default=7860,
        help="Port to run the server on (default: 7860)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--offline-assistant",
        action="store_true",
        help="Use the simulated assistant even if an endpoint is configured",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    from geneforge.app import APP_THEME, CUSTOM_CSS, create_app
    app = create_app(offline_assistant=args.offline_assistant)

    app.launch(
        server_name="127.0.0.1",
        server_port=args.port,
        share=False,
        theme=APP_THEME,
        css=CUSTOM_CSS,
    )


if __name__ == "__main__":
    sys.exit(main() or 0)
