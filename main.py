"""NiceGUI entrypoint for the word diff checker."""

from __future__ import annotations

import logging
from pathlib import Path

from nicegui import ui

from diff_checker.compare import compare_texts
from diff_checker.config import AppConfig, ConfigError, get_config
from diff_checker.render import describe_result, render_segments_html

LOGGER = logging.getLogger("diff_checker.ui")

LEGEND_ITEMS = (
    ("Removed", "bg-red-500"),
    ("Added", "bg-green-500"),
    ("Unchanged", "bg-slate-500"),
)

LOGGED_MODULES = ("diff_checker.ui", "diff_checker.compare", "diff_checker.render")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _attach_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    """Add a UTF-8 file handler for log_file unless the logger already writes there."""
    target = str(log_file.resolve())
    if any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    ):
        return False
    file_handler = logging.FileHandler(target, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return True


def _configure_logging(log_file: Path) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    for name in LOGGED_MODULES:
        logger = logging.getLogger(name)
        _attach_file_handler(logger, log_file)
        logger.setLevel(logging.INFO)
        logger.propagate = False


def build_ui(config: AppConfig) -> None:
    """Render the two-pane compare page with legend and results panel."""
    ui.add_css(
        """
        .dc-field,
        .dc-field .q-field {
            width: 100%;
        }
        .dc-results {
            white-space: pre-wrap;
            word-break: break-word;
            line-height: 1.6;
        }
        .dc-added {
            background: rgba(34, 197, 94, 0.2);
            color: #15803d;
            border-left: 2px solid #22c55e;
            padding-left: 0.25rem;
        }
        .dc-removed {
            background: rgba(239, 68, 68, 0.2);
            color: #b91c1c;
            border-left: 2px solid #ef4444;
            padding-left: 0.25rem;
            text-decoration: line-through;
        }
        .dc-unchanged {
            color: #475569;
        }
        .dc-truncated {
            color: #94a3b8;
            font-style: italic;
        }
        """
    )

    ui.label("Diff Checker").classes("text-3xl font-bold")
    ui.label("Compare two texts and highlight the differences").classes("text-sm text-gray-600")

    with ui.row().classes("w-full items-start gap-6"):
        with ui.card().classes("w-full lg:w-1/2"):
            ui.label("Original Text").classes("text-xl font-semibold")
            original_input = ui.textarea(
                label="Original text",
                placeholder="Paste your original text here...",
            ).props("outlined rows=12").classes("dc-field")

        with ui.card().classes("w-full lg:w-1/2"):
            ui.label("Modified Text").classes("text-xl font-semibold")
            modified_input = ui.textarea(
                label="Modified text",
                placeholder="Paste your modified text here...",
            ).props("outlined rows=12").classes("dc-field")

    results_card = ui.card().classes("w-full")
    with results_card:
        ui.label("Comparison Results").classes("text-xl font-semibold")
        with ui.row().classes("gap-4 text-sm"):
            for legend_label, legend_color in LEGEND_ITEMS:
                with ui.row().classes("items-center gap-2"):
                    ui.element("div").classes(f"w-4 h-4 rounded {legend_color}")
                    ui.label(legend_label).classes("text-gray-700")
        summary_label = ui.label("").classes("text-sm text-gray-600")
        results_html = ui.html("", sanitize=False).classes("dc-results w-full")
    results_card.set_visibility(False)

    def compare_action() -> None:
        try:
            segments = compare_texts(
                str(original_input.value or ""),
                str(modified_input.value or ""),
            )
        except Exception as exc:
            LOGGER.exception("Compare failed unexpectedly.")
            results_card.set_visibility(False)
            ui.notify(f"Compare failed: {exc}", type="negative")
            return

        if not segments:
            results_card.set_visibility(False)
            return

        summary_label.text = describe_result(segments)
        results_html.content = render_segments_html(segments, max_segments=config.max_render_segments)
        results_card.set_visibility(True)

    def clear_action() -> None:
        original_input.value = ""
        modified_input.value = ""
        summary_label.text = ""
        results_html.content = ""
        results_card.set_visibility(False)

    for editable in (original_input, modified_input):
        editable.on("keydown.ctrl.enter", compare_action)
        editable.on("keydown.meta.enter", compare_action)

    with ui.row().classes("w-full gap-4 justify-center"):
        ui.button("Compare Texts", on_click=compare_action)
        ui.button("Clear All", on_click=clear_action).props("color=grey")

    ui.label("Tip: Use Ctrl/Cmd + Enter to compare while typing").classes("text-sm text-gray-500")


def main() -> None:
    try:
        config = get_config()
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    _configure_logging(config.log_file)
    print(f"Starting Diff Checker at http://{config.host}:{config.port}")
    build_ui(config)
    ui.run(host=config.host, port=config.port, title="Diff Checker", show=False, reload=False)


if __name__ == "__main__":
    main()
