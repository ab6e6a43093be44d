"""Gradio web interface for ShotFrame."""

from __future__ import annotations

import atexit
import contextlib
import logging
import os
import shutil
import sys
import tempfile
import traceback

from .config import Config
from .constants import ASPECT_PRESETS, BACKGROUND_PRESETS
from .exceptions import ShotFrameError
from .logging_config import setup_logging
from .session import EditorSession

logger = logging.getLogger("shotframe.main")

# Optional Gradio import
try:
    import gradio as gr

    HAS_GRADIO = True
except ImportError:
    HAS_GRADIO = False
    logger.error("Gradio not installed. Run: pip install 'shotframe[ui]'")

# Temp export directories
_temp_dirs: list[str] = []


def _cleanup_temp_dirs() -> None:
    """Clean up temporary export directories."""
    for d in _temp_dirs:
        with contextlib.suppress(OSError):
            shutil.rmtree(d)
    _temp_dirs.clear()


atexit.register(_cleanup_temp_dirs)


def _status(session: EditorSession, message: str | None = None) -> str:
    if session.asset is None:
        return "**Status:** Drop a screenshot to start"
    text = (
        f"**Status:** {session.asset.width}x{session.asset.height} source, "
        f"{len(session.redactions)} redaction(s)"
    )
    return f"{text}. {message}" if message else text


def create_interface() -> object:
    """Create Gradio interface bound to one editor session."""
    session = EditorSession()
    background_choices = list(BACKGROUND_PRESETS.keys())

    with gr.Blocks(title="ShotFrame - Screenshot Framing", theme=gr.themes.Soft()) as interface:
        gr.Markdown(
            """
        # ShotFrame

        Frame a screenshot on a background, round its corners and blur out
        anything private. Click the preview to place a redaction.
        """
        )

        with gr.Row():
            with gr.Column(scale=1):
                source = gr.Image(label="Screenshot", type="pil", height=240)

                aspect = gr.Radio(
                    choices=list(ASPECT_PRESETS.keys()),
                    value="Original",
                    label="Aspect Ratio",
                )
                padding = gr.Slider(
                    0, 200, value=Config.DEFAULT_PADDING, step=1, label="Padding (px)"
                )
                radius = gr.Slider(
                    0, 100, value=Config.DEFAULT_BORDER_RADIUS, step=1, label="Border Radius (%)"
                )
                background = gr.Dropdown(
                    choices=background_choices,
                    value=background_choices[0],
                    label="Background",
                )
                custom_background = gr.Textbox(
                    label="Custom Background",
                    placeholder="#1e293b or linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
                )
                mark_radius = gr.Slider(
                    4, 200, value=Config.DEFAULT_MARK_RADIUS, step=1, label="Blur Radius (px)"
                )

            with gr.Column(scale=1):
                preview = gr.Image(
                    label="Preview (click to blur)",
                    type="pil",
                    interactive=False,
                    height=Config.PREVIEW_MAX_HEIGHT + 40,
                )
                with gr.Row():
                    clear_btn = gr.Button("Clear Blur")
                    reset_btn = gr.Button("Reset")
                    export_btn = gr.Button("Download PNG", variant="primary")
                download = gr.File(label="Export")
                status = gr.Markdown(_status(session))

        params = [aspect, padding, radius, background, custom_background, mark_radius]

        def _apply_params(
            aspect_label: str,
            pad: float,
            rad: float,
            bg_label: str,
            bg_custom: str,
            blur_radius: float,
        ) -> None:
            session.set_aspect(ASPECT_PRESETS.get(aspect_label, Config.DEFAULT_ASPECT))
            session.set_padding(int(pad))
            session.set_border_radius(int(rad))
            session.set_mark_radius(int(blur_radius))
            if bg_custom and bg_custom.strip():
                session.set_background(bg_custom)
            else:
                _kind, value = BACKGROUND_PRESETS.get(
                    bg_label, BACKGROUND_PRESETS[background_choices[0]]
                )
                session.set_background(value)

        def update_preview(
            aspect_label, pad, rad, bg_label, bg_custom, blur_radius
        ) -> tuple:
            if session.asset is None:
                return None, _status(session)
            try:
                _apply_params(aspect_label, pad, rad, bg_label, bg_custom, blur_radius)
                return session.render_preview().image, _status(session)
            except ShotFrameError as e:
                return gr.update(), _status(session, f"Error: {e}")

        def load_source(
            image, aspect_label, pad, rad, bg_label, bg_custom, blur_radius
        ) -> tuple:
            if image is None:
                session.reset()
                return None, _status(session)
            try:
                session.load_image(image)
            except ShotFrameError as e:
                return None, f"**Status:** Error: {e}"
            return update_preview(aspect_label, pad, rad, bg_label, bg_custom, blur_radius)

        def place_mark(
            aspect_label, pad, rad, bg_label, bg_custom, blur_radius, evt: gr.SelectData
        ) -> tuple:
            if session.asset is None:
                return None, _status(session)
            x, y = evt.index[0], evt.index[1]
            session.place_mark_at_preview(x + 0.5, y + 0.5)
            return update_preview(aspect_label, pad, rad, bg_label, bg_custom, blur_radius)

        def clear_marks(
            aspect_label, pad, rad, bg_label, bg_custom, blur_radius
        ) -> tuple:
            session.clear_marks()
            return update_preview(aspect_label, pad, rad, bg_label, bg_custom, blur_radius)

        def reset_all() -> tuple:
            session.reset()
            return (
                None,
                None,
                "Original",
                Config.DEFAULT_PADDING,
                Config.DEFAULT_BORDER_RADIUS,
                background_choices[0],
                "",
                Config.DEFAULT_MARK_RADIUS,
                None,
                _status(session),
            )

        def export_image() -> tuple:
            if session.asset is None:
                return None, _status(session, "Load a screenshot first")
            try:
                out_dir = tempfile.mkdtemp(prefix="shotframe-")
                _temp_dirs.append(out_dir)
                path = session.export_png(out_dir)
                return str(path), _status(session, f"Exported {path.name}")
            except ShotFrameError as e:
                return None, _status(session, f"Error: {e}")
            except Exception as e:
                traceback.print_exc()
                return None, _status(session, f"Unexpected error: {e}")

        source.change(load_source, inputs=[source, *params], outputs=[preview, status])
        for control in params:
            control.change(update_preview, inputs=params, outputs=[preview, status])
        preview.select(place_mark, inputs=params, outputs=[preview, status])
        clear_btn.click(clear_marks, inputs=params, outputs=[preview, status])
        reset_btn.click(
            reset_all,
            outputs=[source, preview, *params, download, status],
        )
        export_btn.click(export_image, outputs=[download, status])

    return interface


def main() -> None:
    """Main entry point."""
    setup_logging(os.environ.get("SHOTFRAME_LOG_LEVEL", "INFO"))

    logger.info("=" * 70)
    logger.info("SHOTFRAME - Screenshot Framing & Redaction")
    logger.info("=" * 70)

    if not HAS_GRADIO:
        logger.error("Gradio is required. Run: pip install 'shotframe[ui]'")
        sys.exit(1)

    logger.info("Starting web interface...")

    try:
        interface = create_interface()
        interface.launch(
            server_name="0.0.0.0",
            server_port=int(os.environ.get("SHOTFRAME_PORT", "7860")),
            share=False,
            inbrowser=True,
            show_error=True,
        )
    except Exception as e:
        logger.error("Failed to start: %s", e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
