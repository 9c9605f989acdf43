from __future__ import annotations

import logging

import gradio as gr
from dotenv import load_dotenv

from frontend.diagram import describe_image, render_svg_stream, render_tikz
from frontend.exporters import save_outputs
from frontend.presets import DESCRIPTION_PRESETS, TIKZ_PRESETS
from frontend.uploads import file_to_data_uri
from constants import MAX_DESCRIPTION_CHARS
from llm.client import DiagramClient
from llm.config import ClientConfig
from llm.errors import InvalidImageError
from llm.settings import Profile
from logging_setup import setup_logging

load_dotenv()  # Load environment variables from .env file if present

LOGGER = logging.getLogger("tikzsvg.frontend.app")

CSS = """
#controls_row { gap: 12px; }
#generate_btn, #render_btn { width: 100%; }

#code_col .gr-code textarea { height: 400px !important; min-height: 400px !important; overflow-y: auto !important; resize: none !important; }
.logs_panel { min-height: 200px; max-height: 400px; overflow-y: auto; white-space: pre-wrap; background: #0b1021; color: #e5e7eb; padding: 12px; border-radius: 8px; border: 1px solid #1f2937; }

#svg_preview { min-height: 420px; border: 1px solid #e5e7eb; border-radius: 8px; padding: 8px; background: #ffffff; text-align: center; }
#svg_preview svg { max-width: 100%; height: auto; }
#downloads { border: 0 !important; background: transparent !important; box-shadow: none !important; }
"""

EMPTY_PREVIEW = "<p style='color:#9ca3af;'>The SVG preview will appear here.</p>"


def _logs_md(lines):
    return "### Logs\n" + "\n\n".join(lines)


def _preview_html(svg: str) -> str:
    # Fragments mid-stream may be unterminated; the browser tolerates that.
    return f"<div>{svg}</div>" if svg else EMPTY_PREVIEW


def build_interface(client: DiagramClient = None):
    if client is None:
        client = DiagramClient(ClientConfig.from_env())

    with gr.Blocks(title="TikZ/SVG Studio", css=CSS) as demo:
        gr.Markdown(
            """
            # TikZ/SVG Studio
            Turn a geometry problem (text or picture) into TikZ, and render TikZ as SVG with a live preview.

            <span style='color:orange; font-weight:bold;'>Deep reasoning is slower but more careful with projections and midpoints.</span>
            """
        )

        with gr.Tabs():
            with gr.TabItem("TikZ from description / image"):
                with gr.Row(elem_id="controls_row"):
                    desc_preset = gr.Dropdown(choices=list(DESCRIPTION_PRESETS.keys()), value="None", label="Example")
                    tikz_deep = gr.Checkbox(value=False, label="Deep reasoning")
                with gr.Row():
                    with gr.Column(scale=6, elem_id="code_col"):
                        description = gr.Textbox(label="Description", lines=6, max_length=MAX_DESCRIPTION_CHARS,
                                                 placeholder="Describe the figure or paste the problem statement...")
                        image = gr.Image(label="Problem image (optional)", type="filepath")
                        with gr.Row():
                            describe_btn = gr.Button("Describe image", variant="secondary")
                            generate_btn = gr.Button("Generate TikZ", variant="primary", elem_id="generate_btn")
                    with gr.Column(scale=6):
                        tikz_out = gr.Code(label="TikZ Code", language="latex", lines=20, max_lines=20)
                        tikz_logs = gr.Markdown(value=_logs_md(["Waiting for input..."]), elem_classes=["logs_panel"])
                        tikz_files = gr.File(label="Download", file_count="multiple", elem_id="downloads")
                send_btn = gr.Button("Send to TikZ → SVG", variant="secondary")

            with gr.TabItem("TikZ → SVG"):
                with gr.Row(elem_id="controls_row"):
                    tikz_preset = gr.Dropdown(choices=list(TIKZ_PRESETS.keys()), value="None", label="Example")
                    svg_deep = gr.Checkbox(value=False, label="Deep reasoning")
                with gr.Row():
                    with gr.Column(scale=6, elem_id="code_col"):
                        tikz_in = gr.Code(label="TikZ Code", language="latex", lines=20, max_lines=20)
                        render_btn = gr.Button("Render SVG", variant="primary", elem_id="render_btn")
                        svg_logs = gr.Markdown(value=_logs_md(["Waiting for input..."]), elem_classes=["logs_panel"])
                    with gr.Column(scale=6):
                        svg_preview = gr.HTML(value=EMPTY_PREVIEW, elem_id="svg_preview")
                        svg_source = gr.Code(label="SVG Code", language="html", lines=12, max_lines=12)
                        svg_files = gr.File(label="Downloads (SVG/TikZ)", file_count="multiple", elem_id="downloads")

        def _image_uri(path):
            try:
                return file_to_data_uri(path)
            except OSError as e:
                raise InvalidImageError(f"Could not read uploaded image: {e}") from e

        def generate_tikz(desc_text, image_path, deep):
            log_accum = []
            try:
                uri = _image_uri(image_path)
            except InvalidImageError as e:
                yield gr.update(), gr.update(value=_logs_md([f"[ERROR] {e}"])), None
                return
            for evt in render_tikz(client, desc_text, uri, Profile.from_flag(deep)):
                if evt["type"] == "log":
                    log_accum.append(evt["text"])
                    yield gr.update(), gr.update(value=_logs_md(log_accum)), None
                elif evt["type"] == "tikz":
                    yield gr.update(value=evt["tikz"]), gr.update(), None
                elif evt["type"] == "final":
                    paths = save_outputs(evt["outputs"])
                    yield gr.update(), gr.update(value=_logs_md(log_accum)), list(paths.values()) or None

        def describe(image_path):
            log_accum = []
            try:
                uri = _image_uri(image_path)
            except InvalidImageError as e:
                yield gr.update(), gr.update(value=_logs_md([f"[ERROR] {e}"]))
                return
            for evt in describe_image(client, uri):
                if evt["type"] == "log":
                    log_accum.append(evt["text"])
                    yield gr.update(), gr.update(value=_logs_md(log_accum))
                elif evt["type"] == "final":
                    text = evt["description"]
                    yield (gr.update(value=text) if text else gr.update()), gr.update(value=_logs_md(log_accum))

        def render_svg(tikz_text, deep):
            log_accum = []
            for evt in render_svg_stream(client, tikz_text, Profile.from_flag(deep)):
                if evt["type"] == "log":
                    log_accum.append(evt["text"])
                    yield gr.update(), gr.update(), gr.update(value=_logs_md(log_accum)), None
                elif evt["type"] == "svg":
                    yield gr.update(value=_preview_html(evt["svg"])), gr.update(value=evt["svg"]), gr.update(), None
                elif evt["type"] == "final":
                    paths = save_outputs(evt["outputs"])
                    downloads = [p for k, p in paths.items() if k in ("svg", "tex")]
                    yield gr.update(), gr.update(), gr.update(value=_logs_md(log_accum)), downloads or None

        desc_preset.change(lambda k: DESCRIPTION_PRESETS.get(k, ""), [desc_preset], [description])
        tikz_preset.change(lambda k: TIKZ_PRESETS.get(k, ""), [tikz_preset], [tikz_in])
        generate_btn.click(generate_tikz, [description, image, tikz_deep], [tikz_out, tikz_logs, tikz_files])
        describe_btn.click(describe, [image], [description, tikz_logs])
        send_btn.click(lambda t: t, [tikz_out], [tikz_in])
        render_btn.click(render_svg, [tikz_in, svg_deep], [svg_preview, svg_source, svg_logs, svg_files])

    return demo


def main() -> None:
    setup_logging()
    config = ClientConfig.from_env()
    if not config.api_key:
        LOGGER.warning("No GEMINI_API_KEY found; generation requests will fail until it is set.")
    build_interface(DiagramClient(config)).launch()


if __name__ == "__main__":
    main()
