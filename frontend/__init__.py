"""Gradio front end for TikZ/SVG conversion."""

from .diagram import render_tikz, describe_image, render_svg_stream
from .exporters import save_outputs

__all__ = [
    "render_tikz",
    "describe_image",
    "render_svg_stream",
    "save_outputs",
]
