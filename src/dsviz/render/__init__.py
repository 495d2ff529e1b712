from .html_renderer import render_html
from .text_renderer import describe_state

__all__ = ["render_html", "describe_state"]
