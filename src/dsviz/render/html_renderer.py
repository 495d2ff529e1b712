"""
Minimal Jinja2-based renderer for session transcripts. Loads templates from the package.
"""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

from ..core.session import Session, StructureKind
from .text_renderer import describe_state


def get_jinja_env() -> Environment:
    return Environment(
        loader=PackageLoader("dsviz.render", "templates"),
        autoescape=select_autoescape(["html", "html.j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_html(session: Session, title: str = "dsviz session") -> str:
    env = get_jinja_env()
    template = env.get_template("transcript.html.j2")
    states = [(kind.value, describe_state(kind, session.state(kind))) for kind in StructureKind]
    return template.render(title=title, messages=session.log, states=states)
