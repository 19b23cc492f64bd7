"""Jinja2 page rendering."""

import json
from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup


def _tojson_script(value: Any) -> Markup:
    """Serialize for embedding inside a <script> element."""
    text = json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    return Markup(text)


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("core.web", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["script_json"] = _tojson_script
    return env


def render(template_name: str, **context: Any) -> str:
    return get_environment().get_template(template_name).render(**context)
