"""Jinja2 environment and the shared layout wrapper."""

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from exceptions.custom import InputDataError


LAYOUT_TEMPLATE = "layout.html"


def create_environment(templates_dir: Path) -> Environment:
    """Build the template environment.

    Undefined variables raise at render time so no page can ship with a
    missing value, and every ``{{ value }}`` is HTML-escaped unless it is
    already ``Markup``.
    """
    if not Path(templates_dir).is_dir():
        raise InputDataError("template directory not found", path=str(templates_dir))
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


class PageRenderer:
    def __init__(self, env: Environment, site_url: str):
        self.env = env
        self.site_url = site_url.rstrip("/")

    def url(self, path: str) -> str:
        """Absolute canonical URL for a site path such as ``/contact``."""
        return f"{self.site_url}{path}"

    def render(self, template_name: str, **context) -> Markup:
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise InputDataError(f"template not found: {e.name}") from e
        except TemplateError as e:
            raise InputDataError(f"invalid template {template_name}: {e}") from e
        return Markup(template.render(**context))

    def wrap_in_layout(
        self, content: Markup, title: str, description: str, path: str
    ) -> str:
        """Place a page body into the shared shell with its head metadata."""
        return str(
            self.render(
                LAYOUT_TEMPLATE,
                page_title=title,
                page_description=description,
                page_url=self.url(path),
                content=content,
            )
        )
