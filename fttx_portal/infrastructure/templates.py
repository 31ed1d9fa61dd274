"""Template Loader — builds the Jinja2 environment and verifies required templates at startup.

Invariants:
    - load_templates() either returns templates that all compiled, or raises TemplateAssetsError
    - Missing directory, missing template and syntax errors are all startup-fatal
    - HTML templates are autoescaped

Design Decisions:
    - Compile required templates eagerly: a broken asset stops the process before
      it accepts traffic, instead of failing the first page view
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import (
    Environment, FileSystemLoader, TemplateNotFound, TemplateSyntaxError,
    select_autoescape,
)

from fttx_portal.core.errors import TemplateAssetsError

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"


def load_templates(
    directory: Path, required: Iterable[str] = (INDEX_TEMPLATE,),
) -> Jinja2Templates:
    """Load and pre-compile templates from directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise TemplateAssetsError(f"Template directory not found: {directory}")

    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    for name in required:
        try:
            env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateAssetsError(
                f"Template '{name}' not found in {directory}", template_name=name,
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateAssetsError(
                f"Template '{name}' failed to parse: {e}", template_name=name,
            ) from e

    logger.info(f"Templates loaded from {directory}")
    return Jinja2Templates(env=env)
