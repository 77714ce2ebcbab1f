"""Write the module tree into a self-contained HTML treemap report.

The report is a static template with a single ``{{{data}}}`` token that
is replaced by the serialized tree. The template draws a pure-SVG
treemap, so the file works from any local file:// path.
"""

from importlib import resources
from pathlib import Path
from typing import Optional, Union

from ..exceptions import OutputWriteError, TemplateError
from ..logging_config import get_logger
from ..sizing.models import ModuleNode
from .treemap import serialize_tree

logger = get_logger(__name__)

PLACEHOLDER = "{{{data}}}"
DEFAULT_OUTPUT = "output.html"
TEMPLATE_NAME = "template.html"


def load_template(template: Optional[Union[str, Path]] = None) -> str:
    """Read the presentation template.

    Args:
        template: Optional path to a custom template. Defaults to the
            template packaged with sz.

    Raises:
        TemplateError: If the template cannot be read or lacks the
            ``{{{data}}}`` placeholder
    """
    try:
        if template is None:
            name = TEMPLATE_NAME
            text = resources.files(__package__).joinpath(TEMPLATE_NAME).read_text(encoding="utf-8")
        else:
            name = str(template)
            text = Path(template).read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(name, str(e)) from e

    if PLACEHOLDER not in text:
        raise TemplateError(name, f"missing {PLACEHOLDER} placeholder")
    return text


def render_html(module: ModuleNode, template_text: str) -> str:
    # "</" inside a JSON string would close the surrounding <script> element.
    payload = serialize_tree(module).replace("</", "<\\/")
    return template_text.replace(PLACEHOLDER, payload)


def generate_report(
    module: ModuleNode,
    output_path: Union[str, Path] = DEFAULT_OUTPUT,
    template: Optional[Union[str, Path]] = None,
) -> str:
    """Generate the HTML treemap report.

    Parameters
    ----------
    module:
        The size-accounting tree to visualise.
    output_path:
        Where to write the HTML file.
    template:
        Optional custom template containing the ``{{{data}}}`` token.

    Returns
    -------
    str
        Absolute path to the generated HTML file.
    """
    html = render_html(module, load_template(template))

    out = Path(output_path).resolve()
    try:
        out.write_text(html, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(out, str(e)) from e

    logger.info(f"Wrote report to {out}")
    return str(out)
