"""Load and render Jinja2 templates shipped inside a caller's templates subpackage."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a Jinja2 template found in ``{package}.templates``.

    Generated files must end with a newline, so the template's trailing
    newline is kept.

    Args:
        template_name: Template filename (e.g. "lesson.go.j2")
        package: The caller's package (pass __package__)
        **kwargs: Template variables.

    Raises:
        FileNotFoundError: If the template does not exist
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)
