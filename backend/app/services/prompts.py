"""
Prompt templating for the recommendation request.
"""
import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from app.services.extractor import ExtractedFields

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
SEO_PROMPT_TEMPLATE = "seo_prompt.j2"

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def build_seo_prompt(url: str, fields: ExtractedFields) -> str:
    """Render the recommendation prompt for one scanned page."""
    template = _env.get_template(SEO_PROMPT_TEMPLATE)
    return template.render(
        url=url,
        title=fields.title,
        meta=fields.meta,
        h1=fields.h1,
        performance=fields.performance_score,
        seo_score=fields.seo_score,
    )
