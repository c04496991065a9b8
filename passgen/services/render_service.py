# services/render_service.py
from functools import lru_cache
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from passgen.core.config import get_settings
from passgen.models.generation import CharsetCategory, GenerationRequest

TEMPLATE_NAME = "index.html"

CATEGORY_LABELS = [
    (CharsetCategory.RANDOM, "随机"),
    (CharsetCategory.UPPERCASE, "纯大写字母"),
    (CharsetCategory.LOWERCASE, "纯小写字母"),
    (CharsetCategory.MIXED, "大小写字母混合"),
    (CharsetCategory.NUMBERS, "纯数字"),
    (CharsetCategory.NUMBERS_UPPERCASE, "数字和大写字母"),
    (CharsetCategory.NUMBERS_LOWERCASE, "数字和小写字母"),
    (CharsetCategory.NUMBERS_MIXED, "数字和混合大小写字母"),
]


@lru_cache(maxsize=None)
def _environment(template_path: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_path),
        autoescape=select_autoescape(["html"]),
    )


def render_form(
    passwords: Optional[List[str]] = None,
    request: Optional[GenerationRequest] = None,
) -> str:
    """
    Render the generator page.

    Submitted values from `request` are echoed into the form. The password
    block and copy button are only rendered when `passwords` is non-empty.
    """
    env = _environment(get_settings().template_path)
    template = env.get_template(TEMPLATE_NAME)
    return template.render(
        passwords=passwords or [],
        form=request or GenerationRequest(),
        categories=CATEGORY_LABELS,
    )
