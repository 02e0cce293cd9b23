from dataclasses import dataclass
from typing import Callable, Dict, List

from ..exceptions import TemplateNotFoundError
from ..workflow.models import VisualGraph


@dataclass(frozen=True)
class TemplateInfo:
    id: str
    name: str
    description: str = ""
    category: str = "approval"


_TEMPLATES: Dict[str, TemplateInfo] = {}
_BUILDERS: Dict[str, Callable[[], VisualGraph]] = {}


def register_template(template_id: str, name: str, description: str = "", category: str = "approval"):
    def _wrap(fn):
        _TEMPLATES[template_id] = TemplateInfo(template_id, name, description, category)
        _BUILDERS[template_id] = fn
        return fn
    return _wrap


def get_template(template_id: str) -> VisualGraph:
    """ Build a fresh editor graph for the template. """
    _ensure_builtins()
    if template_id not in _BUILDERS:
        raise TemplateNotFoundError(f"Template not found: {template_id}")
    return _BUILDERS[template_id]()


def list_templates() -> List[TemplateInfo]:
    _ensure_builtins()
    return [_TEMPLATES[k] for k in sorted(_TEMPLATES)]


def _ensure_builtins() -> None:
    # registers on import
    from . import builtin  # noqa: F401
