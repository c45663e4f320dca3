"""Flow diagram builders over the public layout API."""

from typing import Callable

from ..core.result import Item
from .flow import decision, decision_body, flow, labels, path, sequence, step
from .parts import footer, header, icon, label, line, narrative


# Registry of diagram builders, used by the YAML loader and the CLI
DIAGRAMS: dict[str, Callable[..., Item]] = {
    "icon": icon,
    "line": line,
    "narrative": narrative,
    "header": header,
    "footer": footer,
    "label": label,
    "step": step,
    "labels": labels,
    "sequence": sequence,
    "path": path,
    "decision_body": decision_body,
    "decision": decision,
    "flow": flow,
}

__all__ = [
    "DIAGRAMS",
    "icon",
    "line",
    "narrative",
    "header",
    "footer",
    "label",
    "step",
    "labels",
    "sequence",
    "path",
    "decision_body",
    "decision",
    "flow",
]
