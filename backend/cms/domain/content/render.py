"""Render-time resolution of stored builder content."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from markupsafe import Markup, escape

from cms.registry.registry import ComponentRegistry
from cms.registry.renderer_config import parse_structured_value

from .builder import resolve_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnknownComponent:
    """Visible stand-in for a block whose type has no binding."""

    block_type: Any
    block_id: Any = None

    @property
    def message(self) -> str:
        return f"Unknown component: {self.block_type}"

    def __str__(self) -> str:
        return self.message

    def __html__(self) -> str:
        return Markup('<div class="cms-unknown-component" data-block-id="{}">{}</div>').format(
            self.block_id or "", escape(self.message)
        )


def coerce_block_props(
    block_type: str,
    props: Mapping[str, Any],
    registry: ComponentRegistry | None,
) -> dict[str, Any]:
    """Turn serialized array/object props back into native values."""
    resolved = dict(props)
    definition = registry.find_type(block_type) if registry is not None else None
    if definition is None:
        return resolved

    for key, value in props.items():
        prop = definition.get_prop(key)
        if prop is not None:
            resolved[key] = parse_structured_value(prop, value, component=block_type)
    return resolved


def render_blocks(
    raw: Any,
    bindings: Mapping[str, Callable[[dict[str, Any]], Any]],
    registry: ComponentRegistry | None = None,
) -> list[Any]:
    """Render every top-level block in order.

    Each binding receives the block's props without the id. A block whose type
    has no binding yields an UnknownComponent in its place.
    """
    rendered: list[Any] = []

    for block in resolve_content(raw):
        block_type = block.get("type")
        props = block.get("props") if isinstance(block.get("props"), dict) else {}
        block_id = props.get("id")

        render = bindings.get(block_type) if isinstance(block_type, str) else None
        if render is None:
            logger.info("Rendering placeholder for unknown component %r", block_type)
            rendered.append(UnknownComponent(block_type=block_type, block_id=block_id))
            continue

        values = {k: v for k, v in props.items() if k != "id"}
        rendered.append(render(coerce_block_props(block_type, values, registry)))

    return rendered
