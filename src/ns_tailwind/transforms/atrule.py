"""At-rule policy: flatten ``@layer``, keep ``@keyframes``, drop the rest."""

from __future__ import annotations

import logging

from ns_tailwind.config import TransformOptions
from ns_tailwind.model.node import AtRule

logger = logging.getLogger(__name__)

FLATTENED_AT_RULES = frozenset({"layer"})
PASSTHROUGH_AT_RULES = frozenset({"keyframes"})
# Known to be unsupported by NativeScript; reported in debug mode.
UNSUPPORTED_AT_RULES = frozenset({"media", "supports", "property"})


def transform_at_rule(node: AtRule, options: TransformOptions, depth: int = 0) -> str | None:
    """Return the output for one at-rule, or None when it is dropped.

    *depth* is the ``@layer`` nesting level of *node*'s parent stylesheet.
    """
    if node.name in FLATTENED_AT_RULES:
        return _flatten(node, options, depth)

    if node.name in PASSTHROUGH_AT_RULES:
        if not node.has_block:
            return None
        return f"@keyframes {node.params} {{\n{node.body.strip()}\n}}"

    if node.name in UNSUPPORTED_AT_RULES:
        if options.debug:
            logger.info("Skipping @%s", node.name)
        return None

    logger.debug("Dropping unknown at-rule @%s", node.name)
    return None


def _flatten(node: AtRule, options: TransformOptions, depth: int) -> str | None:
    # "@layer theme, base;" only declares layer order.
    if not node.has_block:
        return None
    if depth >= options.max_depth:
        logger.warning(
            "Dropping @%s %s: nesting deeper than %d levels",
            node.name,
            node.params,
            options.max_depth,
        )
        return None

    from ns_tailwind.transforms.stylesheet import transform_nodes

    return transform_nodes(node.body, options, depth + 1) or None
