"""Fold per-type suite summaries into a tree of namespace suites."""

import logging
from collections.abc import Sequence

from boostsec.test_logger.models.suite import SuiteCounters, SuiteNode, SuiteSummary
from boostsec.test_logger.string_utils import substring_after_dot, substring_before_dot

logger = logging.getLogger(__name__)


def aggregate(leaves: Sequence[SuiteSummary]) -> list[SuiteNode]:
    """Group leaf summaries into nested suites by their dotted full names.

    Each pass strips the last segment off every pending node's full name.
    Nodes left with an empty prefix are roots; the others are merged under
    one new suite per prefix, and those suites are the next pass's input.
    Leaves of different depths under the same namespace therefore end up in
    separate roots sharing that namespace's name.

    Args:
        leaves: One summary per type (e.g., full name "ns.sub.Type")

    Returns:
        Root suites sorted by full name, each holding its subtree with
        counters rolled up from its children

    """
    pending = [SuiteNode.from_summary(leaf) for leaf in leaves]
    roots: list[SuiteNode] = []

    while pending:
        groups: dict[str, list[SuiteNode]] = {}
        for node in pending:
            prefix = substring_before_dot(node.full_name)
            if prefix:
                groups.setdefault(prefix, []).append(node)
            else:
                roots.append(node)

        pending = [
            _merge_suites(prefix, members) for prefix, members in sorted(groups.items())
        ]

    roots.sort(key=lambda node: node.full_name)
    logger.debug(f"Aggregated {len(leaves)} leaf suites into {len(roots)} roots")
    return roots


def wrap_in_assembly(roots: Sequence[SuiteNode], name: str) -> SuiteNode:
    """Put all roots under a single assembly node."""
    return SuiteNode(
        name=name,
        full_name=name,
        node_type="Assembly",
        counters=SuiteCounters.sum(root.counters for root in roots),
        children=list(roots),
    )


def _merge_suites(full_name: str, members: list[SuiteNode]) -> SuiteNode:
    children = sorted(members, key=lambda node: node.full_name)
    return SuiteNode(
        name=substring_after_dot(full_name),
        full_name=full_name,
        node_type="TestSuite",
        counters=SuiteCounters.sum(child.counters for child in children),
        children=children,
    )
