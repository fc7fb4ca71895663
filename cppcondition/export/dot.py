"""DOT export for formula trees."""

import logging
from typing import Optional

from cppcondition.export.graph import formula_to_graph
from cppcondition.logic.formula import Formula

logger = logging.getLogger("cppcondition.export.dot")


def export_dot(formula: Formula) -> Optional[str]:
    """Export a formula in DOT format.

    Args:
        formula: Formula to export.

    Returns:
        The DOT source, or None when pydot is not installed.
    """
    graph = formula_to_graph(formula)

    try:
        from networkx.drawing.nx_pydot import to_pydot

        dot_graph = to_pydot(graph)
    except ImportError:
        logger.warning("pydot not available, DOT export skipped")
        return None

    logger.debug("DOT export completed: %d nodes", graph.number_of_nodes())
    return dot_graph.to_string()
