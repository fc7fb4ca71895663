"""GraphML export for formula trees."""

import logging

import networkx as nx

from cppcondition.export.graph import formula_to_graph
from cppcondition.logic.formula import Formula

logger = logging.getLogger("cppcondition.export.graphml")


def export_graphml(formula: Formula) -> str:
    """Export a formula as a GraphML document.

    Args:
        formula: Formula to export.

    Returns:
        The GraphML document text.
    """
    graph = formula_to_graph(formula)
    text = "\n".join(nx.generate_graphml(graph))

    logger.debug("GraphML export completed: %d nodes", graph.number_of_nodes())
    return text
