"""JSON export for formula trees."""

import logging
from typing import Any, Dict

import networkx as nx

from cppcondition.export.graph import formula_to_graph
from cppcondition.logic.formula import Formula

logger = logging.getLogger("cppcondition.export.json")


def export_json(formula: Formula) -> Dict[str, Any]:
    """Export a formula as networkx node-link data.

    Args:
        formula: Formula to export.

    Returns:
        JSON-serializable mapping with ``nodes`` and ``edges`` lists.
    """
    graph = formula_to_graph(formula)
    data = nx.readwrite.json_graph.node_link_data(graph, edges="edges")

    logger.debug("JSON export completed: %d nodes, %d edges",
                 graph.number_of_nodes(), graph.number_of_edges())
    return data
