"""Conversion of formula trees into networkx graphs."""

from __future__ import annotations

import logging
from typing import List, Tuple

import networkx as nx

from cppcondition.logic.formula import (
    Conjunction,
    Disjunction,
    FalseFormula,
    Formula,
    Negation,
    TrueFormula,
    Variable,
)
from cppcondition.logic.non_boolean import Literal, Macro, NonBooleanOperator

logger = logging.getLogger("cppcondition.export.graph")


def _describe(formula: Formula) -> Tuple[str, str, List[Tuple[str, Formula]]]:
    """Return node type, label and (role, child) pairs for ``formula``."""
    if isinstance(formula, TrueFormula):
        return "true", "1", []
    if isinstance(formula, FalseFormula):
        return "false", "0", []
    if isinstance(formula, Variable):
        return "variable", formula.name, []
    if isinstance(formula, Literal):
        return "literal", formula.text, []
    if isinstance(formula, Conjunction):
        return "conjunction", "&&", [("left", formula.left), ("right", formula.right)]
    if isinstance(formula, Disjunction):
        return "disjunction", "||", [("left", formula.left), ("right", formula.right)]
    if isinstance(formula, Negation):
        return "negation", "!", [("operand", formula.formula)]
    if isinstance(formula, NonBooleanOperator):
        return (
            "operator",
            formula.operator.symbol,
            [("left", formula.left), ("right", formula.right)],
        )
    if isinstance(formula, Macro):
        children = [("argument", formula.argument)] if formula.argument is not None else []
        return "macro", formula.name, children
    raise TypeError(f"Unknown formula node: {formula!r}")


def formula_to_graph(formula: Formula) -> nx.DiGraph:
    """Build a directed tree with one node per formula node.

    Nodes are numbered in pre-order starting at 0 and carry ``type`` and
    ``label`` attributes; edges point from parent to child and carry the
    child's ``role``. The graph attribute ``root`` names the root node.
    """
    graph = nx.DiGraph(root=0)
    pending: List[Tuple[Formula, int, str]] = [(formula, -1, "")]
    next_id = 0

    while pending:
        node, parent, role = pending.pop()
        node_type, label, children = _describe(node)
        node_id = next_id
        next_id += 1

        graph.add_node(node_id, type=node_type, label=label)
        if parent != -1:
            graph.add_edge(parent, node_id, role=role)
        # reversed so that left children get the lower ids
        for child_role, child in reversed(children):
            pending.append((child, node_id, child_role))

    logger.debug("Built formula graph: %d nodes, %d edges",
                 graph.number_of_nodes(), graph.number_of_edges())
    return graph
