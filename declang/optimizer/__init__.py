"""
DEC Optimizer Package

Control flow analysis of DEC programs:
- A general directed graph with DFS, transpose and strongly connected components
- The statement-level control flow graph and its generator
"""

from .digraph import DiGraph
from .cfg import CFG
from .cfg_generator import ControlFlowGraphGenerator, build_cfg
from .errors import ControlFlowError, CFG_ERROR_CODES

__all__ = [
    "DiGraph",
    "CFG",
    "ControlFlowGraphGenerator",
    "build_cfg",
    "ControlFlowError",
    "CFG_ERROR_CODES",
]
