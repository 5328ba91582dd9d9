"""
Services for ContextCrafter.

Collection strategies, all producing a CollectionResult:
- GraphCollector: Breadth-first link traversal from a focal document
- ContentCollector: Relevance ranking of the corpus against a focal document
- ManualCollector: Explicit selection, no traversal
- ContextCrafter: Config-driven entry point wiring the collectors and logging
"""

from src.services.base_collector import BaseCollector
from src.services.content_collector import ContentCollector
from src.services.context_crafter import ContextCrafter, configure_logging
from src.services.graph_collector import MAX_DEPTH, MAX_NODES, GraphCollector, clamp_depth
from src.services.manual_collector import ManualCollector

__all__ = [
    "BaseCollector",
    "GraphCollector",
    "ContentCollector",
    "ManualCollector",
    "ContextCrafter",
    "configure_logging",
    "MAX_NODES",
    "MAX_DEPTH",
    "clamp_depth",
]
