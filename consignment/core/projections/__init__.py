"""
Projections of a violation list into output shapes.
"""

from .flat_projector import project_to_messages, sentence_for, unique_in_order
from .tree_projector import project_to_tree

__all__ = [
    "project_to_tree",
    "project_to_messages",
    "sentence_for",
    "unique_in_order",
]
