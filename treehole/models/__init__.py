"""
Models package - Import all models here for easy access
"""
from treehole.models.message import Message

__all__ = [
    "Message",
]
