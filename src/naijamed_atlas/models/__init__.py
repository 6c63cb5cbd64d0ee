"""Data models for NaijaMed Atlas."""

from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.models.conversation import AppMode, ConversationTurn, Role
from naijamed_atlas.models.herbal import HerbalExcerpt, HerbalSource
from naijamed_atlas.models.plant_names import LocalPlantNames

__all__ = [
    "AppMode",
    "ArticleRecord",
    "ConversationTurn",
    "HerbalExcerpt",
    "HerbalSource",
    "LocalPlantNames",
    "Role",
]
