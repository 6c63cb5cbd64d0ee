"""Static pharmacopoeia excerpt models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class HerbalSource(str, Enum):
    """Pharmacopoeia corpus an excerpt was taken from."""

    AHP = "AHP"
    WAP = "WAP"

    @property
    def label(self) -> str:
        if self is HerbalSource.AHP:
            return "African Herbal Pharmacopoeia (AHP)"
        return "West African Pharmacopoeia (WAP)"


class HerbalExcerpt(BaseModel):
    """One entry of the hardcoded herbal reference table."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    source: HerbalSource
    page: int
    embedding: tuple[float, ...]

    @property
    def citation(self) -> str:
        """Inline citation token, e.g. ``[AHP:Page24]``."""
        return f"[{self.source.value}:Page{self.page}]"
