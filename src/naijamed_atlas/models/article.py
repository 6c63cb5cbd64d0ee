"""
Article record model.

This is the data contract between the literature client and the services
that consume search results. Services never see raw XML.
"""

from pydantic import BaseModel, ConfigDict


class ArticleRecord(BaseModel):
    """A single PubMed article parsed from the fetch proxy's XML."""

    model_config = ConfigDict(frozen=True)

    pmid: str  # PubMed identifier (e.g. "38472913")
    title: str
    abstract: str  # labelled sections joined; placeholder text if missing
    authors: list[str] = []  # "LastName Initials", at most five
    journal: str
    pub_date: str = ""  # "Month Year", either part may be absent
