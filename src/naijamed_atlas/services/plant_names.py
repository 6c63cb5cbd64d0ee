"""Latin binomial candidates from article titles and abstracts."""

import re

from naijamed_atlas.constants import BINOMIAL_BLACKLIST, MIN_EPITHET_LENGTH
from naijamed_atlas.models.article import ArticleRecord

# Genus species, optionally followed by a Linnaean authority ("L." / "Linn.")
BINOMIAL_PATTERN = re.compile(
    r"\b([A-Z][a-z]+)\s+([a-z]+)(?:\s*(?:L\.|Linn\.))?\b", re.ASCII
)


def extract_plant_names(articles: list[ArticleRecord]) -> list[str]:
    """Return candidate scientific names in order of first occurrence."""
    names: dict[str, None] = {}

    for article in articles:
        full_text = f"{article.title} {article.abstract}"
        for match in BINOMIAL_PATTERN.finditer(full_text):
            genus, species = match.groups()
            name = f"{genus} {species}"
            if name in BINOMIAL_BLACKLIST or len(species) < MIN_EPITHET_LENGTH:
                continue
            names.setdefault(name)

    return list(names)
