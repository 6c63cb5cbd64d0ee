"""Localized plant-name models returned by the name enrichment step."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

PLACEHOLDER_NOTE = "Could not retrieve traditional names"


class LocalPlantNames(BaseModel):
    """Nigerian names for one scientific plant name.

    The completion API is asked for camelCase keys (``scientificName``,
    ``isNative``); snake_case field names are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    scientific_name: str = Field(
        validation_alias=AliasChoices("scientificName", "scientific_name")
    )
    common_name: str = Field(
        default="", validation_alias=AliasChoices("commonName", "common_name")
    )
    yoruba: str | None = None
    igbo: str | None = None
    hausa: str | None = None
    edo: str | None = None
    efik: str | None = None
    pidgin: str | None = None
    is_native: bool = Field(
        default=False, validation_alias=AliasChoices("isNative", "is_native")
    )
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, values: dict) -> dict:
        # The model is told to answer null for unknown names; let defaults apply.
        if isinstance(values, dict):
            return {key: value for key, value in values.items() if value is not None}
        return values

    @classmethod
    def placeholder(cls, scientific_name: str) -> "LocalPlantNames":
        """Degraded record used when the lookup for a name fails."""
        return cls(
            scientific_name=scientific_name,
            common_name=scientific_name,
            is_native=False,
            notes=PLACEHOLDER_NOTE,
        )

    def language_names(self) -> list[tuple[str, str]]:
        """(language, name) pairs for every language with a known name."""
        pairs = [
            ("Yoruba", self.yoruba),
            ("Igbo", self.igbo),
            ("Hausa", self.hausa),
            ("Edo", self.edo),
            ("Efik", self.efik),
            ("Pidgin", self.pidgin),
        ]
        return [(language, name) for language, name in pairs if name]
