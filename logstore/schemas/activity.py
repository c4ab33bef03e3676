"""Activity definition schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# xAPI language map: {"en": "Forum"}
LanguageMap = dict[str, str]


class ActivityDefinition(BaseModel):
    """Activity definition built from the current record store state.

    ``name`` and ``description`` are only set for full definitions, and
    ``description`` only when the module has an intro.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    uuid: str
    name: LanguageMap | None = None
    description: LanguageMap | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize without the absent fields."""
        return self.model_dump(exclude_none=True)

    def activity_id(self, platform_iri: str) -> str:
        """xAPI activity IRI of this activity."""
        return f"{platform_iri}/xapi/activities/{self.type}/{self.uuid}"
