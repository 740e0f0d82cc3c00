"""Bases communes des corps de requête."""
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class CreateBody(BaseModel):
    """Corps de création : les champs inconnus sont refusés."""

    model_config = ConfigDict(extra="forbid")

    def values(self) -> dict[str, Any]:
        return self.model_dump()


class PartialUpdate(BaseModel):
    """Corps de modification partielle : seuls les champs envoyés sont appliqués.

    `champs_obligatoires` liste les champs qui peuvent être omis mais jamais
    envoyés à null.
    """

    model_config = ConfigDict(extra="forbid")
    champs_obligatoires: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def verifier_champs(self):
        if not self.model_fields_set:
            raise ValueError("Au moins un champ doit être fourni")
        for name in self.champs_obligatoires:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"Le champ '{name}' ne peut pas être null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
