"""Catalog boundary model: ObjectRecord is normalized once, here.

The catalog sends camelCase keys and sometimes JSON-encoded feature lists;
validators below turn every shape into the canonical record.
"""

from __future__ import annotations

import enum
import json
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ObjectCategory(str, enum.Enum):
    STAR = "Star"
    GALAXY = "Galaxy"
    BLACK_HOLE = "Black Hole"
    NEBULA = "Nebula"
    SUPERNOVA_REMNANT = "Supernova Remnant"
    PLANET = "Planet"
    EXOPLANET = "Exoplanet"
    PULSAR = "Pulsar"
    MAGNETAR = "Magnetar"
    NEUTRON_STAR = "Neutron Star"
    QUASAR = "Quasar"
    COMET = "Comet"
    STAR_CLUSTER = "Star Cluster"
    MOON = "Moon"
    BROWN_DWARF = "Brown Dwarf"
    GLOBULAR_CLUSTER = "Globular Cluster"
    DWARF_PLANET = "Dwarf Planet"
    WHITE_DWARF = "White Dwarf"
    SUPERNOVA = "Supernova"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str | None) -> ObjectCategory | None:
        """Case-insensitive lookup; "black_hole" and "black-hole" match Black Hole."""
        if not label:
            return None
        key = " ".join(label.replace("_", " ").replace("-", " ").split()).casefold()
        return _BY_KEY.get(key)


_BY_KEY: dict[str, ObjectCategory] = {c.value.casefold(): c for c in ObjectCategory}


def _coerce_feature_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        try:
            decoded = json.loads(text)
        except ValueError:
            return [text]
        if isinstance(decoded, list):
            value = decoded
        else:
            return [text]
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return [str(value)]


class ObjectRecord(BaseModel):
    """One catalog object, the immutable input to compilation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: int | str | None = None
    name: str
    category: str = Field(
        default=ObjectCategory.UNKNOWN.value,
        validation_alias=AliasChoices("category", "objectType", "object_type"),
    )
    description: str | None = None
    spectral_type: str | None = None
    mass_solar: float | None = Field(
        default=None,
        validation_alias=AliasChoices("mass_solar", "massSolar", "mass"),
    )
    notable_features: tuple[str, ...] = ()
    visual_features: tuple[str, ...] = ()

    # Optional per-object overrides
    galaxy_type: str | None = None
    nebula_type: str | None = None
    planet_type: str | None = None
    sub_type: str | None = None
    structure_details: str | None = None
    surface_features: str | None = None
    color_description: str | None = None
    visual_characteristics: str | None = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def _canonical_category(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return ObjectCategory.UNKNOWN.value
        label = str(v).strip()
        resolved = ObjectCategory.from_label(label)
        # Unrecognized labels are kept verbatim; compilation falls back to Unknown
        return resolved.value if resolved else label

    @field_validator("notable_features", "visual_features", mode="before")
    @classmethod
    def _normalize_features(cls, v: Any) -> list[str]:
        return _coerce_feature_list(v)

    @field_validator(
        "description",
        "spectral_type",
        "galaxy_type",
        "nebula_type",
        "planet_type",
        "sub_type",
        "structure_details",
        "surface_features",
        "color_description",
        "visual_characteristics",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def object_category(self) -> ObjectCategory | None:
        """The recognized category, or None when the label is outside the closed set."""
        return ObjectCategory.from_label(self.category)
