"""Pydantic models shared across logic/application layers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class LookupKind(str, Enum):
    BY_NAME = "by_name"
    BY_CODE = "by_code"
    BY_CAPITAL = "by_capital"
    BY_REGION = "by_region"
    ALL = "all"


REGIONS: tuple[str, ...] = ("Africa", "Americas", "Antarctic", "Asia", "Europe", "Oceania")


class Country(BaseModel):
    """One country record as returned by the REST Countries API."""

    model_config = ConfigDict(frozen=True)

    common_name: str
    official_name: str = ""
    code: str
    capital: str | None = None
    region: str = ""
    subregion: str | None = None
    population: int = Field(default=0, ge=0)
    area: float = Field(default=0.0, ge=0)
    timezones: tuple[str, ...] = ()
    dial_root: str | None = None
    dial_suffix: str | None = None
    flag_url: str = ""
    coat_of_arms_url: str | None = None
    map_url: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Country":
        """Flatten the nested upstream shape into a ``Country``."""

        name = payload.get("name") or {}
        capitals = payload.get("capital") or []
        idd = payload.get("idd") or {}
        suffixes = idd.get("suffixes") or []
        flags = payload.get("flags") or {}
        coat_of_arms = payload.get("coatOfArms") or {}
        maps = payload.get("maps") or {}
        return cls(
            common_name=name.get("common", ""),
            official_name=name.get("official", ""),
            code=payload.get("cca2", ""),
            capital=capitals[0] if capitals else None,
            region=payload.get("region", ""),
            subregion=payload.get("subregion") or None,
            population=payload.get("population") or 0,
            area=payload.get("area") or 0.0,
            timezones=tuple(payload.get("timezones") or ()),
            dial_root=idd.get("root") or None,
            dial_suffix=suffixes[0] if suffixes else None,
            flag_url=flags.get("png", ""),
            coat_of_arms_url=coat_of_arms.get("png") or None,
            map_url=maps.get("googleMaps") or None,
        )

    @property
    def dial_code(self) -> str | None:
        if not self.dial_root:
            return None
        return f"{self.dial_root}{self.dial_suffix or ''}"

    @property
    def coat_of_arms(self) -> str:
        return self.coat_of_arms_url or self.flag_url


class FeedbackDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    rating: int = Field(default=0, ge=0, le=5)
    comment: str = ""


class FeedbackAck(BaseModel):
    message: str = ""


__all__ = [
    "Country",
    "FeedbackAck",
    "FeedbackDraft",
    "LookupKind",
    "REGIONS",
]
