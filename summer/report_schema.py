"""
JSON reports printed by the CLI.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class IntentionInfo(_Schema):
    name: str
    text: str
    family_name: str = Field(alias="familyName")
    priority: str
    extensions: List[str] = Field(default_factory=list)


class AvailabilityReport(_Schema):
    file: str
    offset: int
    element: Optional[str] = None
    intentions: List[IntentionInfo] = Field(default_factory=list)


class ApplyReport(_Schema):
    file: str
    offset: int
    intention: Optional[str] = None
    outcome: str
    property: Optional[str] = None
    changed: bool = False
    written: bool = False


class IntentionsList(_Schema):
    intentions: List[IntentionInfo] = Field(default_factory=list)


__all__ = ["IntentionInfo", "AvailabilityReport", "ApplyReport", "IntentionsList"]
