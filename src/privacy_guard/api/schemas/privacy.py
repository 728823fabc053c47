"""Pydantic schemas for privacy API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from privacy_guard.constants.features import PrivacyFeature


class ConsentRecordResponse(BaseModel):
    """Current consent flags plus the gate decision for every feature."""

    model_config = ConfigDict(from_attributes=True)

    privacy_policy_accepted: bool
    location_sharing_accepted: bool
    friends_on_map_accepted: bool
    eta_sharing_accepted: bool
    analytics_accepted: bool
    panic_switch_enabled: bool
    allowed: dict[PrivacyFeature, bool] = Field(
        default_factory=dict,
        description="Whether each feature may be used right now",
    )


class PrivacySummaryResponse(BaseModel):
    """Response for ``GET /api/privacy/summary``."""

    model_config = ConfigDict(from_attributes=True)

    location_sharing: bool
    friends_on_map: bool
    eta_sharing: bool
    analytics: bool
    panic_switch: bool


class FeatureAccessResponse(BaseModel):
    """Response for ``GET /api/privacy/features/{feature}``."""

    feature: PrivacyFeature
    allowed: bool = Field(..., description="Whether the feature is authorized right now")


class DisclosureResponse(BaseModel):
    """Disclosure text shown before asking for consent."""

    model_config = ConfigDict(from_attributes=True)

    feature: PrivacyFeature
    title: str
    description: str
    data_collected: list[str]
    how_to_revoke: str
