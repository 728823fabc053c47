"""Privacy consent routes for the API.

Every handler goes through the injected ``ConsentStore``; the routes never
read or write persisted settings directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, status

from privacy_guard.api.dependencies import ConsentStoreDep
from privacy_guard.api.schemas.privacy import (
    ConsentRecordResponse,
    DisclosureResponse,
    FeatureAccessResponse,
    PrivacySummaryResponse,
)
from privacy_guard.consent_store import ConsentStore
from privacy_guard.constants.features import PrivacyFeature
from privacy_guard.feature_gate import allowed_features

router = APIRouter(prefix="/privacy", tags=["privacy"])

FeaturePath = Annotated[PrivacyFeature, Path(description="Privacy feature identifier")]


def _record_response(store: ConsentStore) -> ConsentRecordResponse:
    record = store.summary()
    return ConsentRecordResponse(**record.to_dict(), allowed=allowed_features(record))


@router.get("", response_model=ConsentRecordResponse)
def get_privacy_settings(store: ConsentStoreDep) -> ConsentRecordResponse:
    """Return the current consent flags and which features are allowed."""
    return _record_response(store)


@router.get("/summary", response_model=PrivacySummaryResponse)
def get_privacy_summary(store: ConsentStoreDep) -> PrivacySummaryResponse:
    """Return the feature flags and panic state shown on the privacy screen."""
    return PrivacySummaryResponse.model_validate(store.privacy_summary())


@router.get("/features/{feature}", response_model=FeatureAccessResponse)
def check_feature(feature: FeaturePath, store: ConsentStoreDep) -> FeatureAccessResponse:
    """Check whether a feature may be used right now."""
    return FeatureAccessResponse(feature=feature, allowed=store.can_use_feature(feature))


@router.get("/disclosures/{feature}", response_model=DisclosureResponse)
def get_disclosure(feature: FeaturePath, store: ConsentStoreDep) -> DisclosureResponse:
    """Return the disclosure to show before asking consent for a feature."""
    return DisclosureResponse.model_validate(store.disclosure_for(feature))


@router.post("/policy/accept", response_model=ConsentRecordResponse)
def accept_privacy_policy(store: ConsentStoreDep) -> ConsentRecordResponse:
    """Accept the privacy policy. There is no matching revoke endpoint."""
    store.accept_privacy_policy()
    return _record_response(store)


@router.post("/features/{feature}/accept", response_model=ConsentRecordResponse)
def accept_feature(feature: FeaturePath, store: ConsentStoreDep) -> ConsentRecordResponse:
    """Record consent for a feature."""
    store.accept(feature)
    return _record_response(store)


@router.post("/features/{feature}/revoke", response_model=ConsentRecordResponse)
def revoke_feature(feature: FeaturePath, store: ConsentStoreDep) -> ConsentRecordResponse:
    """Withdraw consent for a feature."""
    store.revoke_consent(feature)
    return _record_response(store)


@router.post("/panic", response_model=ConsentRecordResponse)
def enable_panic_switch(store: ConsentStoreDep) -> ConsentRecordResponse:
    """Stop all sharing immediately and deny every feature."""
    store.enable_panic_switch()
    return _record_response(store)


@router.delete("/panic", response_model=ConsentRecordResponse)
def disable_panic_switch(store: ConsentStoreDep) -> ConsentRecordResponse:
    """Turn the panic switch off. Individual consents are not restored."""
    store.disable_panic_switch()
    return _record_response(store)


@router.post("/reset", response_model=ConsentRecordResponse, status_code=status.HTTP_200_OK)
def reset_privacy_settings(store: ConsentStoreDep) -> ConsentRecordResponse:
    """Reset every consent flag and the panic switch to their defaults."""
    store.reset()
    return _record_response(store)
