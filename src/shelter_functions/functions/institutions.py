"""Admin-only institution onboarding."""

from __future__ import annotations

import logging

from shelter_functions.functions.collections import INSTITUTIONS
from shelter_functions.functions.registry import CallRequest, callable_function
from shelter_functions.security.context import INSTITUTION_CLAIM
from shelter_functions.validation import FieldType

logger = logging.getLogger(__name__)


@callable_function("grant-institution-role", schema={"email": FieldType.STRING}, require_admin=True)
async def grant_institution_role(call: CallRequest) -> None:
    identity = call.deps.identity
    user = await identity.get_user_by_email(call.data["email"])
    await identity.set_claims(user.uid, {**user.custom_claims, INSTITUTION_CLAIM: True})
    logger.info("Granted institution claim to %s", user.uid)


@callable_function(
    "create-institution",
    schema={"name": FieldType.STRING, "email": FieldType.STRING, "city": FieldType.STRING},
    require_admin=True,
)
async def create_institution(call: CallRequest) -> None:
    data = call.data
    user = await call.deps.identity.get_user_by_email(data["email"])
    await call.deps.documents.set(
        INSTITUTIONS,
        user.uid,
        {
            "email": data["email"],
            "city": data["city"].lower(),
            "name": data["name"].lower(),
        },
    )
    logger.info("Created institution %s", user.uid)
