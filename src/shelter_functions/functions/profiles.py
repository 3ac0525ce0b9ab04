"""Public profiles: handle claims and watch-lists."""

from __future__ import annotations

import logging

from shelter_functions.db.documents import ArrayRemove, ArrayUnion, DocumentRef
from shelter_functions.exceptions import AlreadyExistsError
from shelter_functions.functions.collections import PETS, PROFILES
from shelter_functions.functions.registry import CallRequest, callable_function
from shelter_functions.security.context import ADMIN_CLAIM
from shelter_functions.validation import FieldType

logger = logging.getLogger(__name__)

HANDLE_SCHEMA = {"userName": FieldType.STRING}
WATCH_SCHEMA = {"petId": FieldType.STRING, "userName": FieldType.STRING}


@callable_function("check-handle-availability", schema=HANDLE_SCHEMA, require_auth=False)
async def check_handle_availability(call: CallRequest) -> None:
    if await call.deps.documents.get(PROFILES, call.data["userName"]) is not None:
        raise AlreadyExistsError("This login is already taken")


@callable_function("create-profile", schema=HANDLE_SCHEMA)
async def create_profile(call: CallRequest) -> None:
    docs = call.deps.documents
    handle = call.data["userName"]
    # Check-then-set: two concurrent calls can both pass these reads.
    if await docs.find_one(PROFILES, "userId", call.uid) is not None:
        raise AlreadyExistsError("This user already has a public profile")
    if await docs.get(PROFILES, handle) is not None:
        raise AlreadyExistsError("This login is already taken")

    # Profile creation is sign-up: the caller gets a user record if it has none.
    user = await call.deps.identity.ensure_user(call.uid, email=call.authenticated_caller.email)
    admin_email = call.deps.settings.admin_email
    if admin_email and user.email and user.email.lower() == admin_email.lower():
        await call.deps.identity.set_claims(call.uid, {**user.custom_claims, ADMIN_CLAIM: True})
        logger.info("Granted admin claim to %s", call.uid)

    await docs.set(PROFILES, handle, {"userId": call.uid, "petsWatched": []})
    logger.info("Created profile %s for %s", handle, call.uid)


@callable_function("add-to-watched", schema=WATCH_SCHEMA)
async def add_to_watched(call: CallRequest) -> None:
    pet = DocumentRef(PETS, call.data["petId"])
    await call.deps.documents.update(PROFILES, call.data["userName"], {"petsWatched": ArrayUnion(pet)})


@callable_function("remove-from-watched", schema=WATCH_SCHEMA)
async def remove_from_watched(call: CallRequest) -> None:
    pet = DocumentRef(PETS, call.data["petId"])
    await call.deps.documents.update(PROFILES, call.data["userName"], {"petsWatched": ArrayRemove(pet)})
