"""Pet records. Institution-tier only."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from shelter_functions.db.documents import DocumentRef
from shelter_functions.functions.collections import INSTITUTIONS, PETS
from shelter_functions.functions.registry import CallRequest, callable_function
from shelter_functions.validation import FieldType, Schema

logger = logging.getLogger(__name__)

CREATE_PET_SCHEMA = {
    "species": FieldType.STRING,
    "name": FieldType.STRING,
    "lead": FieldType.STRING,
    "description": FieldType.STRING,
    "institutionId": FieldType.STRING,
    "filters": FieldType.OBJECT,
    "petImage": FieldType.STRING,
}


def update_pet_schema(data: Mapping[str, Any]) -> Schema:
    image_type = FieldType.NULL if data.get("petImage", "") is None else FieldType.STRING
    return {
        "petId": FieldType.STRING,
        "petDataToUpdate": FieldType.OBJECT,
        "petImage": image_type,
    }


@callable_function("create-pet", schema=CREATE_PET_SCHEMA, require_institution=True, notify_build=True)
async def create_pet(call: CallRequest) -> dict[str, str]:
    data = call.data
    image_url = await call.deps.ingest_image(data["petImage"], data["name"])
    pet_id = await call.deps.documents.add(
        PETS,
        {
            "species": data["species"],
            "name": data["name"],
            "lead": data["lead"],
            "description": data["description"],
            "filters": dict(data["filters"]),
            "imageUrl": image_url,
            "institution": DocumentRef(INSTITUTIONS, data["institutionId"]),
        },
    )
    logger.info("Created pet %s for institution %s", pet_id, data["institutionId"])
    return {"petId": pet_id}


@callable_function("update-pet", schema=update_pet_schema, require_institution=True)
async def update_pet(call: CallRequest) -> None:
    data = call.data
    patch = dict(data["petDataToUpdate"])
    if data["petImage"] is not None:
        name = patch.get("name")
        base_name = name if isinstance(name, str) and name else data["petId"]
        patch["imageUrl"] = await call.deps.ingest_image(data["petImage"], base_name)
    await call.deps.documents.update(PETS, data["petId"], patch)
    logger.info("Updated pet %s (%s)", data["petId"], ", ".join(sorted(patch)) or "no fields")


@callable_function("remove-pet", schema={"petId": FieldType.STRING}, require_institution=True)
async def remove_pet(call: CallRequest) -> None:
    await call.deps.documents.delete(PETS, call.data["petId"])
    logger.info("Removed pet %s", call.data["petId"])
