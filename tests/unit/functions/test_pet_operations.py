from __future__ import annotations

import pytest

from shelter_functions.db.documents import DocumentNotFoundError, DocumentRef
from shelter_functions.exceptions import InvalidArgumentError, MalformedImageError, PermissionDeniedError
from shelter_functions.functions import invoke
from tests.helpers import JPEG_DATA_URL, PNG_BYTES, pet_payload

pytestmark = pytest.mark.asyncio


async def _create(deps, caller, **overrides) -> str:
    result = await invoke("create-pet", pet_payload(**overrides), caller, deps)
    return result["petId"]


async def test_create_pet_stores_document_and_image(deps, documents, storage, institution_caller):
    pet_id = await _create(deps, institution_caller)

    pet = await documents.get("pets", pet_id)
    assert pet["name"] == "Rex"
    assert pet["species"] == "dog"
    assert pet["filters"] == {"size": "medium", "age": 3}
    assert pet["institution"] == DocumentRef("institutions", "inst-uid")
    assert pet["imageUrl"].startswith("memory://petImages/Rex")
    assert "petImage" not in pet

    (key,) = storage.keys()
    assert key.startswith("petImages/Rex") and key.endswith(".png")
    assert await storage.get(key) == PNG_BYTES


async def test_create_pet_denied_for_plain_user_has_no_side_effects(deps, documents, storage, notifier, alice):
    with pytest.raises(PermissionDeniedError):
        await invoke("create-pet", pet_payload(), alice, deps)

    await deps.background.drain()
    assert documents.dump("pets") == {}
    assert storage.keys() == []
    assert notifier.calls == 0


async def test_admin_without_institution_claim_is_denied(deps, admin_caller):
    with pytest.raises(PermissionDeniedError, match="approved institution"):
        await invoke("create-pet", pet_payload(), admin_caller, deps)


async def test_create_pet_rejects_extra_fields(deps, storage, institution_caller):
    with pytest.raises(InvalidArgumentError, match="Number of arguments invalid"):
        await invoke("create-pet", pet_payload(color="brown"), institution_caller, deps)
    assert storage.keys() == []


async def test_create_pet_rejects_non_object_filters(deps, institution_caller):
    with pytest.raises(InvalidArgumentError, match="Invalid arguments"):
        await invoke("create-pet", pet_payload(filters="small"), institution_caller, deps)


async def test_malformed_image_writes_nothing(deps, documents, storage, notifier, institution_caller):
    with pytest.raises(MalformedImageError):
        await invoke("create-pet", pet_payload(petImage="not-an-image"), institution_caller, deps)

    await deps.background.drain()
    assert documents.dump("pets") == {}
    assert storage.keys() == []
    assert notifier.calls == 0


async def test_update_with_null_image_preserves_image(deps, documents, storage, institution_caller):
    pet_id = await _create(deps, institution_caller)
    before = await documents.get("pets", pet_id)

    await invoke(
        "update-pet",
        {"petId": pet_id, "petDataToUpdate": {"lead": "John Roe"}, "petImage": None},
        institution_caller,
        deps,
    )

    after = await documents.get("pets", pet_id)
    assert after["lead"] == "John Roe"
    assert after["imageUrl"] == before["imageUrl"]
    assert len(storage.keys()) == 1


async def test_update_with_image_replaces_url(deps, documents, storage, institution_caller):
    pet_id = await _create(deps, institution_caller)
    before = await documents.get("pets", pet_id)

    await invoke(
        "update-pet",
        {"petId": pet_id, "petDataToUpdate": {"name": "Max"}, "petImage": JPEG_DATA_URL},
        institution_caller,
        deps,
    )

    after = await documents.get("pets", pet_id)
    assert after["name"] == "Max"
    assert after["imageUrl"] != before["imageUrl"]
    assert after["imageUrl"].startswith("memory://petImages/Max")
    assert len(storage.keys()) == 2


async def test_update_without_name_uses_pet_id_for_image(deps, storage, institution_caller):
    pet_id = await _create(deps, institution_caller)

    await invoke(
        "update-pet",
        {"petId": pet_id, "petDataToUpdate": {}, "petImage": JPEG_DATA_URL},
        institution_caller,
        deps,
    )

    assert any(key.startswith(f"petImages/{pet_id}") for key in storage.keys())


async def test_update_requires_image_key(deps, institution_caller):
    with pytest.raises(InvalidArgumentError, match="Number of arguments invalid"):
        await invoke("update-pet", {"petId": "p1", "petDataToUpdate": {}}, institution_caller, deps)


async def test_update_missing_pet_propagates_store_error(deps, institution_caller):
    with pytest.raises(DocumentNotFoundError):
        await invoke(
            "update-pet",
            {"petId": "ghost", "petDataToUpdate": {"lead": "x"}, "petImage": None},
            institution_caller,
            deps,
        )


async def test_remove_pet_twice(deps, documents, institution_caller):
    pet_id = await _create(deps, institution_caller)

    await invoke("remove-pet", {"petId": pet_id}, institution_caller, deps)
    assert await documents.get("pets", pet_id) is None

    with pytest.raises(DocumentNotFoundError):
        await invoke("remove-pet", {"petId": pet_id}, institution_caller, deps)
