"""Shared constants and doubles for shelter-functions tests."""

from __future__ import annotations

import base64

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRfake-image-bytes"
PNG_DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")
JPEG_DATA_URL = "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff\xe0jpeg").decode("ascii")

ADMIN_EMAIL = "root@shelter.test"


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.calls = 0
        self.fail = fail

    async def notify(self) -> None:
        self.calls += 1
        if self.fail:
            raise RuntimeError("build hook unreachable")


def pet_payload(**overrides):
    payload = {
        "species": "dog",
        "name": "Rex",
        "lead": "Jane Doe",
        "description": "Friendly and house-trained",
        "institutionId": "inst-uid",
        "filters": {"size": "medium", "age": 3},
        "petImage": PNG_DATA_URL,
    }
    payload.update(overrides)
    return payload
