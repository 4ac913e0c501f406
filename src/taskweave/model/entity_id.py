# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

# Placeholder id for a task that has not been saved yet. No stored task can
# carry it, so dependency validation against it only reports missing ids.
UNSET_ENTITY_ID: EntityId = "00000000-0000-0000-0000-000000000000"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())
