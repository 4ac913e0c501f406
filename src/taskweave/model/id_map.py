# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskweave.model.entity_id import EntityId


class IdMap(TypedDict):
    """
    Short numeric ids shown in tables, mapped both ways to task ids.

    Example:

    Task with an id of "9f1c...".
    Synthetic id for that task is 7.

    id_map["synthetic_to_real"][7] # returns "9f1c..."
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
