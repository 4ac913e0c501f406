# SPDX-License-Identifier: MIT

from taskweave.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}
