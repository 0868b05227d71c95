"""backend.Seed_Drivers.seed_drivers

Loads the bundled driver list into the drivers table.

`seed_drivers(event, context)` batch-writes every record from
`drivers.json` (next to this module). Existing items with the same key are
overwritten. Intended for administrative/testing use only; it is not routed
through the public API.
"""

import json
import logging
import os

from backend.common.config import get_services
from backend.common.responses import format_response, with_error_handling

logger = logging.getLogger(__name__)

SEED_FILE = os.path.join(os.path.dirname(__file__), "drivers.json")


def load_seed_drivers(path=SEED_FILE):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def handle(event, store, path=SEED_FILE):
    drivers = load_seed_drivers(path)
    written = store.batch_put(drivers)
    logger.info("Seeded %d drivers into %s", written, store.table.name)
    return format_response({"written": written})


@with_error_handling
def seed_drivers(event, context):
    return handle(event, get_services().store)
