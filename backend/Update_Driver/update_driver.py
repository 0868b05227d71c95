"""backend.Update_Driver.update_driver

Lambda that replaces the mutable fields of an existing driver.
    Handles PUT /drivers/{team}/{driverId}

The body must contain all six mutable fields. `0` and `false` are valid
values; only absent or null fields are rejected. The key always comes from
the path and other body fields are ignored. Updating a driver that does not
exist returns 404 and creates nothing.
"""

import logging

from backend.common.config import get_services
from backend.common.errors import BadRequest, NotFound, RecordNotFound
from backend.common.responses import (
    caller_identity,
    format_response,
    parse_body,
    path_param,
    with_error_handling,
)

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("driverName", "nationality", "carNumber", "points", "description", "isActive")


def handle(event, store):
    team = path_param(event, "team")
    driver_id = path_param(event, "driverId")
    if not team or not driver_id:
        raise BadRequest("Missing team or driverId in path")

    body = parse_body(event)

    missing = [field for field in MUTABLE_FIELDS if body.get(field) is None]
    if missing:
        raise BadRequest("Missing required fields in request body: " + ", ".join(missing))

    fields = {field: body[field] for field in MUTABLE_FIELDS}

    logger.info("Updating driver team=%s driverId=%s caller=%s", team, driver_id, caller_identity(event))
    try:
        driver = store.update_fields(team, driver_id, fields)
    except RecordNotFound:
        raise NotFound("Driver not found")

    return format_response(driver)


@with_error_handling
def lambda_handler(event, context):
    return handle(event, get_services().store)
