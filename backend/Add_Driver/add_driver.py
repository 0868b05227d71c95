"""backend.Add_Driver.add_driver

Lambda that stores a new driver record in DynamoDB.
    Handles POST /drivers

Only `team`, `driverId` and `driverName` are required in the body and they
must be non-empty strings; other fields are stored as sent. An existing
record with the same key is overwritten.
"""

import logging

from backend.common.config import get_services
from backend.common.errors import BadRequest
from backend.common.responses import caller_identity, format_response, parse_body, with_error_handling

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("team", "driverId", "driverName")


def handle(event, store):
    """Validate the body, write the record and echo it back with 201."""
    driver = parse_body(event)

    missing = [field for field in REQUIRED_FIELDS if not driver.get(field)]
    if missing:
        raise BadRequest("Missing required fields: team, driverId, or driverName")

    not_strings = [field for field in REQUIRED_FIELDS if not isinstance(driver[field], str)]
    if not_strings:
        raise BadRequest("Fields must be strings: " + ", ".join(not_strings))

    logger.info(
        "Adding driver team=%s driverId=%s caller=%s",
        driver["team"],
        driver["driverId"],
        caller_identity(event),
    )
    store.put_record(driver)
    return format_response(driver, 201)


@with_error_handling
def lambda_handler(event, context):
    return handle(event, get_services().store)
