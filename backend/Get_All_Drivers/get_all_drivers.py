"""backend.Get_All_Drivers.get_all_drivers

Lambda that lists every driver in the table.
    Handles GET /drivers

Reads a single scan page; order is whatever DynamoDB returns.
"""

import logging

from backend.common.config import get_services
from backend.common.responses import format_response, with_error_handling

logger = logging.getLogger(__name__)


def handle(event, store):
    drivers = store.scan_all()
    logger.info("Scan returned %d drivers", len(drivers))
    return format_response(drivers)


@with_error_handling
def lambda_handler(event, context):
    return handle(event, get_services().store)
