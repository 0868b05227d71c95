"""backend.Get_Drivers_By_Team.get_drivers_by_team

Lambda that lists the drivers of one team.
    Handles GET /drivers/{team}?isActive=true&nationality=British

The query string filters are applied after the DynamoDB query and combine
with AND:
- `isActive`: "true" keeps active drivers, any other value keeps inactive ones.
- `nationality`: exact, case-sensitive match.
"""

import logging

from backend.common.config import get_services
from backend.common.errors import BadRequest
from backend.common.responses import format_response, path_param, query_param, with_error_handling

logger = logging.getLogger(__name__)


def filter_drivers(drivers, is_active=None, nationality=None):
    """Apply the optional isActive / nationality filters to `drivers`."""
    if is_active is not None:
        wanted = is_active == "true"
        drivers = [d for d in drivers if d.get("isActive") == wanted]
    if nationality:
        drivers = [d for d in drivers if d.get("nationality") == nationality]
    return drivers


def handle(event, store):
    team = path_param(event, "team")
    if not team:
        raise BadRequest("Missing team in path")

    is_active = query_param(event, "isActive")
    nationality = query_param(event, "nationality")
    logger.info("Querying team=%s isActive=%s nationality=%s", team, is_active, nationality)

    drivers = filter_drivers(store.query_by_partition(team), is_active, nationality)
    return format_response(drivers)


@with_error_handling
def lambda_handler(event, context):
    return handle(event, get_services().store)
