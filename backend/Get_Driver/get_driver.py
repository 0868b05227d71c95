"""backend.Get_Driver.get_driver

Lambda that returns a single driver, optionally with its description
translated.
    Handles GET /drivers/{team}/{driverId}?language=xx

When `language` is given the description is sent to Amazon Translate and the
result is attached as `translatedDescription`. If translation fails the whole
request fails with 500; a record without the translation is never returned.
A record with no description (missing, empty or not a string) is not sent to
Translate and gets an empty `translatedDescription`.
"""

import logging
import re

from backend.common.config import get_services
from backend.common.errors import BadRequest, NotFound
from backend.common.responses import format_response, path_param, query_param, with_error_handling

logger = logging.getLogger(__name__)

LANGUAGE_CODE = re.compile(r"^[a-zA-Z]{2}$")


def handle(event, store, translator):
    team = path_param(event, "team")
    driver_id = path_param(event, "driverId")
    language = query_param(event, "language")

    if not team or not driver_id:
        raise BadRequest("Missing team or driverId in path")

    if language is not None and not LANGUAGE_CODE.match(language):
        raise BadRequest("Invalid language code. Must be a 2-letter code (e.g., 'en', 'es')")

    logger.info("Fetching driver team=%s driverId=%s language=%s", team, driver_id, language)
    driver = store.get_record(team, driver_id)
    if driver is None:
        raise NotFound("Driver not found")

    if language is not None:
        description = driver.get("description")
        if isinstance(description, str) and description:
            driver["translatedDescription"] = translator.translate(description, language)
        else:
            driver["translatedDescription"] = ""

    return format_response(driver)


@with_error_handling
def lambda_handler(event, context):
    services = get_services()
    return handle(event, services.store, services.translator)
