"""backend.common.errors

Exception types shared by the driver Lambdas.

`ApiError` subclasses carry the HTTP status and a message that is safe to
return to the caller. `RecordNotFound` is raised by the store adapter and
translated to a 404 by the handlers.
"""


class ApiError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BadRequest(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class ConfigurationError(ApiError):
    status_code = 500


class RecordNotFound(Exception):
    """No driver item exists at the requested (team, driverId) key."""

    def __init__(self, team, driver_id):
        super().__init__(f"No driver {driver_id!r} in team {team!r}")
        self.team = team
        self.driver_id = driver_id
