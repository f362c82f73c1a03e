"""Domain error taxonomy.

Every error carries the HTTP status it maps to; ``app.main`` renders them as
``{"error": message}``.
"""


class WeatherAppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WeatherAppError):
    """A required field is missing or empty."""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(WeatherAppError):
    status_code = 400
    default_message = "Username already exists"


class AuthenticationRequired(WeatherAppError):
    status_code = 401
    default_message = "Authentication token required"


class InvalidToken(WeatherAppError):
    status_code = 401
    default_message = "Invalid or expired token"


class InvalidCredentials(WeatherAppError):
    """Unknown username or wrong password; the two are never distinguished."""

    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(WeatherAppError):
    status_code = 404
    default_message = "No weather data found for this city"


class FetchFailed(WeatherAppError):
    """Upstream or storage failure during fetch-and-refresh."""

    status_code = 500

    def __init__(self, reason: str):
        super().__init__(f"Failed to fetch weather data: {reason}")
        self.reason = reason
