# errors.py

"""Error types raised by the meal report pipeline and its service clients."""


class MensaError(Exception):
    """Base class for every error reported to the user."""


class ServiceError(MensaError):
    """A remote lookup (OpenMensa, meme or fact API) failed."""


class ConfigError(MensaError):
    pass


class BotTokenError(MensaError):
    pass


class DateError(MensaError):
    pass


class InvalidDateFormat(DateError):
    pass


class ResolutionError(MensaError):
    pass


class ConflictingSelectors(ResolutionError):
    def __init__(self):
        super().__init__("Use either location or id")


class CanteenNotFound(ResolutionError):
    def __init__(self, canteen_id: int):
        self.canteen_id = canteen_id
        super().__init__(f"Canteen not found by ID: {canteen_id}")


class LookupFailed(ResolutionError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error fetching canteens: {message}")


class RenderError(MensaError):
    pass


class MealFetchError(RenderError):
    def __init__(self, canteen_name: str, message: str):
        self.canteen_name = canteen_name
        self.message = message
        super().__init__(f"Error fetching meals for {canteen_name}: {message}")
