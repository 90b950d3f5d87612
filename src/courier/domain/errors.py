from enum import Enum


class FailureKind(Enum):
    INVALID_COORDINATE = "invalid_coordinate"
    NO_ROUTE_FOUND = "no_route_found"
    UNSPECIFIED = "unspecified"


class DeliveryFailure(Exception):
    """Base for every way a plan request can fail. Always terminal for the request."""

    kind = FailureKind.UNSPECIFIED
    message = "An unknown error has occured."

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(self.message if detail is None else f"{self.message} ({detail})")


class InvalidCoordinate(DeliveryFailure):
    kind = FailureKind.INVALID_COORDINATE
    message = "One or more depot/delivery coordinates are invalid."


class NoRouteFound(DeliveryFailure):
    kind = FailureKind.NO_ROUTE_FOUND
    message = "No route can be found to deliver all items."


class UnspecifiedFailure(DeliveryFailure):
    pass
