"""Error types raised by the client workflows."""


class HomLetError(Exception):
    """Base exception for HomLet backend."""
    pass


class MissingFieldError(HomLetError):
    """A required identifier was not supplied."""
    pass


class NotFoundError(HomLetError):
    """Referenced client, agent or property does not exist."""
    pass


class DuplicateRequestError(HomLetError):
    """Client already contacted this agent for this property."""
    pass


class DuplicateRatingError(HomLetError):
    """Client already rated this agent for this property."""
    pass


class InvalidRatingError(HomLetError):
    """Rating value missing or outside the allowed range."""
    pass


class AgentLockedError(HomLetError):
    """Client has not unlocked this agent."""
    pass


class NotificationError(HomLetError):
    """Email notification could not be delivered."""
    pass
