"""Exception hierarchy for the mailbot simulation."""


class MailbotError(Exception):
    """Base class for all mailbot errors."""


class GraphError(MailbotError, ValueError):
    """Raised when a road edge cannot be parsed."""


class ScenarioError(MailbotError, ValueError):
    """Raised when a random scenario cannot be generated."""


class RouteNotFoundError(MailbotError, LookupError):
    """Raised when a robot has no route to its target."""


class SimulationError(MailbotError):
    """Raised when a simulation run cannot continue."""


class TurnLimitExceeded(SimulationError):
    """Raised when a run exceeds the configured turn cap."""
