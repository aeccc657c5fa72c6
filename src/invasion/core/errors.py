"""Exception hierarchy for the invasion sandbox."""


class InvasionError(Exception):
    """Base class for all errors raised by the invasion package."""


class ConfigurationError(InvasionError):
    """Impossible parameters: empty map, too many cities or aliens, etc."""


class MapParseError(InvasionError):
    """A line of a world map file could not be parsed."""
