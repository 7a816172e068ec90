"""Exception hierarchy for the JSON:API plugin."""


class JSONAPIPluginError(Exception):
    """Base class for errors raised by the plugin."""


class ConfigurationError(JSONAPIPluginError):
    """Invalid plugin or route configuration detected at startup."""


class InvalidRecordError(JSONAPIPluginError):
    """A record cannot supply the type or id of a resource object."""


class UnresolvedInflectionError(JSONAPIPluginError):
    """A noun could not be inflected to its singular or plural form."""
