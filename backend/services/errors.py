"""
Comparison error taxonomy.
All of these are fatal for the comparison in progress; nothing is retried.
"""


class DiffError(Exception):
    """Base class for revision comparison failures"""


class SchemaInconsistencyError(DiffError):
    """A field declares a type that the field type registry does not know"""


class ConfigurationError(DiffError):
    """Unknown transform name or a malformed settings value"""


class EntityCapabilityError(DiffError):
    """A record cannot take part in a revision comparison"""
