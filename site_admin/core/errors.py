class SiteAdminError(Exception):
    """Base class for site content admin failures."""


class LoadError(SiteAdminError):
    """The site document could not be fetched."""


class ParseError(SiteAdminError):
    """A drafted text value does not fit the kind recorded for its leaf."""


class SaveError(SiteAdminError):
    """A write to the site API failed."""


class PathError(SiteAdminError, ValueError):
    """A leaf path is malformed or does not fit the target document."""
