"""Custom exceptions for md2toc."""


class Md2tocError(Exception):
    """Base exception for md2toc operations."""


class FetchError(Md2tocError):
    """Error during content fetching."""


class PostNotFoundError(FetchError):
    """The site has no published post for the requested slug."""


class ParseError(Md2tocError):
    """Error while reading a payload returned by the site."""


class ConfigError(Md2tocError):
    """An environment setting holds an invalid value."""
