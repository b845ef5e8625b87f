"""
Errors raised by the banner pipeline.

Every stage raises a subclass of BannerError; the CLI turns them into a
failure exit with the original message.
"""


class BannerError(RuntimeError):
    pass


class FontNotFoundError(BannerError):
    pass


class CatalogUnavailableError(BannerError):
    pass


class WriteError(BannerError):
    pass


class ConfigError(BannerError):
    pass
