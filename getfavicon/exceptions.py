"""Get Favicon specific exceptions."""


class CacheAdapterError(Exception):
    """Exception raised when a cache adapter operation fails."""

    pass


class CacheEntryError(ValueError):
    """Exception raised for cache entries that can't be deserialized."""

    pass


class CacheMissError(Exception):
    """Exception raised if an entry doesn't exist in the cache."""

    pass
