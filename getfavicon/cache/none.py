"""No-operation adapter that disables caching."""


class NoCacheAdapter:
    """A cache adapter that doesn't store or return anything."""

    async def get(self, key: str) -> bytes | None:
        """Always miss."""
        return None

    async def set(self, key: str, value: bytes) -> None:
        """Drop the value."""
        pass

    async def keys(self) -> list[str]:
        """List nothing, no record is ever stored."""
        return []

    async def close(self) -> None:
        """Nothing to release."""
        pass
