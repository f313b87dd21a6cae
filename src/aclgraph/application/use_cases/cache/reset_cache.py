"""Reset cache use case."""

from aclgraph.application.services.invalidation import InvalidationCoordinator


class ResetCacheUseCase:
    """Forget every cached implied closure and role permission set."""

    def __init__(self, invalidation: InvalidationCoordinator) -> None:
        self._invalidation = invalidation

    async def execute(self) -> None:
        await self._invalidation.reset()
