"""Application services - resolution, caching and invalidation."""
