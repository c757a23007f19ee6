class SeedDataError(RuntimeError):
    """The bundled seed data is structurally broken; the process cannot start."""


class ProtectedCollectionError(ValueError):
    """Raised when removing the Favorites collection."""


class RecommendationError(RuntimeError):
    """A recommendation backend failed or produced unusable output."""


class RecommendationUnavailableError(RecommendationError):
    """The language model behind a recommendation backend is not reachable."""
