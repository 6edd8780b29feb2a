class RepositoryError(Exception):
    """Base class for repository-level errors."""


class NotFoundError(RepositoryError):
    """Raised when no row exists for the given id."""


class ConflictError(RepositoryError):
    """The requested action is refused by a business rule."""


class ExerciseExistsError(ConflictError):
    """An exercise with the same (case-insensitive) name already exists."""


class ExerciseInUseError(ConflictError):
    """The exercise is referenced by at least one set."""


class UnknownExerciseError(RepositoryError):
    """A set payload references an exercise id that does not exist."""
