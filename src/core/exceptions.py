"""Custom exceptions. Catch GameError to handle anything raised on purpose by this package."""


class GameError(Exception):
    """Top-level exception of the movie game."""


# --- INPUT ERRORS ---
class InvalidInputError(GameError):
    """Malformed input supplied by the caller. Nothing has been mutated."""


class InvalidTermError(InvalidInputError):
    """Autocomplete term is empty or carries a negative weight."""


class InvalidSuggestionLimitError(InvalidInputError):
    """Autocomplete suggestion limit must be a positive integer."""


class InvalidRequestError(InvalidInputError):
    """Request model failed validation at the boundary."""


# --- STATE ERRORS ---
class GameStateError(GameError):
    """Operation is not allowed in the current state of the game."""


# --- PERSISTENCE ERRORS ---
class RepositoryError(GameError):
    """The movie cache or snapshot could not be read / written."""
