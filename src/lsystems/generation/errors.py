class UnknownFamilyError(ValueError):
    """Raised when a family tag does not name one of the six rule families."""


class GenerationAborted(RuntimeError):
    """Raised from inside an expansion run that outgrew its node budget."""

    def __init__(self, processed: int, limit: int) -> None:
        super().__init__(
            f"Expansion aborted after {processed} nodes (limit {limit})"
        )
        self.processed = processed
        self.limit = limit


class UnbalancedBracketError(RuntimeError):
    """A closing bracket was expanded with nothing saved to restore."""
