from .models import ParseFailure


class ClassificationExhausted(ValueError):
    """Raised when no stage could interpret the input.

    Carries the direct parse diagnostic, which is the message shown to the
    user.
    """

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure
