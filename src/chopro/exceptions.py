class ChoproError(Exception):
    """Base exception for chopro."""


class ReadError(ChoproError):
    """Raised when the underlying input cannot be read.

    Syntactic problems never raise; they are reported as incomplete nodes in
    the parsed document. This is the only failure a parse can end in.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not read {source}: {reason}")


class ValidationError(ChoproError):
    """Raised by strict validation when a document holds incomplete constructs."""

    def __init__(self, issues: list):
        self.issues = issues
        noun = "issue" if len(issues) == 1 else "issues"
        super().__init__(f"{len(issues)} validation {noun} found")
