"""
Errors - the single error type of the dough calculation core

Every rejected input, whether caught while building a value object or while
computing, surfaces as InvalidParameter naming the offending field.
"""


class InvalidParameter(ValueError):
    """
    A core input violates its stated domain.

    Raised synchronously and never recovered inside the core. The caller
    decides what to do (re-prompt, reject the profile, ...).

    Attributes:
        field: Name of the offending input
        reason: Human readable description of the violation
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
