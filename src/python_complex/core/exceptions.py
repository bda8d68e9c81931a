__all__ = [
    "InvalidArgumentError",
    "ParseError",
    "SignDroppedWarning",
]


class InvalidArgumentError(ValueError):
    pass


class ParseError(ValueError):
    pass


class SignDroppedWarning(Warning):
    pass
