"""Exception hierarchy for the mlisp reader and printer."""


class LispError(Exception):
    pass


class AllocationError(LispError):
    """An object could not be constructed."""


class InvalidArgument(LispError):
    """An internal construction contract was violated."""


class ReadError(LispError):
    """Input text is not a well-formed expression."""


class UnbalancedParens(ReadError):
    pass


class TruncatedInput(ReadError):
    """Input ended before a complete expression was available."""


class AtomTooLong(ReadError):
    pass


class UnclosedParens(UnbalancedParens, TruncatedInput):
    """Input ended while a list was still open."""


class NumberOutOfRange(ReadError):
    pass
