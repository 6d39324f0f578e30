
class ParsleyError(Exception):
    """ Base class for all Parsley errors"""
    pass


class NullListError(ParsleyError):
    """ Raised when the empty list is evaluated"""

    def __init__(self):
        super().__init__("Attempted to evaluate an empty list")


class UndefinedSymbolError(ParsleyError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, sym: str):
        super().__init__(f"Symbol not defined: {sym}")
        self.sym = sym


class NotAProcedureError(ParsleyError):
    """ Raised when the head of an application is not callable"""

    def __init__(self, exp: str):
        super().__init__(f"Not a procedure: {exp}")
        self.exp = exp


class ArityError(ParsleyError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected, given: int):
        super().__init__(f"Expected {expected} arguments, got {given}")
        self.expected = expected
        self.given = given


class ParsleySyntaxError(ParsleyError):
    """ Raised by the reader when source text cannot be parsed"""

    def __init__(self, exp: str):
        super().__init__(f"Invalid syntax: {exp}")
        self.exp = exp


class ParsleyTypeError(ParsleyError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

    def __init__(self, expected: str, given: str):
        super().__init__(f"Type error: expected {expected}, got {given}")
        self.expected = expected
        self.given = given


class ParsleyIndexError(ParsleyError):
    """ Raised when an index falls outside a list or vector"""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for length {length}")
        self.index = index
        self.length = length
