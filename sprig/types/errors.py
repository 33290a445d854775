class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class SprigSyntaxError(SprigError):
    """ Raised when source text cannot be parsed"""

class SprigInvalidSymbol(SprigError):
    """ Raised when a non-symbol is used where a name is required"""

class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is used before it is bound"""

class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a procedure or form is incorrect"""

class SprigTypeError(SprigError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SprigArithmeticError(SprigError):
    """ Raised on division or remainder by zero"""

class SprigEvaluationError(SprigError):
    """ Raised when a form is malformed or cannot produce a value"""

class SprigRecursionError(SprigEvaluationError):
    """ Raised when evaluation exhausts the host call stack"""

class SprigUserError(SprigError):
    """ Raised by the `error` special form; carries the evaluated payload"""

    def __init__(self, payload):
        from sprig.printer import to_string
        super().__init__(to_string(payload))
        self.payload = payload
