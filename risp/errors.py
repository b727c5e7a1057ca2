

class RispError(Exception):
    """ Base class for all Risp errors; str(err) is the reason shown to the user"""
    pass

class RispInvalidSymbol(RispError):
    """ Raised when a non-symbol is used as a binding name"""
    pass

class RispUnboundSymbol(RispError):
    """ Raised when a symbol is used before it is bound"""
    pass

class RispSyntaxError(RispError):
    """ Raised when the reader or evaluator meets a malformed form"""

class RispArityError(RispError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class RispTypeError(RispError):
    """ Raised when a value of the wrong variant is passed to a form or function"""

class RispRecursionError(RispError):
    """ Raised when evaluation nests deeper than the host stack allows"""
