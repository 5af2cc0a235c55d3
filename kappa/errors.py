
class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass

class KappaSyntaxError(KappaError):
    """ Raised when a form or literal has the wrong shape"""
    pass

class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is not bound anywhere on the frame chain"""
    pass

class KappaTypeError(KappaError):
    """ Raised when an operator receives an argument of the wrong kind"""

class KappaArityError(KappaError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class KappaZeroDivisionError(KappaError):
    """ Raised on integer division by zero"""

class KappaInvariantError(KappaError):
    """ Raised when the evaluator reaches a state it should never reach"""


class EndOfInput(Exception):
    """ Raised by the reader when no expression remains; normal termination"""
