"""Errors raised while reading, parsing and evaluating formulas."""


class FormulaError(ValueError):
    """Base class for every error raised while reading or evaluating a formula."""


class UnknownSymbolError(FormulaError):
    def __init__(self, symbol):
        super().__init__(f"Unknown symbol '{symbol}'!")
        self.symbol = symbol


class MissingOpeningParenthesisError(FormulaError):
    def __init__(self):
        super().__init__("Missing opening parenthesis!")


class UnclosedParenthesisError(FormulaError):
    def __init__(self):
        super().__init__("Unclosed parenthesis!")


class InvalidExpressionError(FormulaError):
    def __init__(self, reason=None):
        message = "Invalid expression!"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason


class FormulaTooLargeError(FormulaError):
    def __init__(self, count, limit):
        super().__init__(f"Expected at most {limit} variables, got {count}")
        self.count = count
        self.limit = limit


class ProblemFormatError(FormulaError):
    def __init__(self, message, line=None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
