# error.py
"""""
Error types raised by the calculation engine.

Every error carries a 4-digit code (see ERROR_MESSAGES) and, once it has
passed through MathEngine.calculate(), the equation that caused it.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None, position=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation
        self.position = position  # Index in the whitespace-free input, if known

class InvalidSyntaxError(MathError):
    pass

class UnsupportedCharacterError(InvalidSyntaxError):
    pass

class CalculationError(MathError):
    pass

class DivisionByZeroError(CalculationError):
    pass

class NumberFormatError(CalculationError):
    pass



Error_Dictionary = {

    "1" : "Missing Files",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Character: ", # + character
    "3008" : "Invalid Number: ", # + literal
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid equation: ", # + Equation
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3028" : "Missing Number before operator: ", # + operator
    "3029" : "Missing Number after operator: ", # + operator
    "3031" : "Empty parentheses '()'.",
    "3032" : "Number directly after ')'.",
    "3033" : "Expression too long.",
    "3034" : "Empty expression.",
    "3035" : "Unknown operator: ", # + operator
    "3036" : "Expression nested too deeply.",


    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting


    "9999" : "Unexpected Error: " #+error
}
