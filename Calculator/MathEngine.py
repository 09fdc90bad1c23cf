# MathEngine.py
"""""
Core calculation engine for the Arithmetic Calculator.

Pipeline
--------
1) Validator: rejects malformed input (see Validator.py).
2) Tokenizer: converts the input string into a flat list of tokens,
   folding unary minus into numbers and inserting implicit '*'.
3) Tree builder: splits the token list at the lowest-precedence operator
   outside parentheses, recursively, into an expression tree.
4) Evaluator: reduces the tree to a float.
5) Formatter: rounds half away from zero and renders the shortest decimal string.

The engine holds no state between calls; compute() and calculate() can be
called from any number of threads at once.
"""""

import math
from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP, localcontext

from . import Validator
from . import error as E

# Debug toggle for optional prints in this module (set from the "debug" setting)
debug = False

DEFAULT_DECIMAL_PLACES = 4

# Operator precedence: lower binds looser and is split first
PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
Operations = list(PRECEDENCE)
NUMBER_CHARACTERS = "0123456789."

# Token kinds
NUM = "NUM"
OP = "OP"
LPAREN = "LPAREN"
RPAREN = "RPAREN"

Token = namedtuple("Token", ["kind", "value"])


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST leaf holding the literal text; parsed to float only when evaluated."""
    def __init__(self, text):
        self.text = text

    def evaluate(self):
        """Return the float value of the literal."""
        try:
            value = float(self.text)
        except ValueError:
            raise E.NumberFormatError(f"Invalid number: {self.text}", code="3008")
        if not math.isfinite(value):
            raise E.NumberFormatError(f"Invalid number: {self.text}", code="3008")
        return value

    def __eq__(self, other):
        return isinstance(other, Number) and self.text == other.text

    def __repr__(self):
        return f"Number({self.text})"


class Negate:
    """AST node for unary minus in front of a parenthesised group, e.g. '-(2+3)'."""
    def __init__(self, operand):
        self.operand = operand

    def evaluate(self):
        return -self.operand.evaluate()

    def __eq__(self, other):
        return isinstance(other, Negate) and self.operand == other.operand

    def __repr__(self):
        return f"Negate({self.operand})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self):
        """Evaluate both subtrees (left first) and apply the operator."""
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == '+':
            return left_value + right_value
        elif self.operator == '-':
            return left_value - right_value
        elif self.operator == '*':
            return left_value * right_value
        elif self.operator == '/':
            if right_value == 0.0:
                raise E.DivisionByZeroError("Division by zero", code="3003")
            return left_value / right_value
        else:
            raise E.CalculationError(f"Unknown operator: {self.operator}", code="3035")

    def __eq__(self, other):
        return (isinstance(other, BinOp) and self.operator == other.operator
                and self.left == other.left and self.right == other.right)

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


# -----------------------------
# Tokenizer
# -----------------------------

def tokenize(problem):
    """Convert an expression string into a list of Tokens.

    Notes:
    - A '-' at the start, after '(' or after another operator is unary and
      becomes the sign of the following number ('1*-2' -> 1, *, -2).
    - A unary '-' in front of '(' cannot be folded and stays an OP token in
      prefix position; build_tree() turns it into a Negate node.
    - A number or ')' directly followed by '(' gets an implicit '*'.
    """
    tokens = []
    str_number = ""

    def flush():
        nonlocal str_number
        if str_number == "-":
            tokens.append(Token(OP, "-"))
        elif str_number:
            tokens.append(Token(NUM, str_number))
        str_number = ""

    def is_unary_position():
        return not tokens or tokens[-1].kind in (OP, LPAREN)

    for b, current_char in enumerate(problem):

        # --- Numbers: digits and decimal separator ---
        if current_char in NUMBER_CHARACTERS:
            str_number += current_char

        # --- Operators ---
        elif current_char in Operations:
            flush()
            if current_char == "-" and is_unary_position():
                str_number = "-"
            else:
                tokens.append(Token(OP, current_char))

        # --- Parentheses ---
        elif current_char == "(":
            flush()
            if tokens and tokens[-1].kind in (NUM, RPAREN):
                tokens.append(Token(OP, "*"))
            tokens.append(Token(LPAREN, "("))
        elif current_char == ")":
            flush()
            tokens.append(Token(RPAREN, ")"))

        # --- Whitespace (ignored) ---
        elif current_char.isspace():
            continue

        else:
            raise E.UnsupportedCharacterError(f"Invalid character '{current_char}'", code="3004", position=b)

    flush()
    return tokens


# -----------------------------
# Tree builder
# -----------------------------

def matching_paren(tokens, start, end):
    """Return the index of the ')' closing the '(' at start, or -1 if it is not within end."""
    depth = 0
    for b in range(start, end + 1):
        if tokens[b].kind == LPAREN:
            depth += 1
        elif tokens[b].kind == RPAREN:
            depth -= 1
            if depth == 0:
                return b
    return -1


def build_tree(tokens):
    """Build an expression tree from a token list.

    The range is split at the operator with the lowest precedence outside of
    parentheses. On ties the later operator wins, so '8-3-2' becomes
    BinOp('-', BinOp('-', 8, 3), 2).
    """
    if not tokens:
        raise E.InvalidSyntaxError("Empty expression.", code="3034")

    def is_prefix(b, start):
        # Operator in operand position: unary minus, never a split point
        return b == start or tokens[b - 1].kind in (OP, LPAREN)

    def build(start, end):
        if start > end:
            raise E.InvalidSyntaxError("Missing Number.", code="3027")

        # Single number (sign already folded in by the tokenizer)
        if start == end and tokens[start].kind == NUM:
            return Number(tokens[start].value)

        # Whole range wrapped in one pair of parentheses
        if tokens[start].kind == LPAREN and matching_paren(tokens, start, end) == end:
            return build(start + 1, end - 1)

        # Find the lowest precedence operator (outside of parentheses)
        min_precedence = 3
        op_index = -1
        parens = 0

        for b in range(start, end + 1):
            token = tokens[b]
            if token.kind == LPAREN:
                parens += 1
            elif token.kind == RPAREN:
                parens -= 1
            elif token.kind == OP and parens == 0 and not is_prefix(b, start):
                precedence = PRECEDENCE[token.value]
                if precedence <= min_precedence:
                    min_precedence = precedence
                    op_index = b

        if op_index != -1:
            return BinOp(build(start, op_index - 1), tokens[op_index].value, build(op_index + 1, end))

        if tokens[start] == Token(OP, "-"):
            return Negate(build(start + 1, end))

        raise E.InvalidSyntaxError(f"Unexpected token: {tokens[start].value}", code="3011")

    return build(0, len(tokens) - 1)


# -----------------------------
# Evaluator
# -----------------------------

def evaluate(node):
    """Reduce an expression tree to a float."""
    return node.evaluate()


# -----------------------------
# Result formatting
# -----------------------------

def round_result(value, decimal_places=DEFAULT_DECIMAL_PLACES):
    """Round to decimal_places, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    value = float(value)
    if value.is_integer():
        return value

    ratio = 10 ** decimal_places
    # Local precision boost: quantize() needs every integer digit of value * ratio
    with localcontext() as ctx:
        ctx.prec = 128
        scaled = Decimal(value * ratio).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(scaled) / ratio


def format_result(value):
    """Render a float as the shortest decimal string that reads back as the same value.

    repr() already gives the shortest round-trip digits; Decimal turns them
    into plain notation without exponent or trailing zeros.
    """
    value = value + 0.0  # -0.0 -> 0.0
    return format(Decimal(repr(value)).normalize(), "f")


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem, decimal_places=DEFAULT_DECIMAL_PLACES, max_length=Validator.DEFAULT_MAX_LENGTH):
    """Main API: validate -> tokenize -> build -> evaluate -> round -> format.

    Raises a MathError subclass (with .equation set) if anything fails.
    """
    try:
        Validator.check_syntax(problem, max_length)
        tokens = tokenize(Validator.strip_whitespace(problem))
        if debug:
            print(tokens)

        finaler_baum = build_tree(tokens)
        if debug:
            print("Final AST:")
            print(finaler_baum)

        ergebnis = evaluate(finaler_baum)
        if not math.isfinite(ergebnis):
            raise E.CalculationError("Number too large (Arithmetic overflow).", code="3026")

        return format_result(round_result(ergebnis, decimal_places))

    # Nesting deeper than the interpreter's recursion limit (large max_length)
    except RecursionError:
        raise E.CalculationError("Expression nested too deeply.", code="3036", equation=problem)

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e


def compute(problem, decimal_places=DEFAULT_DECIMAL_PLACES, max_length=Validator.DEFAULT_MAX_LENGTH):
    """Return (valid, result). (False, "") for invalid input or any calculation error."""
    try:
        return True, calculate(problem, decimal_places, max_length)
    except E.MathError as e:
        if debug:
            print(f"Error {e.code}: {e.message}")
        return False, ""


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    is_valid, ergebnis = compute(problem)
    print("Valid Expression" if is_valid else "Invalid Expression")
    print("Result: " + ergebnis)


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m Calculator.MathEngine
    test_main()
