# Validator.py
"""""
Syntax check for arithmetic expressions, run before anything is tokenized.

The check is a single left-to-right scan over the whitespace-free input that
alternates between two states:

- expecting an operand: a number, '(' or a unary '-' may follow
- after an operand:     a binary operator, ')' or '(' (implicit '*') may follow

check_syntax() raises an InvalidSyntaxError describing the first problem found;
validate() turns that into a plain True/False.
"""""

from . import error as E

DEFAULT_MAX_LENGTH = 100

ALLOWED_CHARACTERS = set("0123456789.+-*/()")
Operations = ["+", "-", "*", "/"]


def strip_whitespace(expression):
    """Return the expression with every whitespace character removed."""
    return "".join(expression.split())


def read_number(problem, b):
    """Read the number literal starting at index b.

    Returns the index after the literal. A literal has at least one digit and
    at most one '.', so '.5' and '5.' pass while '.' and '1.2.3' do not.
    """
    start = b
    has_comma = False
    digits = 0
    while b < len(problem) and (problem[b].isdigit() or problem[b] == "."):
        if problem[b] == ".":
            if has_comma:
                raise E.InvalidSyntaxError("More than one '.' in one number.", code="3008", position=b)
            has_comma = True
        else:
            digits += 1
        b += 1
    if digits == 0:
        raise E.InvalidSyntaxError(f"Invalid number '{problem[start:b]}'", code="3008", position=start)
    return b


def check_syntax(expression, max_length=DEFAULT_MAX_LENGTH):
    """Raise an InvalidSyntaxError if the expression is not well formed."""
    if len(expression) > max_length:
        raise E.InvalidSyntaxError(f"Expression longer than {max_length} characters.", code="3033")

    problem = strip_whitespace(expression)
    if problem == "":
        raise E.InvalidSyntaxError("Empty expression.", code="3034")

    for b, current_char in enumerate(problem):
        if current_char not in ALLOWED_CHARACTERS:
            raise E.UnsupportedCharacterError(f"Invalid character '{current_char}'", code="3004", position=b)

    expect_operand = True
    after_unary_minus = False
    depth = 0
    b = 0

    while b < len(problem):
        current_char = problem[b]

        if expect_operand:
            # --- Operand expected: number, '(' or a single unary minus ---
            if current_char.isdigit() or current_char == ".":
                b = read_number(problem, b)
                expect_operand = False
                after_unary_minus = False
                continue

            elif current_char == "(":
                depth += 1
                after_unary_minus = False

            elif current_char == "-" and not after_unary_minus:
                after_unary_minus = True

            elif current_char == ")":
                if b > 0 and problem[b - 1] == "(":
                    raise E.InvalidSyntaxError("Empty parentheses.", code="3031", position=b)
                raise E.InvalidSyntaxError("Missing number before ')'.", code="3027", position=b)

            else:
                raise E.InvalidSyntaxError(f"Missing number before '{current_char}'", code="3028", position=b)

        else:
            # --- Operand seen: binary operator, ')' or implicit multiplication ---
            if current_char in Operations:
                expect_operand = True

            elif current_char == ")":
                if depth == 0:
                    raise E.InvalidSyntaxError("Missing '('.", code="3010", position=b)
                depth -= 1

            elif current_char == "(":
                # '2(3)' and ')(' multiply implicitly
                depth += 1
                expect_operand = True

            else:
                raise E.InvalidSyntaxError("Number directly after ')'.", code="3032", position=b)

        b += 1

    if expect_operand:
        if problem[-1] in Operations:
            raise E.InvalidSyntaxError(f"Missing number after '{problem[-1]}'", code="3029", position=len(problem) - 1)
        raise E.InvalidSyntaxError("Missing number.", code="3027", position=len(problem) - 1)

    if depth != 0:
        raise E.InvalidSyntaxError("Missing ')'.", code="3009", position=len(problem) - 1)


def validate(expression, max_length=DEFAULT_MAX_LENGTH):
    """Return True if the expression can be tokenized and evaluated; else False."""
    try:
        check_syntax(expression, max_length)
    except E.InvalidSyntaxError:
        return False
    return True
