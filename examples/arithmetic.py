from pyparsel.Combinators import between, chainl1, skip_many
from pyparsel.Lexical import char, divide, floating_number, minus, multiply, one_whitespace, plus
from pyparsel.Prim import lazy, parse_all
from pyparsel.Result import ParseFailedError

# 1. Lexing helpers
# Every token skips the whitespace that follows it.
spaces = skip_many(one_whitespace())

def lexeme(p):
    return p < spaces

# 2. Helper Functions for Calculation
def add(x, y): return x + y
def sub(x, y): return x - y
def mul(x, y): return x * y
def div(x, y):
    if y == 0: raise ValueError("Division by zero")
    return x / y
def neg(x): return -x

add_op = lexeme(plus().map(lambda _: add) | minus().map(lambda _: sub))
mul_op = lexeme(multiply().map(lambda _: mul) | divide().map(lambda _: div))

# 3. The Expression Parser
def expression():
    return chainl1(chainl1(lazy(factor), mul_op), add_op)

def factor():
    # A number, a negated factor, or an expression inside parentheses.
    # 'lazy' breaks the cycle between expression and factor.
    return (
        lexeme(floating_number())
        | (lexeme(minus()) > lazy(factor)).map(neg)
        | between(lexeme(char('(')), lexeme(char(')')), lazy(expression))
    )

# The final parser skips leading whitespace too
parser = spaces > expression()

if __name__ == "__main__":
    test_cases = [
        "2 + 3",            # 5.0
        "2 * 3",            # 6.0
        "2 + 3 * 4",        # 14.0 (Precedence check)
        "(2 + 3) * 4",      # 20.0 (Parens check)
        "-2 + 3",           # 1.0 (Prefix check)
        "10 / 2 + 3",       # 8.0
        "10 / (2 - 2)",     # Runtime error
        "2 +",              # Parse error
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        try:
            print(f"{expr_str:<20} | {parse_all(parser, expr_str)}")
        except ParseFailedError as e:
            print(f"{expr_str:<20} | {e}")
        except ValueError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
