"""Two-stack evaluation of infix arithmetic expressions.

Numbers are non-negative decimal literals; operators are the binary `+ - * /`
with the usual precedence, all left-associative; `(` and `)` group.

>>> evaluate("(2 + 3) * 4")
20.0
>>> evaluate_expression("4 / 0")
0.0
"""
import logging
import operator
import os
import re
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

if os.getenv("DEBUG"):
    logger.setLevel(logging.DEBUG)


class EvalError(ValueError):
    """Base class for everything `evaluate` can raise."""


class UnbalancedParentheses(EvalError):
    pass


class MalformedNumber(EvalError):
    pass


class DivisionByZero(EvalError, ZeroDivisionError):
    pass


class StackUnderflow(EvalError):
    pass


class ResultIndeterminate(EvalError):
    pass


class UnknownSymbol(EvalError):
    """Only raised in strict mode; by default unknown characters are skipped."""


def format_number(num):
    """Render `num` without a spurious trailing `.0`.

    >>> format_number(8.0), format_number(0.25), format_number(float("inf"))
    ('8', '0.25', 'inf')
    """
    if abs(num) < 1e15 and (integer := int(num)) == num:
        return repr(integer)
    return repr(num)


class Op(NamedTuple):
    op: str
    prec: int
    fun: Callable

    def __call__(self, lhs, rhs):
        try:
            return self.fun(lhs, rhs)
        except ZeroDivisionError as exc:
            raise DivisionByZero(f"division by zero: {lhs!r} {self.op} {rhs!r}") from exc

    def __repr__(self):
        return f"op({self.op!r:})"

    def left_first(self, other):
        # Equal precedence reduces too, which is what makes everything left-associative.
        return self.prec >= other.prec

    def apply(self, operands):
        if len(operands) < 2:
            raise StackUnderflow(f"{self.op!r} needs two operands, got {len(operands)}")
        rhs = operands.pop()
        lhs = operands.pop()
        operands.append(ans := self(lhs, rhs))
        logger.debug("reduced %r %s %r -> %r", lhs, self.op, rhs, ans)


OP_GROUPS = """
add+ sub-
mul* truediv/
""".strip()
OPS = {
    o: Op(o, prec, getattr(operator, fun))
    for prec, op_groups in enumerate(OP_GROUPS.split("\n"))
    for [(fun, o)] in map(re.compile(r"^(\w+)(\W)$").findall, op_groups.split())
}

LPAREN = "("
RPAREN = ")"


def lex(s, strict=False):
    """Yield floats, `Op`s and the two paren strings, skipping whitespace.

    >>> list(lex("12.5*(3 -1)"))
    [12.5, op('*'), '(', 3.0, op('-'), 1.0, ')']
    """
    i, n = 0, len(s)
    while i < n:
        c = s[i]
        if c.isdecimal() or c == ".":
            start = i
            while i < n and (s[i].isdecimal() or s[i] == "."):
                i += 1
            try:
                yield float(s[start:i])
            except ValueError as exc:
                raise MalformedNumber(f"malformed number {s[start:i]!r} at {start}") from exc
            continue
        if c in OPS:
            yield OPS[c]
        elif c in (LPAREN, RPAREN):
            yield c
        elif strict and not c.isspace():
            raise UnknownSymbol(f"unknown symbol {c!r} at {i}")
        i += 1


def evaluate(s, strict=False):
    """Evaluate the infix expression `s`, raising an `EvalError` if it's malformed.

    Unknown characters are skipped unless `strict` is set.

    >>> evaluate("100 - 50 + 25")
    75.0
    >>> evaluate("2 * (3")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    infix.UnbalancedParentheses: unmatched '('
    """
    operands = []
    ops = []
    for tok in lex(s or "", strict):
        if type(tok) is float:
            operands.append(tok)
        elif tok == LPAREN:
            ops.append(tok)
        elif tok == RPAREN:
            while ops and ops[-1] != LPAREN:
                ops.pop().apply(operands)
            if not ops:
                raise UnbalancedParentheses("unmatched ')'")
            ops.pop()
        else:
            while ops and ops[-1] != LPAREN and ops[-1].left_first(tok):
                ops.pop().apply(operands)
            ops.append(tok)
    while ops:
        if (o := ops.pop()) == LPAREN:
            raise UnbalancedParentheses("unmatched '('")
        o.apply(operands)
    if len(operands) != 1:
        raise ResultIndeterminate(
            f"expected a single result, {len(operands)} values left in {s!r}"
        )
    (ans,) = operands
    return ans


def evaluate_expression(s, default=0.0, strict=False, on_error=None):
    """Like `evaluate`, but return `default` on failure.

    The failure is logged as a warning, or handed to `on_error(exc)` instead.
    """
    try:
        return evaluate(s, strict)
    except EvalError as exc:
        if on_error is None:
            logger.warning("could not evaluate %r: %s: %s", s, type(exc).__name__, exc)
        else:
            on_error(exc)
        return default
