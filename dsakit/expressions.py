"""Parenthesis matching, infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

_BINARY_OPERATORS = "+-*/"

# Precedence of an operator already on the stack and of one arriving from the input.
_STACK_PRECEDENCE = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}
_INPUT_PRECEDENCE = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7, ")": 0}


def is_balanced(expr: str) -> bool:
    """Return whether every '(' in expr is closed by a later ')'."""
    depth = 0
    for ch in expr:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def precedence(op: str) -> int:
    """Return 1 for + and -, 2 for * and /, 0 for anything else."""
    if op in "+-" and op:
        return 1
    if op in "*/" and op:
        return 2
    return 0


def is_operand(ch: str) -> bool:
    """Return whether ch is not one of the four arithmetic operators."""
    return ch not in _BINARY_OPERATORS or not ch


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Only + - * / are operators; operators of equal precedence associate left.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if is_operand(ch):
            output.append(ch)
            continue
        while stack and precedence(ch) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix_with_parens(infix: str) -> str:
    """Convert infix to postfix, honouring parentheses and right-associative '^'."""
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        incoming = _INPUT_PRECEDENCE.get(ch)
        if incoming is None:
            output.append(ch)
            continue
        while True:
            on_stack = _STACK_PRECEDENCE[stack[-1]] if stack else 0
            if incoming > on_stack:
                stack.append(ch)
                break
            if incoming < on_stack:
                output.append(stack.pop())
                continue
            if stack and stack[-1] == "(":
                stack.pop()
                break
            raise ValueError(f"unmatched ')' in {infix!r}")
    while stack:
        op = stack.pop()
        if op == "(":
            raise ValueError(f"unmatched '(' in {infix!r}")
        output.append(op)
    return "".join(output)


def _divide_truncating(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for ch in postfix:
        if is_operand(ch):
            if ch not in "0123456789":
                raise ValueError(f"operand {ch!r} is not a digit")
            stack.append(int(ch))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands in {postfix!r}")
        right = stack.pop()
        left = stack.pop()
        if ch == "+":
            stack.append(left + right)
        elif ch == "-":
            stack.append(left - right)
        elif ch == "*":
            stack.append(left * right)
        else:
            stack.append(_divide_truncating(left, right))
    if len(stack) != 1:
        raise ValueError(f"malformed postfix expression {postfix!r}")
    return stack[0]