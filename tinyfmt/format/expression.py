"""
Operator spacing for single expressions.

This module re-scans the raw text of one expression and emits it with
canonical spacing: one space around every binary operator, no space between
a prefix unary operator and its operand.

Examples:
    "a=b+c/6===4"   -> "a = b + c / 6 === 4"
    "!    a"        -> "!a"
    "a &&  -b"      -> "a && -b"
    "++  a + --b"   -> "++a + --b"

Postfix ``++``/``--`` are not recognized: ``a++`` is read as ``a`` followed
by a prefix ``++`` with no operand.
"""

from typing import List, Optional

from tinyfmt.models.syntax import SyntaxNode, SyntaxTree


# Longest first, so `>>>` wins over `>>` and `>`, `!==` over `!=` and `!`.
OPERATORS = tuple(sorted(
    [
        "+", "-", "*", "/", "%", "**",
        "+=", "-=", "*=", "/=", "%=", "**=",
        "==", "!=", "===", "!==",
        "<", "<=", ">", ">=", "<<", ">>", ">>>",
        "&&", "||",
        "&", "|", "~",
        "++", "--",
        "=", "!",
    ],
    key=len,
    reverse=True,
))

PREFIX_OPERATORS = frozenset({"++", "--", "!", "~"})

# `+` and `-` are prefix operators when preceded by one of these (or nothing).
CONTEXTUAL_OPERATORS = frozenset({"+", "-"})
OPERAND_START_CONTEXT = "([{=,:?;+-*/%!~&|^<>"

# Characters that can begin an operator; they end an operand run.
OPERATOR_CHARS = frozenset(op[0] for op in OPERATORS)


class _OperatorSpacer:
    """Single left-to-right scan over the text of one expression."""

    def __init__(self, code: str):
        self._code = code
        self._pos = 0
        self._parts: List[str] = []
        self._after_prefix = False

    def run(self) -> str:
        code = self._code

        while self._pos < len(code):
            char = code[self._pos]

            if char.isspace():
                self._pos += 1
                continue

            op = self._match_operator()
            if op is None:
                self._emit_operand()
            elif op in PREFIX_OPERATORS:
                self._emit_prefix(op)
            elif op in CONTEXTUAL_OPERATORS and self._starts_operand():
                self._emit_prefix(op)
            else:
                self._emit_binary(op)

        return "".join(self._parts).strip()

    def _match_operator(self, pos: Optional[int] = None) -> Optional[str]:
        if pos is None:
            pos = self._pos
        for op in OPERATORS:
            if self._code.startswith(op, pos):
                return op
        return None

    def _previous_char(self) -> Optional[str]:
        """Nearest non-whitespace character before the cursor."""
        j = self._pos - 1
        while j >= 0 and self._code[j].isspace():
            j -= 1
        if j < 0:
            return None
        return self._code[j]

    def _starts_operand(self) -> bool:
        prev = self._previous_char()
        return prev is None or prev in OPERAND_START_CONTEXT

    def _emit_binary(self, op: str) -> None:
        self._parts.append(f" {op}")
        self._pos += len(op)

    def _emit_prefix(self, op: str) -> None:
        code = self._code
        self._parts.append(f" {op}")
        self._pos += len(op)

        # Collapse runs like `! !! a` or `~~b` into one attached run. A longer
        # operator starting with the same symbol (`-` then `--`) ends the run.
        j = self._pos
        while j < len(code):
            if self._match_operator(j) == op:
                self._parts.append(op)
                j += len(op)
                self._pos = j
            elif code[j].isspace():
                j += 1
            else:
                break

        self._after_prefix = True

    def _emit_operand(self) -> None:
        code = self._code

        if self._after_prefix:
            self._after_prefix = False
        else:
            self._parts.append(" ")

        start = self._pos
        while self._pos < len(code):
            char = code[self._pos]
            if char.isspace() or char in OPERATOR_CHARS:
                break
            self._pos += 1

        self._parts.append(code[start:self._pos])


def space_operators(code: str) -> str:
    """
    Normalize operator spacing in the text of a single expression.

    Never raises: characters outside the operator catalog are copied
    verbatim as part of the surrounding operand.

    Args:
        code: Raw expression text

    Returns:
        Expression text with canonical operator spacing
    """
    return _OperatorSpacer(code.strip()).run()


def format_expression(tree: SyntaxTree, expression: SyntaxNode) -> str:
    """
    Format a single expression node by normalizing spaces around operators.

    Args:
        tree: Syntax tree the expression belongs to
        expression: Expression node

    Returns:
        Canonically spaced expression text
    """
    return space_operators(tree.get_text(expression))
