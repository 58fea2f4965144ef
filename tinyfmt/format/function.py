"""Function declaration rendering."""

from typing import List

from tinyfmt.format.block import format_block
from tinyfmt.models.syntax import FunctionNode, Parameter, SyntaxTree


def format_function_param(param: Parameter) -> str:
    """Render a parameter as `name`, `name?: type` or `name: type = default`."""
    text = param.name
    if param.optional:
        text += "?"
    if param.type_annotation:
        text += f": {param.type_annotation}"
    if param.default is not None:
        text += f" = {param.default}"
    return text


def format_function_params(params: List[Parameter]) -> str:
    return ", ".join(format_function_param(p) for p in params)


def format_function_signature(fn: FunctionNode) -> str:
    """
    Render `function name(params): returnType` for a declaration.

    Args:
        fn: Function declaration node

    Returns:
        Signature text without the body
    """
    keyword = "function*" if fn.is_generator else "function"
    if fn.is_async:
        keyword = f"async {keyword}"

    type_params = fn.type_parameters or ""
    params = format_function_params(fn.parameters)

    signature = f"{keyword} {fn.name}{type_params}({params})"
    if fn.return_type:
        signature += f": {fn.return_type}"

    return signature


def format_function(tree: SyntaxTree, fn: FunctionNode, level: int = 0) -> str:
    """
    Format a function declaration.

    The opening brace of the body always stays on the signature line.

    Args:
        tree: Syntax tree the function belongs to
        fn: Function declaration node
        level: Indentation level of the declaration

    Returns:
        Rendered function text
    """
    signature = format_function_signature(fn)

    if fn.body is None:
        return f"{signature} {{}}"

    body = format_block(tree, fn.body, level=level)
    return f"{signature} {body}"
