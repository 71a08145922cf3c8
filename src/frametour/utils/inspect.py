"""Provide insights about Python objects."""

import ast
import inspect
import textwrap
from typing import Any, Callable


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Will return the name of the object and the
    name of the module and class it belongs to.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. Properties are named after
    their getter.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'frametour.utils.inspect.TestClass.method'
    """
    if isinstance(obj, property):
        obj = obj.fget

    module = inspect.getmodule(obj)
    module_name = module.__name__ if module is not None else type(obj).__module__
    if inspect.ismethod(obj) or inspect.isfunction(obj):
        if hasattr(obj, "__self__") and obj.__self__:
            owner = obj.__self__
            class_name = owner.__name__ if inspect.isclass(owner) else owner.__class__.__name__
            return f"{module_name}.{class_name}.{obj.__name__}"
        return f"{module_name}.{obj.__qualname__}"
    elif inspect.isclass(obj):
        return f"{module_name}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    elif callable(obj) and hasattr(obj, "__qualname__"):
        # builtins and cython functions, like numpy ufuncs.
        return f"{module_name}.{obj.__qualname__}"
    elif isinstance(obj, object):
        return f"{module_name}.{obj.__class__.__name__}"
    raise ValueError(f"Unable to detect path for object of type {type(obj)}")


def get_body_source(func: Callable) -> str:
    """Get the source code of the body of a function.

    Decorators, the signature and the docstring are removed,
    and the remaining code is dedented, so that what's left
    is the snippet as a reader would type it.

    >>> def snippet(a, b):
    ...     '''Sum two numbers.'''
    ...     total = a + b
    ...     return total
    >>> print(get_body_source(snippet))
    total = a + b
    return total
    """
    source = textwrap.dedent(inspect.getsource(func))
    tree = ast.parse(source)
    funcdef = tree.body[0]
    if not isinstance(funcdef, (ast.FunctionDef, ast.AsyncFunctionDef)):
        raise ValueError(f"{get_qualname(func)} is not a function")

    body = funcdef.body
    first = body[0]
    if (
        isinstance(first, ast.Expr)
        and isinstance(first.value, ast.Constant)
        and isinstance(first.value.value, str)
    ):
        body = body[1:]
    if not body:
        return ""

    lines = source.splitlines()
    snippet = lines[body[0].lineno - 1 : funcdef.end_lineno]
    return textwrap.dedent("\n".join(snippet)).strip("\n")
