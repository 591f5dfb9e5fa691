"""``inject``: evaluate host-supplied predicate code with fault containment.

The code is either Python source defining exactly one callable (a lambda
expression or a single top-level ``def``) or ``@name`` referring to a
callable registered with :func:`register_injection`. The callable receives
the whole request or the value at a field path; a callable taking no
parameters is called with nothing.

This runs arbitrary trusted code. Faults are contained, nothing is
sandboxed; deployments that cannot trust rule authors should turn
``allow_injection`` off.
"""

from __future__ import annotations

import ast
import inspect
import logging
import textwrap
from collections.abc import Callable
from typing import Any

from stubmatch.constants.predicates import (
    INJECTION_LOG_TEMPLATE,
    REGISTERED_INJECTION_PREFIX,
    REQUEST_TARGET,
)
from stubmatch.exceptions import InjectionError
from stubmatch.predicates.fields import resolve
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import ErrorLogger

logger = logging.getLogger(__name__)

_REGISTERED: dict[str, Callable[..., Any]] = {}


def register_injection(name: str, predicate: Callable[..., Any]) -> None:
    """Make *predicate* available to rules as ``inject: "@<name>"``."""
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"injection name must be a non-empty identifier, got {name!r}")
    if not callable(predicate):
        raise TypeError(f"injection {name!r} must be callable, got {type(predicate).__name__}")
    _REGISTERED[name] = predicate
    logger.debug("Registered injection: %s", name)


def unregister_injection(name: str) -> None:
    """Forget a registered injection; unknown names are ignored."""
    _REGISTERED.pop(name, None)


def registered_injections() -> tuple[str, ...]:
    """Names of registered injections, sorted."""
    return tuple(sorted(_REGISTERED))


def run_inject(
    target: FieldPath,
    code: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> Any:
    """Run the injected predicate and return its result as-is.

    Any failure while loading or calling it is reported through
    ``logger.error("injection X=> %s", ...)`` and replaced by a single
    :class:`InjectionError`.
    """
    error_logger = logger if logger is not None else logging.getLogger(__name__)
    try:
        predicate = load_predicate(code)
        argument = request if target == REQUEST_TARGET else resolve(target, request)
        return call_predicate(predicate, argument)
    except (KeyboardInterrupt, GeneratorExit):
        raise
    except BaseException as exc:
        error_logger.error(INJECTION_LOG_TEMPLATE, f"{type(exc).__name__}: {exc}")
        raise InjectionError() from None


def load_predicate(code: object) -> Callable[..., Any]:
    """Turn injection code into the callable it defines."""
    if not isinstance(code, str):
        raise TypeError(f"injected code must be a string, got {type(code).__name__}")

    name = code[len(REGISTERED_INJECTION_PREFIX) :]
    if code.startswith(REGISTERED_INJECTION_PREFIX) and name.isidentifier():
        try:
            return _REGISTERED[name]
        except KeyError:
            raise LookupError(f"no injection registered as {name!r}") from None

    source = textwrap.dedent(code).strip()
    module = ast.parse(source, filename="<injection>")
    namespace: dict[str, Any] = {}

    if len(module.body) == 1 and isinstance(module.body[0], ast.Expr):
        predicate = eval(compile(ast.Expression(module.body[0].value), "<injection>", "eval"), namespace)
    else:
        functions = [node.name for node in module.body if isinstance(node, ast.FunctionDef)]
        if len(functions) != 1:
            raise ValueError(f"injected code must define exactly one function, found {len(functions)}")
        exec(compile(module, "<injection>", "exec"), namespace)
        predicate = namespace[functions[0]]

    if not callable(predicate):
        raise TypeError(f"injected code must evaluate to a callable, got {type(predicate).__name__}")
    return predicate


def call_predicate(predicate: Callable[..., Any], argument: RequestValue) -> Any:
    """Invoke *predicate*, dropping *argument* when it declares no parameters.

    This is the one place injected code runs; wrap it to add a timeout.
    """
    if _takes_no_parameters(predicate):
        return predicate()
    return predicate(argument)


def _takes_no_parameters(predicate: Callable[..., Any]) -> bool:
    try:
        return len(inspect.signature(predicate).parameters) == 0
    except (TypeError, ValueError):
        return False
