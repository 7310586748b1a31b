"""Textual shapes of validation directives."""

from __future__ import annotations

from collections.abc import Callable

from .directive_models import LengthDirective, NestedDirective, RangeDirective, ValidationDirective


def format_directive(directive: ValidationDirective) -> str:
    """Render one directive, e.g. ``length(min = 5, max = 50)`` or ``range(max = 9.5)``."""
    if isinstance(directive, LengthDirective):
        return _format_call("length", directive.min, directive.max, str)
    if isinstance(directive, RangeDirective):
        integral = directive.integral
        return _format_call(
            "range", directive.min, directive.max, lambda value: _format_number(value, integral)
        )
    if isinstance(directive, NestedDirective):
        return "nested"
    raise TypeError(f"Unsupported validation directive: {directive!r}")


def _format_call(
    name: str,
    minimum: float | None,
    maximum: float | None,
    render: Callable[[float], str],
) -> str:
    arguments = []
    if minimum is not None:
        arguments.append(f"min = {render(minimum)}")
    if maximum is not None:
        arguments.append(f"max = {render(maximum)}")
    return f"{name}({', '.join(arguments)})"


def _format_number(value: float, integral: bool) -> str:
    if integral and float(value).is_integer():
        return str(int(value))
    return repr(float(value))
