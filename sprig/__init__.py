# Core type aliases for Sprig's data model.
# Numbers are Python ints and booleans are Python bools. Symbols, Nil, Pair,
# Closure and Builtin live in sprig.types.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; quoted code is ordinary data, so they are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]
