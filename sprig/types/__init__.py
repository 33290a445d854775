from sprig.types.symbol import Symbol
from sprig.types.nil import Nil, NilType
from sprig.types.pair import Pair, is_list, to_list, is_equal
from sprig.types.builtin_ref import Builtin
from sprig.types.environment import Environment, Unassigned
from sprig.types.closure import Closure

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "is_list",
    "to_list",
    "is_equal",
    "Builtin",
    "Environment",
    "Unassigned",
    "Closure",
]
