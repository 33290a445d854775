from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path

from sprig import LispValue
from sprig.config import get_recursion_limit, get_stack_size
from sprig.reader.parser import parse
from sprig.builtin.env_builtin import register
from sprig.evaluation.evaluator import evaluate
from sprig.types.environment import Environment
from sprig.types.errors import SprigRecursionError

logger = logging.getLogger(__name__)


def run_with_deep_stack(fn, *args):
    """Call `fn(*args)` on a worker thread with an enlarged stack and wait for it.

    Lisp recursion is host recursion, so the main thread's stack bounds how
    deep user programs can go. Exceptions are re-raised in the caller.
    """
    outcome: dict = {}

    def target():
        try:
            outcome["value"] = fn(*args)
        except BaseException as ex:
            outcome["error"] = ex

    previous = threading.stack_size(get_stack_size())
    try:
        worker = threading.Thread(target=target, name="sprig-eval")
        worker.start()
    finally:
        threading.stack_size(previous)
    worker.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


class Interpreter:
    """
    Reads and evaluates Sprig source buffers.
    Maintains one root Environment, pre-populated with the builtins, across calls.
    """

    def __init__(self, prelude: str | None = None):
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> LispValue:
        """Parse `code` completely, then evaluate its forms in order; return the last value."""
        program = parse(code)
        return run_with_deep_stack(self._evaluate, program)

    def _evaluate(self, program: LispValue) -> LispValue:
        try:
            return evaluate(program, self.env)
        except RecursionError as ex:
            raise SprigRecursionError("maximum recursion depth exceeded") from ex


def parse_and_eval(code: str) -> LispValue:
    """Evaluate one source buffer against a fresh root environment."""
    return Interpreter().eval(code)


def load_file(path: str | Path) -> LispValue:
    """Read a source file and evaluate it against a fresh root environment."""
    path = Path(path)
    logger.info("loading %s", path)
    return parse_and_eval(path.read_text(encoding="utf-8").strip())
