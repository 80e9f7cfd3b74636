"""
Application Initialization
==========================
This module wires the evaluator, the keypad controller and the window
together and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Creates the single shared arithmetic engine and the evaluator around it.
3. Passes the evaluator into the controller and the controller into the View.
4. Offers a headless ``--eval`` mode that skips the GUI entirely.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from safecalc import config
from safecalc.logging_config import setup_logging
from safecalc.model.engine import default_engine
from safecalc.model.errors import EvaluationError
from safecalc.model.evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="safecalc", description=config.VISIBLE_APP_NAME)
    parser.add_argument("--debug", action="store_true", help="Log everything (DEBUG level).")
    parser.add_argument("--log-level", default=None, metavar="LEVEL",
                        help="Log level name (e.g. WARNING). Defaults to $SAFECALC_LOG_LEVEL or INFO.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    parser.add_argument("--eval", dest="expression", default=None, metavar="EXPR",
                        help="Evaluate EXPR, print the result and exit without opening a window.")
    return parser


def run_headless(evaluator: ExpressionEvaluator, expression: str) -> int:
    """Print the display string for ``expression``; return the exit status."""
    try:
        result = evaluator.evaluate(expression)
    except EvaluationError as e:
        logger.warning(f"Could not evaluate '{expression}': {e}")
        print(config.ERROR_MARKER)
        return 1
    print(result)
    return 0


def run_gui(evaluator: ExpressionEvaluator, argv: Sequence[str]) -> int:
    # Qt is only needed (and only imported) when a window is shown
    from safecalc.app.application import create_app
    from safecalc.controller.keypad import KeypadController
    from safecalc.view.main_window import CalculatorWindow

    app = create_app(argv)

    controller = KeypadController(evaluator)
    window = CalculatorWindow(controller)
    window.show()

    logger.info("Calculator window shown.")
    return app.exec()


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    try:
        setup_logging(level=logging.DEBUG if args.debug else args.log_level, log_file=args.log_file)
    except ValueError as e:
        parser.error(str(e))

    # 2. One engine handle, reused for every evaluation
    evaluator = ExpressionEvaluator(default_engine())

    if args.expression is not None:
        return run_headless(evaluator, args.expression)

    return run_gui(evaluator, [sys.argv[0], *argv])


if __name__ == "__main__":
    sys.exit(main())
