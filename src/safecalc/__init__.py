"""Desktop calculator with a guarded arithmetic-expression evaluator."""
__version__ = "0.1.0"
