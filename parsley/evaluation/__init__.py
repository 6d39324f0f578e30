from parsley.evaluation.evaluator import apply, call_procedure, evaluate

__all__ = ["apply", "call_procedure", "evaluate"]
