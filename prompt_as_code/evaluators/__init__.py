from prompt_as_code.evaluators.assertions import all_passed, evaluate

__all__ = ["evaluate", "all_passed"]
