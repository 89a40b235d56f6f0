from prompt_as_code.schemas import AssertionOutcome, Assertions, AssertionsChecked


def _contains(response_lower: str, term: str) -> bool:
    return term.lower() in response_lower


def evaluate(response: str, assertions: Assertions | None) -> AssertionsChecked:
    """
    Check a model response against a test case's assertions.

    Matching is case-insensitive substring containment. Outcomes keep the
    order of the source lists and duplicates are not collapsed.

    Args:
        response: Text returned by the model
        assertions: should_contain / should_not_contain lists (None means no checks)

    Returns:
        AssertionsChecked with one outcome per assertion string
    """
    assertions = assertions or Assertions()
    response_lower = response.lower()

    should_contain = []
    for term in assertions.should_contain:
        found = _contains(response_lower, term)
        should_contain.append(AssertionOutcome(assertion=term, passed=found, found_in_response=found))

    should_not_contain = []
    for term in assertions.should_not_contain:
        found = _contains(response_lower, term)
        should_not_contain.append(AssertionOutcome(assertion=term, passed=not found, found_in_response=found))

    return AssertionsChecked(should_contain=should_contain, should_not_contain=should_not_contain)


def all_passed(checked: AssertionsChecked) -> bool:
    """True when every outcome passed; an empty set of checks passes."""
    return all(o.passed for o in checked.should_contain) and all(
        o.passed for o in checked.should_not_contain
    )
