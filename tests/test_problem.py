import pytest

import narigama_optional
from narigama_optional.problem import OptionalProblem


class OhDear(OptionalProblem):
    title = "Oh Dear"
    kind = "oh-dear"


def raises_problem():
    raise OhDear("Here's a user readable reason.", context={"answer": 42})


def test_problem_carries_detail_and_context():
    with pytest.raises(OhDear) as ex:
        raises_problem()

    assert str(ex.value) == "Here's a user readable reason."
    assert ex.value.to_dict() == {
        "title": "Oh Dear",
        "kind": "oh-dear",
        "detail": "Here's a user readable reason.",
        "context": {"answer": 42},
    }


def test_problem_without_detail():
    problem = OhDear()
    assert problem.detail == "No detail provided"
    assert problem.to_dict() == {"title": "Oh Dear", "kind": "oh-dear", "detail": "No detail provided"}
    assert repr(problem) == "<OhDear(title='Oh Dear', detail='No detail provided')>"


def test_problem_missing_fields_cant_be_built():
    with pytest.raises(TypeError) as ex:

        class Broken(OptionalProblem):
            title = "Broken"

    assert str(ex.value) == "Can't build a Problem: Broken is missing the field(s): kind"


def test_problems_are_builtin_errors_too():
    # callers that only know about the builtins can still catch these
    with pytest.raises(ValueError):
        narigama_optional.Optional.of(None)

    with pytest.raises(TypeError):
        narigama_optional.Optional.empty().map(None)

    assert issubclass(narigama_optional.InvalidState, OptionalProblem)
    assert issubclass(narigama_optional.InvalidArgument, OptionalProblem)
