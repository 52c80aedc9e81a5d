import pytest

from pointfree.functional.composition import compose, pipe


def inc(x):
    return x + 1


def double(x):
    return x * 2


def square(x):
    return x**2


def test_pipe_scenario():
    assert pipe(lambda x: x + 1, lambda x: x * 2)(3) == 8


def test_compose_scenario():
    assert compose(lambda x: x * 2, lambda x: x + 1)(3) == 8


@pytest.mark.parametrize("x", [-3, 0, 1, 7])
def test_pipe_applies_left_to_right(x):
    assert pipe(inc, double, square)(x) == square(double(inc(x)))


@pytest.mark.parametrize("x", [-3, 0, 1, 7])
def test_compose_is_pipe_reversed(x):
    functions = [inc, double, square]
    assert compose(*functions)(x) == pipe(*reversed(functions))(x)


def test_single_function():
    assert pipe(inc)(1) == 2
    assert compose(inc)(1) == 2


def test_first_stage_receives_all_arguments():
    def add(a, b, scale=1):
        return (a + b) * scale

    assert pipe(add, inc)(2, 3, scale=10) == 51


def test_failure_aborts_chain():
    calls = []

    def fail(x):
        raise ZeroDivisionError("stage failed")

    def record(x):
        calls.append(x)
        return x

    with pytest.raises(ZeroDivisionError, match="stage failed"):
        pipe(inc, fail, record)(1)
    assert calls == []


def test_empty_pipe_rejected():
    with pytest.raises(ValueError, match="at least one function"):
        pipe()
    with pytest.raises(ValueError, match="at least one function"):
        compose()


def test_non_callable_stage_rejected():
    with pytest.raises(TypeError, match="Stage 1"):
        pipe(inc, "double")


def test_pipeline_name_lists_stages():
    assert pipe(inc, double).__name__ == "pipe(inc, double)"
    assert compose(inc, double).__name__ == "pipe(double, inc)"
