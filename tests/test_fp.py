import logging

import pytest

from prodband.fp import (
    LazyValue,
    Task,
    ap,
    fmap,
    main,
    new_accumulator,
    pipe,
)


def test_task_runs_steps_in_order():
    steps = []
    task = Task().then(lambda: steps.append(1)).then(lambda: steps.append(2))
    assert steps == []
    task.execute()
    assert steps == [1, 2]


def test_task_then_does_not_change_original():
    steps = []
    base = Task().then(lambda: steps.append("a"))
    base.then(lambda: steps.append("b"))
    base.execute()
    assert steps == ["a"]


def test_new_accumulator_is_lazy(caplog):
    caplog.set_level(logging.INFO, logger="prodband.fp")
    acc = new_accumulator(7)
    assert [r.getMessage() for r in caplog.records] == []
    assert acc() == 7
    assert [r.getMessage() for r in caplog.records] == ["computing"]


def test_compute_matches_call():
    acc = new_accumulator(11)
    assert acc.compute() == acc()


def test_accumulate_identity():
    assert new_accumulator(0).accumulate(9)() == 9


def test_accumulate_lazy_commutes():
    a = new_accumulator(4).accumulate(6)
    b = new_accumulator(-2)
    assert a.accumulate_lazy(b)() == b.accumulate_lazy(a)()


def test_accumulate_variants_agree():
    base = new_accumulator(3)
    other = new_accumulator(8)
    lazy = base.accumulate_lazy(other)()
    assert base.accumulate_computer(other)() == lazy
    assert base.accumulate_other(other)() == lazy
    assert base.accumulate(8)() == lazy


def test_accumulate_strings():
    assert LazyValue(lambda: "go").accumulate("pher")() == "go" + "pher"


def test_to_applicative_yields_value():
    assert new_accumulator(5).to_applicative()() == 5


def test_fmap_is_lazy_until_called():
    mapped = fmap(new_accumulator(3), lambda i: i // 0)
    with pytest.raises(ZeroDivisionError):
        mapped()


def test_fmap_applies_function():
    assert fmap(lambda: 4, lambda x: [x])() == [4]


def test_ap_applies_wrapped_function():
    assert ap(lambda: (lambda x: (x, x)), lambda: 4)() == (4, 4)


def test_pipe_feeds_result():
    seen = []
    p = pipe(lambda: "hi", lambda s: seen.append(s) or s)
    assert seen == []
    assert p() == "hi"
    assert seen == ["hi"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello World!"
    assert lines[1:4] == ["17", "22", "10"]
    assert lines[4] == "hi bye!"
    assert lines[5] == "{}"