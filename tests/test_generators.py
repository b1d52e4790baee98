import threading
from unittest.mock import patch

from concurrex.generators import (
    generate,
    generate_from_func,
    simple_generator_driver,
    simple_generator_from_func_driver,
)


def test_generate_yields_all_values_in_order():
    done = threading.Event()
    assert list(generate(done, 1, 2, 3, 4, 5)) == [1, 2, 3, 4, 5]


def test_generate_with_no_values_is_empty():
    assert list(generate(threading.Event())) == []


def test_generate_stops_when_done_is_already_set():
    done = threading.Event()
    done.set()
    assert list(generate(done, "x", "y")) == []


def test_generate_stops_midway_when_done_is_set():
    done = threading.Event()
    received = []
    for value in generate(done, 10, 20, 30, 40):
        received.append(value)
        if value == 20:
            done.set()
    assert received == [10, 20]


def test_generate_from_func_calls_lazily():
    calls = []

    def produce():
        calls.append(True)
        return ["a", "b"]

    stream = generate_from_func(threading.Event(), produce)
    assert calls == []
    assert list(stream) == ["a", "b"]
    assert calls == [True]


def test_generate_from_func_respects_done():
    done = threading.Event()
    done.set()
    assert list(generate_from_func(done, lambda: [1, 2, 3])) == []


def test_simple_generator_driver_prints_values(capsys):
    simple_generator_driver()
    assert capsys.readouterr().out.split() == ["1", "2", "3", "4", "5"]


def test_simple_generator_from_func_driver_prints_letters(capsys):
    with patch("concurrex.generators.time.sleep") as sleep:
        simple_generator_from_func_driver()
    sleep.assert_called_once_with(2)
    assert capsys.readouterr().out.split() == ["a", "b", "c", "d", "e"]