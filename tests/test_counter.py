import logging

from concurrex.counter import ITERATIONS, main, simple_mutex_counter_driver


def test_default_run_leaves_ten():
    assert ITERATIONS == 1000
    assert simple_mutex_counter_driver() == 10


def test_explicit_iterations_match_default():
    assert simple_mutex_counter_driver(1000) == 10


def test_zero_iterations_gives_zero():
    assert simple_mutex_counter_driver(0) == 0


def test_result_is_stable_across_runs():
    results = {simple_mutex_counter_driver(500) for _ in range(5)}
    assert len(results) == 1


def test_main_logs_final_count(caplog):
    with caplog.at_level(logging.INFO, logger="concurrex.counter"):
        assert main([]) == 0
    assert "Count is 10" in caplog.text