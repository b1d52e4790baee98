from concurrex.runner import Runner


def test_runner_starts_empty_with_limit():
    runner = Runner(5)
    assert runner.concurrency_limit == 5
    assert runner.users == set()


def test_add_user_records_user():
    runner = Runner(1)
    runner.add_user("alice")
    runner.add_user("bob")
    assert runner.users == {"alice", "bob"}


def test_add_user_is_idempotent():
    runner = Runner(1)
    runner.add_user("alice")
    runner.add_user("alice")
    assert len(runner.users) == 1


def test_slots_allow_one_hundred_acquisitions():
    runner = Runner(3)
    acquired = [runner.slots.acquire(blocking=False) for _ in range(100)]
    assert all(acquired)
    assert runner.slots.acquire(blocking=False) is False