import io

from threadlab.demos import (
    countdown,
    find_odd_sum,
    main,
    odd_sum_in_thread,
    ordered_tasks,
    try_lock_demo,
)


def test_countdown_values():
    assert list(countdown(3)) == [2, 1, 0]


def test_countdown_length_and_bounds():
    values = list(countdown(10))
    assert len(values) == 10
    assert values == sorted(values, reverse=True)
    assert values[-1] == 0


def test_countdown_nothing_for_zero_or_less():
    assert list(countdown(0)) == []
    assert list(countdown(-4)) == []


def test_find_odd_sum_small_range():
    assert find_odd_sum(1, 5) == 9


def test_find_odd_sum_squares():
    for n in range(1, 30):
        assert find_odd_sum(1, 2 * n - 1) == n * n


def test_find_odd_sum_empty_range():
    assert find_odd_sum(10, 3) == 0
    assert find_odd_sum(4, 4) == 0


def test_find_odd_sum_symmetric_negative_range():
    assert find_odd_sum(-7, 7) == 0


def test_odd_sum_in_thread_matches_direct():
    for start, end in [(1, 5), (2, 101), (-9, 20)]:
        assert odd_sum_in_thread(start, end) == find_odd_sum(start, end)


def test_ordered_tasks_both_run():
    out = io.StringIO()
    order = ordered_tasks(out, work_seconds=0)
    assert sorted(order) == ["A", "B"]
    assert out.getvalue().splitlines() == [f"Started task {name}.." for name in order]


def test_try_lock_demo_output_matches_failures():
    out = io.StringIO()
    failures = try_lock_demo(out, hold_seconds=0.2, retry_seconds=0.02)
    lines = out.getvalue().splitlines()
    assert lines.count("Task 2 could not lock the mutex") == failures
    assert lines.index("Task 2 trying to lock the mutex") < lines.index(
        "Task 2 has locked the mutex"
    )
    assert lines.index("Task 2 has locked the mutex") < lines.index(
        "Task 2 has unlocked the mutex"
    )
    assert "Task 1 unlocking the mutex" in lines


def test_main_odd_sum(capsys):
    assert main(["odd-sum"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Waiting for future result", f"Received oddSum = {find_odd_sum(1, 5)}"]


def test_main_countdown(capsys):
    assert main(["countdown"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(n) for n in countdown(10)]