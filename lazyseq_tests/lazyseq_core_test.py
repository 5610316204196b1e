import suite
from lazyseq import (
    shift, reduce, sequence, iterator, empty, arange, take,
    StepResult, DONE, item, LazySequence
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def counted(length=None):
    """naturals, plus a log of every index that was actually produced"""
    pulled = []

    def nth(i):
        pulled.append(i)
        return i

    return sequence(nth, length), pulled


# step result tests

@test("step results unpack into value and done")
def test_step_result_unpacking():
    value, done = item(5)
    assert_that(value == 5 and done is False, f"unexpected unpacking: {value}, {done}")
    value, done = DONE
    assert_that(value is None and done is True, "done step should carry no value")


@test("step results compare by value and done flag")
def test_step_result_equality():
    assert_that(item(1) == StepResult(False, 1), "equal items should compare equal")
    assert_that(item(1) != item(2), "different values should differ")
    assert_that(StepResult(True, 'ignored') == DONE, "done steps drop their value")
    assert_that(item(None) != DONE, "an item holding none is still an item")


@test("step results are immutable")
def test_step_result_immutable():
    step = item(1)
    with assert_raises(AttributeError):
        step.value = 2
    assert_that(step.value == 1, "value should be unchanged")


# shift() tests

@test("shift pulls exactly one item by default")
def test_shift_default():
    seq, pulled = counted()
    assert_that(shift(seq) == item(0), "should return the first item")
    assert_that(pulled == [0], f"should pull once: {pulled}")


@test("shift discards n items and returns the next one")
def test_shift_n():
    seq, pulled = counted()
    assert_that(shift(seq, 3) == item(3), "should return the fourth item")
    assert_that(pulled == [0, 1, 2, 3], f"should pull n + 1 times: {pulled}")
    assert_that(shift(seq) == item(4), "cursor should have moved by four")


@test("shift with negative n pulls once")
def test_shift_negative():
    seq, pulled = counted()
    shift(seq, -5)
    assert_that(pulled == [0], f"should pull once: {pulled}")


@test("shift past the end returns done")
def test_shift_past_end():
    seq = iterator([1, 2])
    assert_that(shift(seq, 5).done, "should report done")
    assert_that(shift(seq).done, "should stay done")


# reduce() tests

@test("reduce folds every item of a finite sequence")
def test_reduce_sum():
    total = reduce(arange(5), lambda value, result: value + result, 0)
    assert_that(total == 10, f"sum of 0..4 should be 10: {total}")


@test("reduce passes the item first and the accumulator second")
def test_reduce_argument_order():
    folded = reduce(iterator(['a', 'b', 'c']), lambda value, result: value + result, '')
    assert_that(folded == 'cba', f"item should be prepended to the accumulator: {folded}")


@test("reduce stops after n items")
def test_reduce_cap():
    seq, pulled = counted()
    folded = reduce(seq, lambda value, result: result + [value], [], 3)
    assert_that(folded == [0, 1, 2], f"should fold three items: {folded}")
    assert_that(pulled == [0, 1, 2], f"should not pull a fourth item: {pulled}")


@test("reduce with a zero cap consumes nothing (resolved: older behaviour consumed one item)")
def test_reduce_zero_cap():
    seq, pulled = counted()
    folded = reduce(seq, lambda value, result: result + [value], [], 0)
    assert_that(folded == [], "should return the initial value")
    assert_that(pulled == [], f"should not pull anything: {pulled}")
    assert_that(shift(seq) == item(0), "first item should still be available")


@test("reduce with a negative cap consumes nothing")
def test_reduce_negative_cap():
    seq, pulled = counted()
    assert_that(reduce(seq, lambda value, result: result + 1, 0, -3) == 0, "should return initial")
    assert_that(pulled == [], f"should not pull anything: {pulled}")


@test("reduce folds the item that triggers stop, then stops")
def test_reduce_stop_includes_item():
    seq = arange(10)
    folded = reduce(seq, lambda value, result: result + [value], [], stop=lambda value: value == 3)
    assert_that(folded == [0, 1, 2, 3], f"stop item should be folded: {folded}")
    assert_that(shift(seq) == item(4), "cursor should sit right after the stop item")


@test("reduce over an infinite sequence ends with stop")
def test_reduce_infinite_stop():
    seq, _ = counted()
    total = reduce(seq, lambda value, result: value + result, 0, stop=lambda value: value >= 100)
    assert_that(total == sum(range(101)), f"should fold 0..100: {total}")


@test("reduce on an exhausted sequence returns the initial value")
def test_reduce_exhausted():
    assert_that(reduce(empty(), lambda value, result: result + 1, 'seed') == 'seed', "should return initial")
    seq = iterator([1])
    take(seq)
    assert_that(reduce(seq, lambda value, result: result + value, 7) == 7, "should return initial")


@test("reduce does not grow the stack with the number of items")
def test_reduce_long_fold():
    total = reduce(sequence(lambda i: 1, 100_000), lambda value, result: value + result, 0)
    assert_that(total == 100_000, f"should fold every item: {total}")


# protocol tests

@test("sequences follow the python iterator protocol")
def test_python_iteration():
    assert_that(list(arange(3)) == [0, 1, 2], "list() should drain the sequence")
    seen = []
    for value in sequence(lambda i: i * i):
        if value > 20: break
        seen.append(value)
    assert_that(seen == [0, 1, 4, 9, 16], f"for loop should pull lazily: {seen}")


@test("iterating shares the cursor with direct pulls")
def test_shared_cursor():
    seq = arange(5)
    shift(seq)
    assert_that(next(seq) == 1, "next() should continue from the cursor")
    assert_that(list(seq) == [2, 3, 4], "list() should see the remaining items")


@test("done is reported again on every later pull")
def test_idempotent_done():
    seq = iterator([1])
    shift(seq)
    assert_that(all(shift(seq) == DONE for _ in range(3)), "should keep reporting done")


@test("length reports the items still to come")
def test_length():
    seq = arange(5)
    assert_that(seq.length == 5, f"fresh range should have length 5: {seq.length}")
    shift(seq, 1)
    assert_that(seq.length == 3, f"two pulls should leave 3: {seq.length}")
    take(seq)
    assert_that(seq.length == 0, "drained range should have length 0")
    assert_that(sequence(lambda i: i).length is None, "infinite sequence has no length")


@test("every producer is a LazySequence")
def test_is_lazy_sequence():
    for seq in (arange(3), empty(), iterator([1]), sequence(lambda i: i)):
        assert_that(isinstance(seq, LazySequence), f"{seq!r} should be a LazySequence")


if __name__ == "__main__":
    suite.main(title="lazyseq core test suite")
