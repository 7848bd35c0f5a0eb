import random

from generative import BoundedInteger, ByteArray, Draw, Generator, ListOf, Trial

def test_generator_records_labelled_draws():
    trial = Trial(0, 1)
    g = trial.named_var("n").gen(BoundedInteger(0, 10))
    assert isinstance(g, Generator)
    v = g.get()
    w = trial.generate(BoundedInteger(0, 10))
    assert trial.draws == [Draw(g.arbitrary, v, "n"), Draw(trial.draws[1].arbitrary, w, None)]

def test_generator_delegates_to_arbitrary():
    arb = BoundedInteger(0, 100)
    trial = Trial(0, 2)
    g = trial.gen(arb)
    assert g.shrink(10) == arb.shrink(10)
    assert g.accepts(10) and not g.accepts(101)
    assert g.get(random.Random(3)) == arb.get(random.Random(3))
    stream = g.stream(random.Random(4))
    assert all(0 <= next(stream) <= 100 for _ in range(10))
    # drawing with an explicit source does not touch the trial
    assert trial.draws == []

def test_generator_rebinding():
    arb = ByteArray(4)
    first, second = Trial(0, 5), Trial(1, 6)
    g = first.named_var("data").gen(arb)
    h = g.bind(second)
    assert h.arbitrary is arb and h.trial is second and h.label == "data"
    h.get()
    assert first.draws == [] and len(second.draws) == 1

def test_same_seed_same_values():
    a, b = Trial(0, 7), Trial(0, 7)
    for t in (a, b):
        t.any_integer()
        t.any_byte_array_up_to_length(10)
    assert [d.value for d in a.draws] == [d.value for d in b.draws]

def test_replay_and_overrides():
    original = Trial(0, 8)
    original.any_bounded_integer(0, 100)
    original.any_bounded_integer(0, 100)
    original.any_byte_array_up_to_length(8)

    replay = Trial(0, 8, replay=original.draws, overrides={1: 3})
    replay.any_bounded_integer(0, 100)
    replay.any_bounded_integer(0, 100)
    replay.any_byte_array_up_to_length(8)
    assert [d.value for d in replay.draws] == [
        original.draws[0].value, 3, original.draws[2].value]

def test_replay_draws_fresh_values_when_needed():
    old = [Draw(BoundedInteger(0, 5), 3, None), Draw(BoundedInteger(0, 5), 4, None)]
    trial = Trial(0, 9, replay=old)
    # out of range for the new bounds
    assert 10 <= trial.any_bounded_integer(10, 20) <= 20
    # different kind of arbitrary
    assert isinstance(trial.any_byte_array_up_to_length(3), bytes)
    # more draws than were recorded
    assert 0 <= trial.any_bounded_integer(0, 5) <= 5

def test_convenience_draws():
    trial = Trial(0, 10)
    assert 1 <= trial.any_positive_integer_less_than(3) <= 2
    assert -5 <= trial.any_bounded_integer(-5, -5) <= -5
    assert len(trial.any_byte_array_up_to_length(2)) <= 2
    values = trial.named_var("xs").list_of_length(BoundedInteger(0, 1), 4).get()
    assert len(values) == 4
    assert isinstance(trial.draws[-1].arbitrary, ListOf)
    assert trial.draws[-1].label == "xs"

def test_mapped_generators_keep_their_label():
    trial = Trial(0, 11)
    doubled = trial.named_var("doubled").gen(BoundedInteger(0, 10)).map(
        lambda x: 2 * x, lambda y: y // 2)
    arrays = trial.named_var("arrays").gen(BoundedInteger(0, 4)).flat_map(
        lambda n: ByteArray(n, min_length=n), len)
    doubled.get()
    arrays.get()
    assert [d.label for d in trial.draws] == ["doubled", "arrays"]
