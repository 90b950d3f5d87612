import pytest

from courier.domain.entities.commands import Deliver, Proceed, Turn
from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate, Segment
from courier.domain.errors import UnspecifiedFailure
from courier.planning.compiler import CommandCompiler, LegEnd

# 0.001 deg steps around a single origin
A = Coordinate.of(34.0, -118.0)
N1 = Coordinate.of(34.001, -118.0)
N2 = Coordinate.of(34.002, -118.0)
N1W = Coordinate.of(34.001, -118.001)
N1E = Coordinate.of(34.001, -117.999)


def test_same_street_segments_merge():
    s1, s2 = Segment(A, N1, "Main St"), Segment(N1, N2, "Main St")
    cmds = CommandCompiler().run([s1, s2, LegEnd()])
    assert len(cmds) == 1
    assert cmds[0].direction == "north"
    assert cmds[0].street == "Main St"
    assert cmds[0].distance_mi == pytest.approx(s1.length_mi + s2.length_mi)


def test_straight_street_change_has_no_turn():
    cmds = CommandCompiler().run([Segment(A, N1, "Main St"), Segment(N1, N2, "Oak Ave"), LegEnd()])
    assert [type(c) for c in cmds] == [Proceed, Proceed]
    assert [c.street for c in cmds] == ["Main St", "Oak Ave"]


def test_left_turn():
    cmds = CommandCompiler().run([Segment(A, N1, "Main St"), Segment(N1, N1W, "Elm St"), LegEnd()])
    assert [str(c) for c in cmds[1:]] == [
        "Turn left on Elm St",
        f"Proceed west on Elm St for {Segment(N1, N1W, 'Elm St').length_mi:.2f} miles",
    ]


def test_right_turn():
    cmds = CommandCompiler().run([Segment(A, N1, "Main St"), Segment(N1, N1E, "Elm St"), LegEnd()])
    assert cmds[1] == Turn(direction="right", street="Elm St")
    assert cmds[2].direction == "east"


def test_reversal_onto_another_street_turns_right():
    cmds = CommandCompiler().run([Segment(A, N1, "Main St"), Segment(N1, A, "Back Ln"), LegEnd()])
    assert cmds[1] == Turn(direction="right", street="Back Ln")
    assert cmds[2].direction == "south"


def test_wider_tolerance_swallows_gentle_bends():
    bend = Coordinate.of(34.002, -117.99995)  # ~3 deg off north
    stream = [Segment(A, N1, "Main St"), Segment(N1, bend, "Oak Ave"), LegEnd()]
    assert any(isinstance(c, Turn) for c in CommandCompiler().run(stream))
    assert not any(isinstance(c, Turn) for c in CommandCompiler(colinear_tolerance_deg=5.0).run(stream))


def test_deliver_between_legs():
    book = DeliveryStop("Book", N1)
    cmds = CommandCompiler(expected_deliveries=1).compile_legs(
        [[Segment(A, N1, "Main St")], [Segment(N1, A, "Main St")]], [book]
    )
    assert [str(c).split(" for ")[0] for c in cmds] == [
        "Proceed north on Main St",
        "Deliver Book",
        "Proceed south on Main St",
    ]


def test_new_leg_starts_fresh_even_on_same_street():
    book = DeliveryStop("Book", N1)
    seg = Segment(A, N1, "Main St")
    cmds = CommandCompiler().compile_legs([[seg], [Segment(N1, N2, "Main St")]], [book])
    # the street after a delivery is announced again, not merged into the first Proceed
    assert [c.kind for c in cmds] == ["proceed", "deliver", "proceed"]
    assert cmds[0].distance_mi == seg.length_mi


def test_stop_at_the_depot_delivers_without_moving():
    pen = DeliveryStop("Pen", A)
    assert CommandCompiler().compile_legs([[], []], [pen]) == [Deliver("Pen")]


def test_leg_count_must_match_stops():
    with pytest.raises(UnspecifiedFailure):
        CommandCompiler().compile_legs([[Segment(A, N1, "Main St")]], [DeliveryStop("Book", N1)])


def test_stream_without_final_leg_fails():
    with pytest.raises(UnspecifiedFailure):
        CommandCompiler().run([Segment(A, N1, "Main St"), LegEnd(DeliveryStop("Book", N1))])


def test_too_many_deliveries_fail():
    c = CommandCompiler(expected_deliveries=1)
    c.end_leg(DeliveryStop("Book", A))
    with pytest.raises(UnspecifiedFailure):
        c.end_leg(DeliveryStop("Pen", A))


def test_returning_early_fails():
    c = CommandCompiler(expected_deliveries=2)
    c.end_leg(DeliveryStop("Book", A))
    with pytest.raises(UnspecifiedFailure):
        c.end_leg(None)


def test_nothing_accepted_after_finish():
    c = CommandCompiler()
    c.end_leg(None)
    assert c.finished
    with pytest.raises(UnspecifiedFailure):
        c.feed(Segment(A, N1, "Main St"))
    with pytest.raises(UnspecifiedFailure):
        c.end_leg(None)


def test_command_text():
    assert str(Proceed("northeast", "Elm St", 0.0712)) == "Proceed northeast on Elm St for 0.07 miles"
    assert str(Turn("left", "Elm St")) == "Turn left on Elm St"
    assert str(Deliver("Chicken tenders")) == "Deliver Chicken tenders"
