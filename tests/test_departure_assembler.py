"""Tests for assembling departures into a board."""

from departure_board.application.services import DepartureAssembler
from departure_board.domain.models import (
    CallAt,
    Departure,
    DepartureSettings,
    DepartureStatus,
    DepartureType,
)
from tests.builders import make_vehicle, station_order


def _departure(
    calls: list[tuple[int, int]],
    scheduled_date: int = 1000,
    vehicle_id: int = 1,
    lateness: int = 0,
    status: DepartureStatus = DepartureStatus.TRAVELLING,
    departure_type: DepartureType = DepartureType.DEPARTURE,
) -> Departure:
    order = station_order(1, wait_time=10)
    calling_at = [CallAt(station, date) for station, date in calls]
    return Departure(
        scheduled_date=scheduled_date,
        status=status,
        departure_type=departure_type,
        vehicle=make_vehicle([order], vehicle_id=vehicle_id),
        order=order,
        lateness=lateness,
        terminus=CallAt(calling_at[-1].station, calling_at[-1].scheduled_date),
        calling_at=calling_at,
    )


def test_identical_departures_are_merged_when_enabled() -> None:
    """Given two identical departures, when merging is enabled, then only the first is kept."""
    assembler = DepartureAssembler(DepartureSettings(merge_identical=True))

    assert assembler.add(_departure([(2, 1050)], vehicle_id=1))
    assert not assembler.add(_departure([(2, 1050)], vehicle_id=2))
    assert len(assembler) == 1


def test_identical_departures_are_kept_when_disabled() -> None:
    """Given two identical departures, when merging is disabled, then both are kept."""
    assembler = DepartureAssembler(DepartureSettings())

    assembler.add(_departure([(2, 1050)], vehicle_id=1))
    assembler.add(_departure([(2, 1050)], vehicle_id=2))

    assert len(assembler) == 2


def test_different_departures_are_not_merged() -> None:
    """Given departures to different termini, when merging, then both are kept."""
    assembler = DepartureAssembler(DepartureSettings(merge_identical=True))

    assembler.add(_departure([(2, 1050)]))
    assembler.add(_departure([(3, 1050)]))

    assert len(assembler) == 2


def test_smart_terminus_shortens_overtaken_departure() -> None:
    """Given a later departure reaching the terminus sooner, when added, then the earlier terminus is cut back."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    slow = _departure([(10, 1100), (11, 1200), (12, 1300)])
    fast = _departure([(12, 1250)], scheduled_date=1020)

    assembler.add(slow)
    assembler.add(fast)

    assert slow.terminus == CallAt(11)
    assert fast.terminus == CallAt(12)
    assert [c.station for c in slow.calling_at] == [10, 11, 12]


def test_smart_terminus_walks_back_over_several_stations() -> None:
    """Given a later departure reaching the last two stations sooner, when added, then the terminus moves back twice."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    slow = _departure([(10, 1100), (11, 1200), (12, 1300)])
    fast = _departure([(11, 1150), (12, 1250)], scheduled_date=1020)

    assembler.add(slow)
    assembler.add(fast)

    assert slow.terminus == CallAt(10)


def test_smart_terminus_keeps_faster_earlier_departure() -> None:
    """Given a later departure reaching the terminus after the earlier one, when added, then nothing changes."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    first = _departure([(10, 1100), (12, 1200)])
    second = _departure([(12, 1350)], scheduled_date=1020)

    assembler.add(first)
    assembler.add(second)

    assert first.terminus == CallAt(12)


def test_smart_terminus_disabled_leaves_termini() -> None:
    """Given smart terminus disabled, when an overtaking departure is added, then termini are unchanged."""
    assembler = DepartureAssembler(DepartureSettings())
    slow = _departure([(10, 1100), (11, 1200), (12, 1300)])

    assembler.add(slow)
    assembler.add(_departure([(12, 1250)], scheduled_date=1020))

    assert slow.terminus == CallAt(12)


def test_smart_terminus_never_empties_single_call() -> None:
    """Given an earlier departure with one call, when overtaken, then its terminus is kept."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    short = _departure([(12, 1300)])

    assembler.add(short)
    assembler.add(_departure([(12, 1250)], scheduled_date=1020))

    assert short.terminus == CallAt(12)


def test_smart_terminus_does_not_restore_shortened_terminus() -> None:
    """Given an already shortened terminus, when a third departure matches it, then it is not moved forward again."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    slow = _departure([(10, 1100), (11, 1200), (12, 1300)])

    assembler.add(slow)
    assembler.add(_departure([(11, 1150), (12, 1250)], scheduled_date=1020))
    assembler.add(_departure([(10, 1090)], scheduled_date=1040))

    assert slow.terminus == CallAt(10)


def test_smart_terminus_only_moves_back_over_many_additions() -> None:
    """Given a series of overtaking departures, when each is added, then no terminus moves further along its calls."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    added = [
        _departure([(10, 1100), (11, 1200), (12, 1300), (13, 1400)]),
        _departure([(13, 1350)], scheduled_date=1010),
        _departure([(10, 1090)], scheduled_date=1020),
        _departure([(12, 1250)], scheduled_date=1030),
        _departure([(13, 1300)], scheduled_date=1040),
        _departure([(11, 1150)], scheduled_date=1050),
    ]
    positions: list[int] = []

    for departure in added:
        assembler.add(departure)
        current = [d.calling_at.index(d.terminus) for d in assembler.departures]
        assert all(now <= before for now, before in zip(current, positions, strict=False))
        positions = current

    assert added[0].terminus == CallAt(10)


def test_late_departure_shows_arrival_lateness() -> None:
    """Given a late travelling departure, when added, then its wait time is taken off the lateness."""
    assembler = DepartureAssembler(DepartureSettings())
    late = _departure([(2, 1050)], lateness=30)

    assembler.add(late)

    assert late.lateness == 20


def test_arrived_departure_keeps_lateness() -> None:
    """Given a late departure already at the station, when added, then its lateness is unchanged."""
    assembler = DepartureAssembler(DepartureSettings())
    arrived = _departure([(2, 1050)], lateness=30, status=DepartureStatus.ARRIVED)

    assembler.add(arrived)

    assert arrived.lateness == 30


def test_arrivals_keep_lateness_and_termini() -> None:
    """Given arrivals, when added with smart terminus, then neither lateness nor origin change."""
    assembler = DepartureAssembler(DepartureSettings(smart_terminus=True))
    first = _departure(
        [(10, 1100), (12, 1300)], lateness=30, departure_type=DepartureType.ARRIVAL
    )

    assembler.add(first)
    assembler.add(_departure([(12, 1250)], departure_type=DepartureType.ARRIVAL))

    assert first.lateness == 30
    assert first.terminus == CallAt(12)
