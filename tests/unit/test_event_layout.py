# File: tests/unit/test_event_layout.py
"""
Unit tests for the lane layout engine.
"""

import random

import pytest

from calendar_lanes.models import Event, InvalidDurationError, MalformedTimeError
from calendar_lanes.processors.event_layout import event_interval, layout_day_events


def _event(time, duration=0, title=None):
    return Event(date="2026-10-12", time=time, title=title or time, duration=duration)


def _brute_force_conflict(layout):
    events = layout.ordered_events
    return any(a.overlaps_with(b) for i, a in enumerate(events) for b in events[i + 1:])


# ==================== Interval Tests ====================

class TestEventInterval:
    """Tests for event_interval."""
    
    def test_interval(self):
        """Test start and end minutes."""
        assert event_interval(_event("09:30", 45)) == (570, 615)
    
    def test_zero_and_missing_duration(self):
        """Test zero-length intervals."""
        assert event_interval(_event("10:00", 0)) == (600, 600)
        assert event_interval(_event("10:00", None)) == (600, 600)
    
    def test_accepts_raw_record(self):
        """Test that a raw mapping is accepted."""
        assert event_interval({'date': '2026-10-12', 'time': '08:15', 'duration': '15'}) == (495, 510)
    
    def test_negative_duration_raises(self):
        """Test that negative durations are rejected, not clamped."""
        with pytest.raises(InvalidDurationError) as exc_info:
            event_interval(_event("10:00", -15, title="Backwards"))
        
        assert exc_info.value.duration == -15
        assert exc_info.value.title == "Backwards"
    
    @pytest.mark.parametrize("duration", [1.5, "30", True])
    def test_non_integer_duration_on_event_raises(self, duration):
        """Test that an Event built with a non-integer duration is rejected."""
        with pytest.raises(InvalidDurationError):
            event_interval(_event("10:00", duration))


# ==================== Layout Scenario Tests ====================

class TestLayoutDayEvents:
    """Tests for layout_day_events."""
    
    def test_overlap_opens_second_lane(self, overlapping_events):
        """Test 09:00+60, 09:30+30, 10:30+15 -> lanes 0, 1, 0 with a conflict."""
        layout = layout_day_events(overlapping_events)
        
        assert [e.title for e in layout.ordered_events] == ["Planning", "Vendor call", "1:1"]
        assert [e.lane for e in layout.ordered_events] == [0, 1, 0]
        assert layout.lane_count == 2
        assert layout.has_conflict is True
    
    def test_back_to_back_share_a_lane(self, back_to_back_events):
        """Test that an event ending when the next starts is not a conflict."""
        layout = layout_day_events(back_to_back_events)
        
        assert [e.lane for e in layout.ordered_events] == [0, 0]
        assert layout.lane_count == 1
        assert layout.has_conflict is False
    
    def test_empty_day(self):
        """Test a date without events."""
        layout = layout_day_events([])
        
        assert layout.ordered_events == ()
        assert layout.lane_count == 0
        assert layout.has_conflict is False
    
    def test_single_event(self):
        """Test one event gets lane 0 and no conflict."""
        layout = layout_day_events([_event("12:00", 30)])
        
        assert layout.ordered_events[0].lane == 0
        assert layout.lane_count == 1
        assert layout.has_conflict is False
    
    def test_derived_fields(self):
        """Test start, end and duration on the laid out events."""
        layout = layout_day_events([_event("18:00")])
        event = layout.ordered_events[0]
        
        assert (event.start_minute, event.end_minute, event.duration) == (1080, 1080, 0)
    
    def test_sorted_by_start_time(self):
        """Test that input order does not decide display order."""
        layout = layout_day_events([_event("14:00", 30), _event("08:00", 30), _event("11:00", 30)])
        
        assert [e.time for e in layout.ordered_events] == ["08:00", "11:00", "14:00"]
    
    def test_sort_is_stable_for_equal_times(self):
        """Test that events at the same time keep their input order."""
        events = [_event("09:00", 30, "first"), _event("08:00", 10, "early"),
                  _event("09:00", 30, "second"), _event("09:00", 5, "third")]
        
        layout = layout_day_events(events)
        
        assert [e.title for e in layout.ordered_events] == ["early", "first", "second", "third"]
        assert [e.lane for e in layout.ordered_events] == [0, 0, 1, 2]
    
    def test_first_compatible_lane_is_used(self):
        """Test that the earliest-created free lane wins over later ones."""
        events = [_event("09:00", 60, "A"), _event("09:10", 20, "B"),
                  _event("09:20", 60, "C"), _event("09:40", 10, "D")]
        
        layout = layout_day_events(events)
        
        # A: lane 0, B: lane 1, C: lane 2, D fits lane 1 (B ended 09:30)
        assert [e.lane for e in layout.ordered_events] == [0, 1, 2, 1]
        assert layout.lane_count == 3
    
    def test_conflict_flag_stays_set(self):
        """Test that a later clean placement does not clear the flag."""
        events = [_event("09:00", 60), _event("09:30", 10), _event("15:00", 30), _event("16:00", 30)]
        
        layout = layout_day_events(events)
        
        assert layout.has_conflict is True
        assert [e.lane for e in layout.ordered_events] == [0, 1, 0, 0]
    
    def test_zero_duration_at_end_of_other_event(self):
        """Test a point event at another event's end instant does not conflict."""
        layout = layout_day_events([_event("09:00", 60), _event("10:00", 0)])
        
        assert [e.lane for e in layout.ordered_events] == [0, 0]
        assert layout.has_conflict is False
    
    def test_zero_duration_inside_other_event(self):
        """Test a point event strictly inside another event conflicts."""
        layout = layout_day_events([_event("09:30", 60), _event("10:00", 0)])
        
        assert [e.lane for e in layout.ordered_events] == [0, 1]
        assert layout.has_conflict is True
    
    def test_zero_duration_after_same_start_event(self):
        """Test a point event listed after a same-start event is rejected from its lane."""
        layout = layout_day_events([_event("10:00", 60, "Meeting"), _event("10:00", 0, "Reminder")])
        
        # Lane 0 ends at 11:00, after the reminder's 10:00 start
        assert [e.lane for e in layout.ordered_events] == [0, 1]
        assert layout.has_conflict is True
    
    def test_two_zero_duration_events_same_instant(self):
        """Test point events at the same instant share a lane."""
        layout = layout_day_events([_event("10:00"), _event("10:00")])
        
        assert layout.lane_count == 1
        assert layout.has_conflict is False
    
    def test_accepts_raw_records(self):
        """Test that raw mappings are laid out like events."""
        layout = layout_day_events([
            {'date': '2026-10-12', 'time': '09:00', 'title': 'A', 'duration': 60},
            {'date': '2026-10-12', 'time': '09:30', 'title': 'B'},
        ])
        
        assert [e.lane for e in layout.ordered_events] == [0, 1]
        assert layout.ordered_events[1].duration == 0
    
    def test_idempotent(self, overlapping_events):
        """Test that repeated calls give identical output."""
        assert layout_day_events(overlapping_events) == layout_day_events(overlapping_events)
    
    def test_input_is_not_modified(self, overlapping_events):
        """Test that the caller's list keeps its order."""
        reversed_events = list(reversed(overlapping_events))
        snapshot = list(reversed_events)
        
        layout_day_events(reversed_events)
        
        assert reversed_events == snapshot


# ==================== Error Tests ====================

class TestLayoutErrors:
    """Tests for fail-fast validation."""
    
    def test_malformed_time_raises(self):
        """Test that 25:61 raises MalformedTimeError."""
        with pytest.raises(MalformedTimeError):
            layout_day_events([_event("09:00", 30), _event("25:61", 30)])
    
    def test_missing_time_raises(self):
        """Test that a missing time is not treated as midnight."""
        with pytest.raises(MalformedTimeError):
            layout_day_events([{'date': '2026-10-12', 'title': 'No time', 'duration': 30}])
    
    def test_negative_duration_raises(self):
        """Test that a negative duration fails the layout."""
        with pytest.raises(InvalidDurationError):
            layout_day_events([_event("09:00", 30), _event("10:00", -30)])
    
    def test_validation_happens_before_placement(self):
        """Test that a bad event anywhere in the input fails before any work."""
        def events():
            yield _event("09:00", 30)
            yield _event("bad", 30)
        
        with pytest.raises(MalformedTimeError) as exc_info:
            layout_day_events(events())
        
        assert exc_info.value.time_value == "bad"


# ==================== Property Tests ====================

class TestLayoutProperties:
    """Randomized checks of the layout invariants for positive durations."""
    
    @pytest.mark.parametrize("seed", range(25))
    def test_invariants(self, seed):
        """Test lane validity, minimality, stability and the conflict flag."""
        rng = random.Random(seed)
        events = [
            _event(f"{rng.randint(8, 17):02d}:{rng.choice([0, 15, 30, 45]):02d}",
                   rng.choice([15, 30, 45, 60, 90]), title=f"e{i}")
            for i in range(rng.randint(1, 12))
        ]
        
        layout = layout_day_events(events)
        ordered = layout.ordered_events
        
        # No two events in one lane overlap
        for lane in range(layout.lane_count):
            in_lane = [e for e in ordered if e.lane == lane]
            for i, a in enumerate(in_lane):
                for b in in_lane[i + 1:]:
                    assert not a.overlaps_with(b)
        
        # Lane count equals maximum number of simultaneous events
        max_depth = max(
            sum(1 for e in ordered if e.start_minute <= point < e.end_minute)
            for point in [e.start_minute for e in ordered]
        )
        assert layout.lane_count == max(1, max_depth)
        
        # Stable ordering by start minute
        input_index = {e.title: i for i, e in enumerate(events)}
        keys = [(e.start_minute, input_index[e.title]) for e in ordered]
        assert keys == sorted(keys)
        
        # Flag set exactly when some pair of events overlaps
        assert layout.has_conflict is _brute_force_conflict(layout)
