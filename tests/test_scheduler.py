import pytest
from montyhall.core.scheduler import ImmediateScheduler, ManualScheduler


class TestManualScheduler:

    def test_runs_only_when_due(self):
        scheduler = ManualScheduler()
        fired = []
        scheduler.schedule(0.9, lambda: fired.append("reveal"))

        assert scheduler.advance(0.5) == 0
        assert fired == []
        assert scheduler.advance(0.4) == 1
        assert fired == ["reveal"]

    def test_cancelled_call_never_fires(self):
        scheduler = ManualScheduler()
        fired = []
        call = scheduler.schedule(1.0, lambda: fired.append(1))
        call.cancel()
        call.cancel()

        assert scheduler.run_pending() == 0
        assert fired == []
        assert not call.pending

    def test_fires_in_due_order(self):
        scheduler = ManualScheduler()
        fired = []
        scheduler.schedule(2.0, lambda: fired.append("late"))
        scheduler.schedule(1.0, lambda: fired.append("early"))

        assert len(scheduler.pending) == 2
        assert scheduler.run_pending() == 2
        assert fired == ["early", "late"]
        assert scheduler.now == 2.0

    def test_rejects_negative_times(self):
        scheduler = ManualScheduler()
        with pytest.raises(ValueError):
            scheduler.schedule(-1, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-1)


class TestImmediateScheduler:

    def test_fires_synchronously(self):
        fired = []
        call = ImmediateScheduler().schedule(5.0, lambda: fired.append(1))
        assert fired == [1]
        assert call.fired
        call.cancel()
        assert not call.cancelled
