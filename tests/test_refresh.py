"""Tests for the refresh coordinator."""

from __future__ import annotations

from sticky_widget.core.refresh import RefreshCoordinator


def _coordinator(instance_ids, calls):
    def resolve():
        calls.append("resolve")
        return instance_ids

    return RefreshCoordinator(
        resolve_instances=resolve,
        refresh_instance=lambda i: calls.append(f"refresh:{i}"),
        notify_data_changed=lambda ids: calls.append(("changed", list(ids))),
    )


class TestRefreshCoordinator:
    def test_refresh_before_data_changed(self):
        calls = []
        _coordinator([1, 2], calls).on_update()
        assert calls == ["resolve", "refresh:1", "refresh:2", ("changed", [1, 2])]

    def test_returns_refreshed_ids(self):
        assert _coordinator([4], []).on_update() == [4]

    def test_instances_resolved_per_update(self):
        ids = [1]
        calls = []
        coordinator = _coordinator(ids, calls)
        coordinator.on_update()
        ids.append(2)
        coordinator.on_update()
        assert calls[-1] == ("changed", [1, 2])

    def test_no_instances(self):
        calls = []
        assert _coordinator([], calls).on_update() == []
        assert calls == ["resolve", ("changed", [])]

    def test_on_enabled_is_an_update(self):
        calls = []
        _coordinator([3], calls).on_enabled()
        assert calls == ["resolve", "refresh:3", ("changed", [3])]

    def test_accepts_generators(self):
        calls = []
        coordinator = RefreshCoordinator(
            resolve_instances=lambda: (i for i in (1, 2)),
            refresh_instance=lambda i: calls.append(i),
            notify_data_changed=lambda ids: calls.append(tuple(ids)),
        )
        coordinator.on_update()
        assert calls == [1, 2, (1, 2)]
