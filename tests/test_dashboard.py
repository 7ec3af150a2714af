"""Dashboard test suite — stats, recent widgets, concurrent overview."""

from __future__ import annotations

from tests.conftest import ok

STATS = {
    "pendingApprovals": 4,
    "unreadNotifications": 2,
    "todayMeetings": 0,
    "totalEmployees": 120,
    "monthlyWorkflows": 31,
    "approvalRate": 87.5,
}


def _stub_widgets(backend, stats=STATS):
    backend.on("GET", "/api/dashboard/stats", ok(stats))
    backend.on("GET", "/api/dashboard/recent-workflows", ok([
        {"id": "t-1", "name": "Approve leave", "assignee": "u-1", "createTime": "2026-03-01"},
    ]))
    backend.on("GET", "/api/meeting-rooms", ok([{"id": 1, "name": "Orion", "capacity": 8}]))
    backend.on("GET", "/api/dashboard/today-meetings", ok([
        {"id": 10, "title": "Standup", "roomId": 1, "date": "2026-03-02",
         "startTime": "09:00", "endTime": "09:30"},
        {"id": 11, "title": "Retro", "roomId": 1, "date": "2026-03-02",
         "startTime": "16:00", "endTime": "17:00"},
    ]))
    backend.on("GET", "/api/dashboard/recent-notifications", ok([
        {"id": 1, "title": "Hello", "content": "", "type": "system", "isRead": False, "createdAt": ""},
    ]))


# ═════════════════════════════════════════════════════════════════════
# 1. OVERVIEW
# ═════════════════════════════════════════════════════════════════════


class TestDashboardOverview:

    async def test_overview_fetches_every_widget(self, client, backend, logged_in):
        _stub_widgets(backend)

        resp = await client.get("/api/v1/dashboard", params={"date": "2026-03-02"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["stats"]["pendingApprovals"] == 4
        assert body["recentWorkflows"][0]["name"] == "Approve leave"
        assert [m["roomName"] for m in body["todayMeetings"]] == ["Orion", "Orion"]
        assert body["recentNotifications"][0]["title"] == "Hello"
        assert backend.last("GET", "/api/dashboard/recent-workflows").url.params["limit"] == "5"
        assert backend.last("GET", "/api/dashboard/recent-notifications").url.params["limit"] == "3"

    async def test_zero_meeting_stat_filled_from_list(self, client, backend, logged_in):
        _stub_widgets(backend)
        resp = await client.get("/api/v1/dashboard", params={"date": "2026-03-02"})
        assert resp.json()["stats"]["todayMeetings"] == 2

    async def test_backend_meeting_stat_kept(self, client, backend, logged_in):
        _stub_widgets(backend, stats={**STATS, "todayMeetings": 7})
        resp = await client.get("/api/v1/dashboard", params={"date": "2026-03-02"})
        assert resp.json()["stats"]["todayMeetings"] == 7

    async def test_one_widget_failing_fails_the_page(self, client, backend, logged_in):
        _stub_widgets(backend)
        backend.on("GET", "/api/dashboard/recent-workflows", status=500, text="boom")

        resp = await client.get("/api/v1/dashboard")

        assert resp.status_code == 502
        assert resp.json()["errors"] == {"upstreamStatus": 500}


# ═════════════════════════════════════════════════════════════════════
# 2. SINGLE WIDGETS
# ═════════════════════════════════════════════════════════════════════


class TestDashboardWidgets:

    async def test_stats(self, client, backend, logged_in):
        backend.on("GET", "/api/dashboard/stats", ok(STATS, code=1))
        resp = await client.get("/api/v1/dashboard/stats")
        assert resp.json()["approvalRate"] == 87.5

    async def test_empty_stats_default_to_zero(self, client, backend, logged_in):
        backend.on("GET", "/api/dashboard/stats", ok(None))
        resp = await client.get("/api/v1/dashboard/stats")
        assert resp.json()["totalEmployees"] == 0

    async def test_recent_workflows_limit(self, client, backend, logged_in):
        _stub_widgets(backend)
        await client.get("/api/v1/dashboard/recent-workflows", params={"limit": 10})
        assert backend.last("GET", "/api/dashboard/recent-workflows").url.params["limit"] == "10"

    async def test_today_meetings(self, client, backend, logged_in):
        _stub_widgets(backend)
        resp = await client.get("/api/v1/dashboard/today-meetings", params={"date": "2026-03-02"})
        assert len(resp.json()) == 2

    async def test_recent_notifications(self, client, backend, logged_in):
        _stub_widgets(backend)
        resp = await client.get("/api/v1/dashboard/recent-notifications")
        assert resp.json()[0]["type"] == "system"

    async def test_null_stats_default_to_zero(self, client, backend, logged_in):
        backend.on("GET", "/api/dashboard/stats", ok({**STATS, "approvalRate": None, "totalEmployees": None}))

        resp = await client.get("/api/v1/dashboard/stats")

        assert resp.status_code == 200
        assert resp.json()["approvalRate"] == 0
        assert resp.json()["totalEmployees"] == 0
        assert resp.json()["pendingApprovals"] == 4
