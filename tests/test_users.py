"""Users test suite — directory mapping, local filters, writes, current user."""

from __future__ import annotations

from console.common.constants import UserStatus
from console.users.schemas import BackendUser, BackendUserInfo, User
from console.users.service import filter_users, map_account, map_user_info
from tests.conftest import ok, paged

ROWS = [
    {"id": 1, "firstName": "Ada", "lastName": "Lovelace", "deptId": 2, "roleId": 3,
     "deptName": "Engineering", "roleName": "Engineer"},
    {"id": 2, "firstName": "Grace", "lastName": "Hopper", "deptId": 2, "roleId": 1,
     "deptName": "Engineering", "roleName": "Admin"},
]


# ═════════════════════════════════════════════════════════════════════
# 1. MAPPING
# ═════════════════════════════════════════════════════════════════════


class TestUserMapping:

    def test_directory_row(self):
        user = map_user_info(BackendUserInfo.model_validate(ROWS[0]))
        assert user.id == "1"
        assert user.name == "AdaLovelace"
        assert user.avatar == "AD"
        assert user.department == "2"
        assert user.role == "3"
        assert user.role_name == "Engineer"

    def test_nameless_row(self):
        user = map_user_info(BackendUserInfo.model_validate({"id": 3}))
        assert user.name == "Unknown user"
        assert user.avatar == "UN"

    def test_account_prefers_display_name(self):
        user = map_account(BackendUser.model_validate({"id": "9", "displayName": "Root", "email": "r@x.io"}))
        assert user.name == "Root"
        assert user.email == "r@x.io"

    def test_account_falls_back_to_email_local_part(self):
        user = map_account(BackendUser.model_validate({"id": "9", "email": "ops@x.io"}))
        assert user.name == "ops"

    def test_missing_account_is_placeholder(self):
        user = map_account(None)
        assert (user.name, user.avatar) == ("Unknown user", "??")


class TestFilterUsers:

    def _users(self):
        return [
            User(id="1", name="Ada", avatar="AD", email="ada@x.io", phone="555-1"),
            User(id="2", name="Grace", avatar="GR", email="grace@x.io", status=UserStatus.inactive),
        ]

    def test_search_matches_name_email_or_phone(self):
        assert [u.id for u in filter_users(self._users(), search="555")] == ["1"]
        assert [u.id for u in filter_users(self._users(), search="grace@")] == ["2"]

    def test_status(self):
        assert [u.id for u in filter_users(self._users(), status=UserStatus.inactive)] == ["2"]

    def test_no_filters(self):
        assert len(filter_users(self._users())) == 2


# ═════════════════════════════════════════════════════════════════════
# 2. ENDPOINTS
# ═════════════════════════════════════════════════════════════════════


class TestUserEndpoints:

    async def test_list_pages_through_backend(self, client, backend, logged_in):
        backend.on("GET", "/api/users/list", ok(paged(ROWS, total=42, size=2, current=3)))

        resp = await client.get("/api/v1/users", params={"department": "2", "page": 3, "limit": 2})

        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 42
        assert body["page"] == 3
        assert body["pageSize"] == 2
        assert [u["name"] for u in body["users"]] == ["AdaLovelace", "GraceHopper"]
        params = backend.last("GET", "/api/users/list").url.params
        assert params["department"] == "2"
        assert params["page"] == "3"
        assert params["limit"] == "2"

    async def test_search_applied_locally(self, client, backend, logged_in):
        backend.on("GET", "/api/users/list", ok(paged(ROWS)))

        resp = await client.get("/api/v1/users", params={"search": "Grace"})

        assert [u["id"] for u in resp.json()["users"]] == ["2"]
        assert "search" not in backend.last("GET", "/api/users/list").url.params

    async def test_create(self, client, backend, logged_in):
        backend.on("POST", "/api/users/add", ok({"id": "10"}))

        resp = await client.post("/api/v1/users", json={
            "firstName": "Alan", "lastName": "Turing", "email": "alan@x.io",
            "department": "2", "role": "3",
        })

        assert resp.status_code == 201
        sent = backend.json_body(backend.last("POST", "/api/users/add"))
        assert sent == {
            "firstName": "Alan", "lastName": "Turing", "email": "alan@x.io",
            "department": "2", "role": "3",
        }

    async def test_create_rejects_bad_email(self, client, backend, logged_in):
        resp = await client.post("/api/v1/users", json={
            "firstName": "Alan", "email": "not-an-email", "department": "2", "role": "3",
        })
        assert resp.status_code == 422

    async def test_update_moves_user(self, client, backend, logged_in):
        backend.on("PUT", "/api/users/update", ok(None))

        resp = await client.put("/api/v1/users", json={
            "id": "1", "oldDept": "2", "oldRole": "3", "newDept": "4", "newRole": "3",
        })

        assert resp.status_code == 200
        assert backend.json_body(backend.last("PUT", "/api/users/update"))["newDept"] == "4"

    async def test_delete(self, client, backend, logged_in):
        backend.on("DELETE", "/api/users/delete/1", ok(None))
        resp = await client.delete("/api/v1/users/1")
        assert resp.status_code == 200
        assert len(backend.calls("DELETE", "/api/users/delete/1")) == 1
