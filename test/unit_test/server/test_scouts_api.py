"""API tests for the scout endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BASE = "/api/v1/scouts"


class TestScoutEndpoints:
    """Test suite for /api/v1/scouts."""

    async def test_create_scout(self, client: AsyncClient, scout_payload, group):
        payload = scout_payload(group_ids=[group["id"]])
        payload["contacts"].append(
            {"name": "Paul Muster", "phone_number": "+49 171 7654321", "email": "paul@example.org", "relationship": ""}
        )
        response = await client.post(BASE, json=payload)
        assert response.status_code == 201
        body = response.json()
        assert body["version"] == 0
        assert [c["name"] for c in body["contacts"]] == ["Anna Muster", "Paul Muster"]
        assert body["groups"] == [group]

    async def test_create_scout_defaults_last_updated(self, client: AsyncClient, scout_payload):
        payload = scout_payload()
        del payload["last_updated"]
        response = await client.post(BASE, json=payload)
        assert response.status_code == 201
        assert response.json()["last_updated"]

    async def test_create_scout_unknown_group(self, client: AsyncClient, scout_payload):
        response = await client.post(BASE, json=scout_payload(group_ids=[77]))
        assert response.status_code == 404
        assert response.json()["detail"] == "Group with id 77 does not exist"

    async def test_create_scout_without_contacts(self, client: AsyncClient, scout_payload):
        response = await client.post(BASE, json=scout_payload(contacts=[]))
        assert response.status_code == 422

    async def test_create_scout_invalid_contact_email(self, client: AsyncClient, scout_payload):
        contact = {"name": "A", "phone_number": "1", "email": "nope", "relationship": ""}
        response = await client.post(BASE, json=scout_payload(contacts=[contact]))
        assert response.status_code == 422

    async def test_create_scout_blank_name(self, client: AsyncClient, scout_payload):
        response = await client.post(BASE, json=scout_payload(name="   "))
        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "InvalidEntityError"
        assert body["detail"].startswith("Invalid Scout: name:")
        assert [e["loc"] for e in body["errors"]] == [["name"]]
        assert "must not be blank" in body["errors"][0]["msg"]

    async def test_list_and_filter_by_name(self, client: AsyncClient, scout_payload):
        await client.post(BASE, json=scout_payload(name="Lena"))
        await client.post(BASE, json=scout_payload(name="Tom"))
        assert len((await client.get(BASE)).json()) == 2
        response = await client.get(BASE, params={"name": "Lena"})
        assert [s["name"] for s in response.json()] == ["Lena"]

    async def test_get_scout(self, client: AsyncClient, scout):
        response = await client.get(f"{BASE}/{scout['id']}")
        assert response.status_code == 200
        assert response.json() == scout

    async def test_get_missing_scout(self, client: AsyncClient):
        assert (await client.get(f"{BASE}/404")).status_code == 404

    async def test_update_scout_replaces_contacts_and_groups(self, client: AsyncClient, scout, scout_payload, group):
        contact = {"name": "Oma", "phone_number": "555", "email": "oma@example.org", "relationship": "grandmother"}
        payload = scout_payload(contacts=[contact], group_ids=[group["id"]], version=scout["version"])
        response = await client.put(f"{BASE}/{scout['id']}", json=payload)
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == 1
        assert [c["name"] for c in body["contacts"]] == ["Oma"]
        assert [g["id"] for g in body["groups"]] == [group["id"]]

    async def test_update_scout_stale_version(self, client: AsyncClient, scout, scout_payload):
        await client.put(f"{BASE}/{scout['id']}", json=scout_payload(version=0))
        response = await client.put(f"{BASE}/{scout['id']}", json=scout_payload(version=0))
        assert response.status_code == 409

    async def test_update_missing_scout(self, client: AsyncClient, scout_payload):
        response = await client.put(f"{BASE}/31", json=scout_payload(version=0))
        assert response.status_code == 404
        assert response.json()["detail"] == "Scout with id 31 does not exist"

    async def test_delete_scout(self, client: AsyncClient, scout):
        assert (await client.delete(f"{BASE}/{scout['id']}")).status_code == 204
        assert (await client.get(f"{BASE}/{scout['id']}")).status_code == 404

    async def test_registrations_of_scout(self, client: AsyncClient, scout, event):
        await client.post("/api/v1/registrations", json={"scout_id": scout["id"], "event_id": event["id"]})
        response = await client.get(f"{BASE}/{scout['id']}/registrations")
        assert response.status_code == 200
        assert [r["event_id"] for r in response.json()] == [event["id"]]

    async def test_registrations_of_missing_scout(self, client: AsyncClient):
        assert (await client.get(f"{BASE}/12/registrations")).status_code == 404
