"""
Public catalog and admin CRUD endpoints for rooms, halls and settings
"""
from fastapi.testclient import TestClient

NEW_HALL = {
    "name": "Rooftop Terrace",
    "capacity": 80,
    "price": 12000,
    "amenities": ["Open Air", "Lighting"],
    "description": "Terrace venue for evening parties.",
}


class TestPublicCatalog:
    def test_list_rooms_camel_case(self, client: TestClient):
        response = client.get("/rooms/")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 3
        assert data[0]["createdAt"].startswith("2024-01-01")
        assert "created_at" not in data[0]

    def test_filter_rooms(self, client: TestClient):
        response = client.get("/rooms/", params={"type": "Non-AC"})
        assert [r["name"] for r in response.json()] == ["Economy Non-AC Room"]

        assert client.get("/rooms/", params={"price": "cheap"}).status_code == 400

    def test_room_details(self, client: TestClient):
        assert client.get("/rooms/1").json()["name"] == "Deluxe AC Suite"
        assert client.get("/rooms/999").status_code == 404

    def test_filter_halls(self, client: TestClient):
        response = client.get("/halls/", params={"search": "ballroom"})
        assert [h["name"] for h in response.json()] == ["Grand Ballroom"]

    def test_settings_are_public(self, client: TestClient):
        response = client.get("/settings/")
        assert response.status_code == 200
        assert response.json()["checkInTime"] == "15:00"


class TestAdminCatalog:
    def test_create_requires_token(self, client: TestClient):
        response = client.post("/halls/", params={"token": "garbage"}, json=NEW_HALL)
        assert response.status_code == 401

    def test_create_update_delete_hall(self, client: TestClient, admin_token):
        created = client.post("/halls/", params={"token": admin_token}, json=NEW_HALL)
        assert created.status_code == 200
        hall = created.json()
        assert hall["createdAt"] == hall["updatedAt"]

        updated = client.put(f"/halls/{hall['id']}", params={"token": admin_token}, json={"price": 13000})
        assert updated.status_code == 200
        assert updated.json()["price"] == 13000
        assert updated.json()["name"] == "Rooftop Terrace"

        unconfirmed = client.delete(f"/halls/{hall['id']}", params={"token": admin_token})
        assert unconfirmed.status_code == 400

        deleted = client.delete(f"/halls/{hall['id']}", params={"token": admin_token, "confirm": True})
        assert deleted.status_code == 200
        assert client.get(f"/halls/{hall['id']}").status_code == 404

    def test_invalid_room_is_rejected(self, client: TestClient, admin_token):
        response = client.post(
            "/rooms/",
            params={"token": admin_token},
            json={"name": "Broken", "type": "AC", "price": -10, "capacity": 2},
        )
        assert response.status_code == 422

    def test_invalid_patch_maps_to_400(self, client: TestClient, admin_token):
        response = client.put("/rooms/1", params={"token": admin_token}, json={"capacity": -1})
        assert response.status_code == 400

    def test_update_unknown_room(self, client: TestClient, admin_token):
        response = client.put("/rooms/404", params={"token": admin_token}, json={"price": 1})
        assert response.status_code == 404

    def test_update_settings(self, client: TestClient, admin_token):
        response = client.put("/settings/", params={"token": admin_token}, json={"taxRate": 12})
        assert response.status_code == 200
        assert response.json()["taxRate"] == 12
        assert response.json()["hotelName"] == "Hotel Infinity"
