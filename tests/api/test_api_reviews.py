"""
Review moderation and admin analytics
"""
from fastapi.testclient import TestClient

NEW_REVIEW = {"customerName": "Anita Desai", "rating": 3, "comment": "Decent stay, slow check-in."}


class TestReviews:
    def test_submitted_review_waits_for_approval(self, client: TestClient):
        before = client.get("/reviews/").json()

        created = client.post("/reviews/", json=NEW_REVIEW)
        assert created.status_code == 200
        assert created.json()["approved"] is False

        after = client.get("/reviews/").json()
        assert after == before
        assert after["total"] == 2

    def test_rating_out_of_range(self, client: TestClient):
        assert client.post("/reviews/", json={**NEW_REVIEW, "rating": 6}).status_code == 422

    def test_approve_publishes_review(self, client: TestClient, admin_token):
        review_id = client.post("/reviews/", json=NEW_REVIEW).json()["id"]

        pending = client.get("/reviews/admin", params={"token": admin_token, "status": "pending"}).json()
        assert [r["id"] for r in pending] == [review_id]

        approved = client.post(f"/reviews/{review_id}/approve", params={"token": admin_token})
        assert approved.status_code == 200

        public = client.get("/reviews/").json()
        assert public["total"] == 3
        assert review_id in [r["id"] for r in public["reviews"]]

    def test_admin_status_filter_is_checked(self, client: TestClient, admin_token):
        response = client.get("/reviews/admin", params={"token": admin_token, "status": "spam"})
        assert response.status_code == 400

    def test_delete_review(self, client: TestClient, admin_token):
        review_id = client.post("/reviews/", json=NEW_REVIEW).json()["id"]

        response = client.delete(f"/reviews/{review_id}", params={"token": admin_token, "confirm": True})
        assert response.status_code == 200
        assert client.delete(f"/reviews/{review_id}", params={"token": admin_token, "confirm": True}).status_code == 404


class TestAnalytics:
    def test_dashboard(self, client: TestClient, admin_token):
        client.post("/bookings/checkout", json={
            "customerName": "Rahul Verma",
            "email": "rahul.verma@gmail.com",
            "phone": "+91 91234 56789",
            "type": "hall",
            "itemId": "2",
            "checkIn": "2024-04-10",
            "guests": 80,
        })

        response = client.get("/admin-analytics/dashboard", params={"token": admin_token})

        assert response.status_code == 200
        stats = response.json()
        assert stats["total_rooms"] == 3
        assert stats["total_halls"] == 2
        assert stats["total_bookings"] == 1
        assert stats["confirmed_bookings"] == 1
        assert stats["total_revenue"] == 15000
        assert stats["room_types"] == {"AC": 2, "Non-AC": 1}
        assert stats["recent_bookings"][0]["item_name"] == "Crystal Hall"

    def test_review_stats(self, client: TestClient, admin_token):
        client.post("/reviews/", json=NEW_REVIEW)

        stats = client.get("/admin-analytics/reviews", params={"token": admin_token}).json()
        assert stats["total"] == 3
        assert stats["pending"] == 1

    def test_analytics_require_admin(self, client: TestClient):
        assert client.get("/admin-analytics/bookings", params={"token": "x"}).status_code == 401
