import random
import uuid
from datetime import date, timedelta

from locust import HttpUser, between, task


class RenterUser(HttpUser):
    # Wait between 1 and 3 seconds between tasks
    wait_time = between(1, 3)

    def on_start(self):
        """
        Called when a Locust user starts.
        Signs up a throwaway account and keeps its bearer token.
        """
        response = self.client.post(
            "/api/signup",
            json={"username": f"load-{uuid.uuid4().hex[:12]}", "password": "load-test"},
            name="/api/signup",
        )
        self.headers = {"Authorization": f"Bearer {response.json()['token']}"}
        self.reservation_ids: list[int] = []

    @task(3)
    def browse_cars(self):
        self.client.get("/api/cars?type=All Types", name="/api/cars")

    @task(5)
    def book_car(self):
        """
        Many users compete for a handful of cars over a short window, so a
        large share of requests is expected to end in 409 conflicts.
        """
        start = date.today() + timedelta(days=random.randint(1, 30))
        payload = {
            "carId": random.randint(1, 8),
            "startDate": start.isoformat(),
            "endDate": (start + timedelta(days=random.randint(1, 4))).isoformat(),
            "gps": random.random() < 0.3,
        }
        with self.client.post(
            "/api/reservations",
            json=payload,
            headers=self.headers,
            name="/api/reservations",
            catch_response=True,
        ) as response:
            if response.status_code == 201:
                self.reservation_ids.append(response.json()["id"])
                response.success()
            elif response.status_code == 409:
                response.success()
            else:
                response.failure(f"unexpected status {response.status_code}")

    @task(1)
    def cancel_booking(self):
        if not self.reservation_ids:
            return
        reservation_id = self.reservation_ids.pop()
        self.client.delete(
            f"/api/reservations/{reservation_id}",
            headers=self.headers,
            name="/api/reservations/[id]",
        )
