"""Locust load test for the visit ingestion and analytics APIs.

Usage:
    locust -f backend/tests/locustfile.py --host http://localhost:8000
"""

import random
from datetime import datetime, timedelta, timezone

from locust import HttpUser, between, task

PAGES = [
    "/",
    "/produtos",
    "/favoritos",
    "/perfil",
    "/auth",
    "/loja/1",
    "/loja/2",
    "/admin",
    "/admin/logs",
    "/sobre",
]

DEVICES = ["desktop", "mobile", "tablet", None]


class DashboardUser(HttpUser):
    """Simulates storefront page views alongside an admin watching the dashboard."""

    wait_time = between(0.5, 2)

    @task(10)
    def record_visit(self):
        """Record a single random page view."""
        visit = {"path": random.choice(PAGES)}
        if random.random() < 0.8:
            visit["sessionDuration"] = random.randint(1, 900)
        device = random.choice(DEVICES)
        if device:
            visit["deviceType"] = device

        self.client.post("/api/v1/visits/", json=visit, name="/api/v1/visits/")

    @task(3)
    def query_summary(self):
        """Query the dashboard summary."""
        days = random.choice([7, 30, 90])
        self.client.get(
            f"/api/v1/analytics/summary?days={days}",
            name="/api/v1/analytics/summary",
        )

    @task(2)
    def query_popular_pages(self):
        self.client.get("/api/v1/analytics/popular-pages")

    @task(1)
    def query_visits_by_day(self):
        """Query an explicit range ending now."""
        end = datetime.now(timezone.utc)
        start = end - timedelta(days=random.choice([7, 14, 30]))
        self.client.get(
            "/api/v1/analytics/visits",
            params={"start": start.isoformat(), "end": end.isoformat()},
            name="/api/v1/analytics/visits",
        )

    @task(1)
    def query_counts(self):
        self.client.get(
            "/api/v1/analytics/visits/count",
            params={"path": random.choice(PAGES)},
            name="/api/v1/analytics/visits/count",
        )
