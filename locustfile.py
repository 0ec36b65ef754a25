"""
Load profile for the scoring endpoint.

Run: locust -f locustfile.py --host http://localhost:8000
"""

import random

from locust import HttpUser, between, task

ANSWERS = [
    "We should have had air-gapped backups and applied patches immediately to prevent this ransomware incident",
    "The employee should verify the request through a second channel and the email domain was not authentic. "
    "Security awareness training on phishing and social engineering would help.",
    "ok",
    "Enable multi-factor authentication, use a password manager and unique credentials for every account.",
]


class QuizUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        self.scenarios = self.client.get("/api/scenarios").json()

    @task(3)
    def analyze(self):
        # random scenario + random answer per request
        scenario = random.choice(self.scenarios)
        self.client.post(
            "/api/analyze",
            json={"userResponse": random.choice(ANSWERS), "scenario": scenario},
        )

    @task(1)
    def next_scenario(self):
        self.client.get("/api/scenarios/random")
