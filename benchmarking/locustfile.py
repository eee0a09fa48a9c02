"""Locust load testing script for Meeting Summarizer."""

import random

from locust import HttpUser, between, task

SAMPLE_TRANSCRIPTS = [
    "Alice opened the quarterly planning meeting. The team reviewed the roadmap "
    "for the mobile release. Bob will finish the onboarding flow by Friday. "
    "We need to hire another designer before the launch. Carol should update "
    "the budget spreadsheet and share it with finance.",
    "The incident review covered the outage on Tuesday. The database failover "
    "took longer than expected. We must add alerting for replication lag. "
    "Dave is going to write the postmortem document. The team plan to run a "
    "failover drill next month.",
]

SAMPLE_PROMPTS = [
    None,
    "Summarize in bullet points",
    "List the action items",
    "Give a short executive summary",
]


class MeetingSummarizerUser(HttpUser):
    """Simulated user for load testing the summarizer API."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        self.summary_ids: list[str] = []

    @task(3)
    def generate_summary(self) -> None:
        """Generate a summary - most common operation."""
        payload = {
            "text": random.choice(SAMPLE_TRANSCRIPTS),
            "customPrompt": random.choice(SAMPLE_PROMPTS),
        }
        with self.client.post("/api/v1/summarize", json=payload, catch_response=True) as r:
            if r.status_code == 200:
                self.summary_ids.append(r.json()["id"])

    @task(2)
    def list_summaries(self) -> None:
        """List all stored summaries."""
        self.client.get("/api/v1/summaries")

    @task(1)
    def fetch_and_edit_summary(self) -> None:
        """Fetch one summary and save a revision of it."""
        if not self.summary_ids:
            return
        summary_id = random.choice(self.summary_ids)
        self.client.get(f"/api/v1/summaries/{summary_id}", name="/api/v1/summaries/[id]")
        self.client.put(
            f"/api/v1/summaries/{summary_id}",
            json={"editedSummary": "Revised during load test."},
            name="/api/v1/summaries/[id]",
        )
