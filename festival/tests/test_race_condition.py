"""
Concurrency checks for booth registration and congestion updates.

This script:
1. Creates an event
2. Sends 20 concurrent booth registrations
3. Verifies every booth landed in the event exactly once
4. Sends concurrent congestion updates and checks the final level is valid
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from festival.main import app
from festival.stores.memory import FestivalStore, get_store
from festival.tests.conftest import create_event


def register(client: TestClient, admin_id: str, n: int) -> tuple[int, dict | None]:
    """Try to register a booth. Returns (status_code, response_data or None)."""
    response = client.post(
        f"/api/events/{admin_id}/booths",
        json={"boothName": f"Booth {n}", "location": f"Row {n % 4}"},
    )
    if response.status_code == 201:
        return (response.status_code, response.json())
    return (response.status_code, None)


def set_level(client: TestClient, booth_id: str, level: int) -> int:
    response = client.put(f"/api/booths/{booth_id}", json={"congestion": level})
    return response.status_code


@pytest.mark.parametrize("store_fixture", ["store", "redis_store"])
def test_concurrent_registrations(request, store_fixture):
    store: FestivalStore = request.getfixturevalue(store_fixture)
    app.dependency_overrides[get_store] = lambda: store
    num_requests = 20

    try:
        with TestClient(app) as client:
            event = create_event(client, "Race Test Festival")

            with ThreadPoolExecutor(max_workers=num_requests) as executor:
                futures = [
                    executor.submit(register, client, event["adminId"], n)
                    for n in range(num_requests)
                ]
                results = [f.result() for f in futures]

            successful = [data for status, data in results if status == 201]
            assert len(successful) == num_requests

            view = client.get(f"/api/manage/{event['adminId']}").json()
    finally:
        app.dependency_overrides.clear()

    listed = [b["id"] for b in view["booths"]]
    assert len(listed) == num_requests
    assert set(listed) == {b["id"] for b in successful}
    assert len(store.booths) == num_requests


def test_concurrent_congestion_updates(client: TestClient, store: FestivalStore):
    event = create_event(client)
    booth = client.post(
        f"/api/events/{event['adminId']}/booths",
        json={"boothName": "Takoyaki", "location": "Gate A"},
    ).json()

    levels = [1, 2, 3, 0, 4] * 6
    with ThreadPoolExecutor(max_workers=10) as executor:
        statuses = list(executor.map(lambda level: set_level(client, booth["id"], level), levels))

    assert statuses.count(200) == 18
    assert statuses.count(400) == 12
    assert store.booths.get(booth["id"]).congestion in {1, 2, 3}
