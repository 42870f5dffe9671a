"""Events API — validation messages, ordering, landing flag, calendar view.

Invariants:
    - Unsupported category / missing start / end before start → 400
    - List ordered by startDate descending
    - /calendar groups featured and ongoing events for one day
"""


async def test_create_event(client, event_payload):
    res = await client.post("/api/events", json=event_payload(
        category="Выставка", endDate="2025-05-20",
        timeMode="range", startTime="18:00", endTime="23:00",
    ))
    assert res.status_code == 201
    body = res.json()
    assert body["category"] == "exhibition"
    assert body["dateType"] == "duration"
    assert body["startTime"] == "18:00"
    assert body["endTime"] == "23:00"
    assert body["startDate"].startswith("2025-05-17")


async def test_event_tolerates_malformed_tags(client, event_payload):
    res = await client.post("/api/events", json=event_payload(
        tags=["Джаз", 1, None], techTags="jazz",
    ))
    assert res.status_code == 201
    assert res.json()["tags"] == ["Джаз"]
    assert res.json()["techTags"] == []


async def test_unsupported_category(client, event_payload):
    res = await client.post("/api/events", json=event_payload(category="lecture"))
    assert res.status_code == 400
    assert res.json()["message"] == "Unsupported event category"


async def test_start_date_required(client, event_payload):
    res = await client.post("/api/events", json=event_payload(startDate=None))
    assert res.status_code == 400
    assert res.json()["message"] == "Start date is required for event"


async def test_end_before_start(client, event_payload):
    res = await client.post("/api/events", json=event_payload(endDate="2025-05-01"))
    assert res.status_code == 400
    assert res.json()["message"] == "Finish date can not be earlier than start date"


async def test_time_range_must_end_after_start(client, event_payload):
    res = await client.post("/api/events", json=event_payload(
        timeMode="range", startTime="20:00", endTime="19:00",
    ))
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "endTime"


async def test_list_ordered_by_start_desc_and_filtered(client, event_payload):
    await client.post("/api/events", json=event_payload(title="May", startDate="2025-05-01"))
    await client.post("/api/events", json=event_payload(
        title="July", startDate="2025-07-01", category="concert",
    ))
    await client.post("/api/events", json=event_payload(title="June", startDate="2025-06-01"))

    titles = [e["title"] for e in (await client.get("/api/events")).json()]
    assert titles == ["July", "June", "May"]

    concerts = (await client.get("/api/events", params={"category": "Концерт"})).json()
    assert [e["title"] for e in concerts] == ["July"]


async def test_landing_flag_exclusive_across_events(client, event_payload):
    first = (await client.post("/api/events", json=event_payload(isOnLanding=True))).json()
    await client.post("/api/events", json=event_payload(isOnLanding=True))

    landing = (await client.get("/api/events", params={"onLanding": "true"})).json()
    assert len(landing) == 1
    assert landing[0]["id"] != first["id"]


async def test_update_and_delete_event(client, event_payload):
    created = (await client.post("/api/events", json=event_payload())).json()
    updated = await client.put(
        f"/api/events/{created['id']}", json=event_payload(address="Лувр"),
    )
    assert updated.status_code == 200
    assert updated.json()["address"] == "Лувр"

    assert (await client.delete(f"/api/events/{created['id']}")).status_code == 204
    assert (await client.get(f"/api/events/{created['id']}")).status_code == 404


async def test_calendar_day(client, event_payload):
    await client.post("/api/events", json=event_payload(
        title="Long", startDate="2025-05-01", endDate="2025-05-31",
    ))
    await client.post("/api/events", json=event_payload(
        title="Opening", startDate="2025-05-17", timeMode="start", startTime="19:00",
    ))
    await client.post("/api/events", json=event_payload(
        title="June", startDate="2025-06-02",
    ))

    res = await client.get("/api/events/calendar", params={"date": "2025-05-17"})
    assert res.status_code == 200
    body = res.json()
    assert body["date"] == "2025-05-17"
    assert [e["title"] for e in body["featured"]] == ["Opening"]
    assert body["featured"][0]["time"] == "Начало в 19:00"
    assert body["featured"][0]["dateRangeLabel"] == "17 мая 2025"
    assert [e["title"] for e in body["ongoing"]] == ["Long"]
    assert body["month"]["eventDays"] == [1, 17, 31]
    assert body["month"]["daysInMonth"] == 31


async def test_calendar_category_filter(client, event_payload):
    await client.post("/api/events", json=event_payload(title="Show", startDate="2025-05-17"))
    await client.post("/api/events", json=event_payload(
        title="Gig", startDate="2025-05-17", category="concert",
    ))
    body = (await client.get(
        "/api/events/calendar", params={"date": "2025-05-17", "category": "concert"},
    )).json()
    assert [e["title"] for e in body["featured"]] == ["Gig"]


async def test_calendar_rejects_unknown_category(client):
    res = await client.get("/api/events/calendar", params={"category": "lecture"})
    assert res.status_code == 400
