from datetime import timedelta

from hotel.reservations.cancellation import utc_today

GUEST_PAYLOAD = {
    "name": "Jane Guest",
    "email": "jane@example.com",
    "password": "Passw0rd!",
}

OTHER_PAYLOAD = {
    "name": "Sam Other",
    "email": "sam@example.com",
    "password": "Passw0rd!",
}


def auth_header(client, payload: dict[str, str]) -> dict[str, str]:
    response = client.post("/api/register", json=payload)
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


def room_id(client, name: str = "Standard Room") -> int:
    rooms = client.get("/api/rooms").json()["rooms"]
    return next(room["id"] for room in rooms if room["name"] == name)


def book(client, headers, room, check_in, check_out, **extra):
    payload = {
        "roomId": room,
        "checkIn": str(check_in),
        "checkOut": str(check_out),
        "fullName": "Jane Guest",
        "email": "jane@example.com",
        "phone": "+1 555 0100",
    }
    payload.update(extra)
    return client.post("/api/bookings", json=payload, headers=headers)


def days_from_today(days: int):
    return utc_today() + timedelta(days=days)


def test_create_booking_returns_booking_and_room(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    room = room_id(client)

    response = book(client, headers, room, "2024-06-01", "2024-06-05", specialRequests="Quiet floor")

    assert response.status_code == 200
    body = response.json()
    assert body["room"]["id"] == room
    booking = body["booking"]
    assert booking["roomId"] == room
    assert booking["checkIn"] == "2024-06-01"
    assert booking["checkOut"] == "2024-06-05"
    assert booking["status"] == "confirmed"
    assert booking["specialRequests"] == "Quiet floor"
    assert {"id", "userId", "fullName", "email", "phone", "createdAt"} <= set(booking)


def test_scenario_b_overlap_conflicts(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    room = room_id(client)
    book(client, headers, room, "2024-06-01", "2024-06-05")

    response = book(client, headers, room, "2024-06-03", "2024-06-06")

    assert response.status_code == 409
    assert response.json()["detail"] == "Room no longer available for those dates"


def test_scenario_c_touching_boundary(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    room = room_id(client)
    book(client, headers, room, "2024-06-01", "2024-06-05")

    response = book(client, headers, room, "2024-06-05", "2024-06-08")

    assert response.status_code == 200


def test_booked_room_disappears_from_search(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    room = room_id(client)
    book(client, headers, room, "2024-06-01", "2024-06-05")

    overlapping = client.get("/api/rooms/search?checkIn=2024-06-04&checkOut=2024-06-07").json()["rooms"]
    turnover = client.get("/api/rooms/search?checkIn=2024-06-05&checkOut=2024-06-07").json()["rooms"]

    assert room not in [r["id"] for r in overlapping]
    assert room in [r["id"] for r in turnover]


def test_scenario_d_cancel_then_rebook(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    room = room_id(client)
    check_in, check_out = days_from_today(30), days_from_today(34)
    original = book(client, headers, room, check_in, check_out).json()["booking"]
    assert book(client, headers, room, days_from_today(32), days_from_today(35)).status_code == 409

    cancel = client.patch(f"/api/bookings/{original['id']}/cancel", headers=headers)
    assert cancel.status_code == 200
    assert cancel.json() == {"ok": True}

    search = client.get(f"/api/rooms/search?checkIn={check_in}&checkOut={check_out}").json()["rooms"]
    assert room in [r["id"] for r in search]
    assert book(client, headers, room, days_from_today(32), days_from_today(35)).status_code == 200


def test_missing_fields(client):
    headers = auth_header(client, GUEST_PAYLOAD)

    response = client.post(
        "/api/bookings",
        json={"roomId": room_id(client), "checkIn": "2024-06-01", "checkOut": "2024-06-05"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing fields"


def test_check_out_must_follow_check_in(client):
    headers = auth_header(client, GUEST_PAYLOAD)

    response = book(client, headers, room_id(client), "2024-06-05", "2024-06-05")

    assert response.status_code == 400


def test_unknown_room(client):
    headers = auth_header(client, GUEST_PAYLOAD)

    response = book(client, headers, 9999, "2024-06-01", "2024-06-05")

    assert response.status_code == 404
    assert response.json()["detail"] == "Room not found"


def test_booking_requires_auth(client):
    response = book(client, {}, room_id(client), "2024-06-01", "2024-06-05")

    assert response.status_code == 401


def test_list_bookings_latest_first_with_room_details(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    book(client, headers, room_id(client, "Standard Room"), "2024-06-01", "2024-06-05")
    book(client, headers, room_id(client, "Family Suite"), "2024-09-01", "2024-09-03")
    other = auth_header(client, OTHER_PAYLOAD)
    book(client, other, room_id(client, "Deluxe Room"), "2024-07-01", "2024-07-02")

    response = client.get("/api/bookings", headers=headers)

    assert response.status_code == 200
    bookings = response.json()["bookings"]
    assert [b["checkIn"] for b in bookings] == ["2024-09-01", "2024-06-01"]
    assert [b["roomName"] for b in bookings] == ["Family Suite", "Standard Room"]
    assert [b["pricePerNight"] for b in bookings] == [199, 79]


def test_cancel_check_in_today_is_rejected(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    booking = book(client, headers, room_id(client), days_from_today(0), days_from_today(2)).json()["booking"]

    response = client.patch(f"/api/bookings/{booking['id']}/cancel", headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot cancel past or ongoing stays"


def test_cancel_check_in_tomorrow_succeeds(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    booking = book(client, headers, room_id(client), days_from_today(1), days_from_today(3)).json()["booking"]

    response = client.patch(f"/api/bookings/{booking['id']}/cancel", headers=headers)

    assert response.status_code == 200
    statuses = [b["status"] for b in client.get("/api/bookings", headers=headers).json()["bookings"]]
    assert statuses == ["cancelled"]


def test_cancel_twice_is_rejected(client):
    headers = auth_header(client, GUEST_PAYLOAD)
    booking = book(client, headers, room_id(client), days_from_today(5), days_from_today(6)).json()["booking"]
    client.patch(f"/api/bookings/{booking['id']}/cancel", headers=headers)

    response = client.patch(f"/api/bookings/{booking['id']}/cancel", headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot cancel this booking"


def test_cancel_someone_elses_booking_is_not_found(client):
    owner = auth_header(client, GUEST_PAYLOAD)
    intruder = auth_header(client, OTHER_PAYLOAD)
    booking = book(client, owner, room_id(client), days_from_today(5), days_from_today(6)).json()["booking"]

    response = client.patch(f"/api/bookings/{booking['id']}/cancel", headers=intruder)
    missing = client.patch("/api/bookings/424242/cancel", headers=intruder)

    assert response.status_code == 404
    assert response.json() == missing.json() == {"detail": "Booking not found"}
