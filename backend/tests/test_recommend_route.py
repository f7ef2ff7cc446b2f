import time

from app.services.Token_service import TokenService
from conftest import TEST_SECRET, make_place

# ~1 km and ~5 km north of the equator/meridian crossing
NEAR = make_place(1, lat=0.009, lon=0.0)
FAR = make_place(5, lat=0.045, lon=0.0)
FARTHEST = make_place(9, lat=1.0, lon=1.0)
AWAY = make_place(7, lat=-2.0, lon=3.0)


def test_nearest_places_in_distance_order(make_client, auth_header):
    client, _ = make_client([FARTHEST, FAR, AWAY, NEAR])
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0}, headers=auth_header(client))
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Recommendation"
    assert [p["id"] for p in body["places"]] == ["1", "5", "9"]


def test_result_count_capped(make_client, auth_header):
    client, _ = make_client([make_place(i) for i in range(8)])
    resp = client.get("/api/recommend", params={"lat": 55.7, "lon": 37.6}, headers=auth_header(client))
    assert len(resp.json()["places"]) == 3


def test_missing_header_is_401(make_client):
    client, store = make_client([NEAR])
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Missing token"}
    assert store.calls == []


def test_bare_bearer_prefix_is_401(make_client):
    client, _ = make_client([NEAR])
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0}, headers={"Authorization": "Bearer "})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}


def test_token_without_prefix_accepted(make_client):
    client, _ = make_client([NEAR])
    token = client.get("/api/get_token").json()["token"]
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0}, headers={"Authorization": token})
    assert resp.status_code == 200


def test_foreign_signature_is_401(make_client):
    client, _ = make_client([NEAR])
    token = TokenService("someone-elses-key").issue_token()
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0},
                      headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}


def test_expired_token_is_401(make_client):
    client, _ = make_client([NEAR])
    issued_yesterday = TokenService(TEST_SECRET, clock=lambda: time.time() - 25 * 3600)
    token = issued_yesterday.issue_token()
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0},
                      headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_garbage_token_is_401(make_client):
    client, _ = make_client([NEAR])
    resp = client.get("/api/recommend", params={"lat": 0, "lon": 0},
                      headers={"Authorization": "Bearer not.a.jwt"})
    assert resp.status_code == 401


def test_missing_coordinates_is_400(make_client, auth_header):
    client, store = make_client([NEAR])
    resp = client.get("/api/recommend", params={"lat": 0}, headers=auth_header(client))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid longitude value"}
    assert store.calls == []


def test_non_numeric_latitude_is_400(make_client, auth_header):
    client, _ = make_client([NEAR])
    resp = client.get("/api/recommend", params={"lat": "x", "lon": 0}, headers=auth_header(client))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid latitude value"}


def test_get_token_shape(make_client):
    client, _ = make_client([])
    resp = client.get("/api/get_token")
    assert resp.status_code == 200
    assert set(resp.json()) == {"token"}
