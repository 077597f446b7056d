"""HTTP tests for the captain (/captains) endpoints."""
from conftest import VALID_PASSWORD, auth_header, run_sql


def _register(client, payload) -> dict:
    resp = client.post("/captains/register", json=payload)
    assert resp.status_code == 201, resp.json()
    return resp.json()


class TestCaptainRegister:

    def test_register_returns_captain_with_vehicle(self, client, captain_payload):
        data = _register(client, captain_payload)
        assert data["token"]
        captain = data["captain"]
        assert captain["email"] == "carl@x.com"
        assert captain["vehicle"] == {
            "color": "black",
            "plate": "KA-01-1234",
            "capacity": 4,
            "vehicleType": "car",
        }
        assert "password" not in captain

    def test_missing_vehicle_field(self, client, captain_payload):
        del captain_payload["vehicle"]["plate"]
        resp = client.post("/captains/register", json=captain_payload)
        assert resp.status_code == 400
        fields = [err["field"] for err in resp.json()["errors"]]
        assert fields == ["vehicle.plate"]

    def test_missing_vehicle_block(self, client, captain_payload):
        del captain_payload["vehicle"]
        resp = client.post("/captains/register", json=captain_payload)
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "vehicle"

    def test_invalid_vehicle_values(self, client, captain_payload):
        captain_payload["vehicle"].update(capacity=0, vehicleType="bus")
        resp = client.post("/captains/register", json=captain_payload)
        assert resp.status_code == 400
        fields = {err["field"] for err in resp.json()["errors"]}
        assert fields == {"vehicle.capacity", "vehicle.vehicleType"}

    def test_duplicate_email(self, client, captain_payload):
        _register(client, captain_payload)
        resp = client.post("/captains/register", json=captain_payload)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Email already in use"}

    def test_rider_with_same_email_does_not_block_captain(self, client, user_payload, captain_payload):
        assert client.post("/users/register", json=user_payload).status_code == 201
        captain_payload["email"] = user_payload["email"]
        _register(client, captain_payload)


class TestCaptainLogin:

    def test_login_success(self, client, captain_payload):
        _register(client, captain_payload)
        resp = client.post("/captains/login", json={"email": "carl@x.com", "password": VALID_PASSWORD})
        assert resp.status_code == 200
        assert resp.json()["captain"]["email"] == "carl@x.com"
        assert resp.cookies.get("token") == resp.json()["token"]

    def test_wrong_password_and_unknown_email_match(self, client, captain_payload):
        _register(client, captain_payload)
        wrong = client.post("/captains/login", json={"email": "carl@x.com", "password": "nope-nope"})
        unknown = client.post("/captains/login", json={"email": "ghost@x.com", "password": VALID_PASSWORD})
        assert wrong.status_code == unknown.status_code == 400
        assert wrong.json() == unknown.json() == {"message": "Invalid email or password"}


class TestCaptainProfile:

    def test_profile(self, client, captain_payload):
        data = _register(client, captain_payload)
        resp = client.get("/captains/profile", headers=auth_header(data["token"]))
        assert resp.status_code == 200
        assert resp.json()["captain"]["_id"] == data["captain"]["_id"]

    def test_user_token_rejected(self, client, user_payload, captain_payload):
        _register(client, captain_payload)
        user = client.post("/users/register", json=user_payload).json()
        resp = client.get("/captains/profile", headers=auth_header(user["token"]))
        assert resp.status_code == 401

    def test_user_cookie_rejected(self, client, user_payload):
        client.post("/users/register", json=user_payload)
        client.post("/users/login", json={"email": "ann@x.com", "password": VALID_PASSWORD})
        resp = client.get("/captains/profile")
        assert resp.status_code == 401

    def test_deleted_captain_is_404(self, client, app, captain_payload):
        data = _register(client, captain_payload)
        run_sql(app.state.db, "DELETE FROM Captains WHERE CaptainId = ?", (data["captain"]["_id"],))
        resp = client.get("/captains/profile", headers=auth_header(data["token"]))
        assert resp.status_code == 404
        assert resp.json() == {"message": "Captain not found"}

    def test_no_credentials(self, client):
        assert client.get("/captains/profile").status_code == 401


class TestCaptainLogout:

    def test_logout_revokes(self, client, captain_payload):
        data = _register(client, captain_payload)
        headers = auth_header(data["token"])
        assert client.post("/captains/logout", headers=headers).status_code == 200
        assert client.get("/captains/profile", headers=headers).status_code == 401

    def test_user_token_cannot_log_out_captain(self, client, user_payload):
        user = client.post("/users/register", json=user_payload).json()
        resp = client.post("/captains/logout", headers=auth_header(user["token"]))
        assert resp.status_code == 401
        assert client.get("/users/profile", headers=auth_header(user["token"])).status_code == 200
