from bson import ObjectId


def register(client, **fields):
    body = {"username": "u1", "password": "p1", "email": "e1"}
    body.update(fields)
    return client.post("/admin/auth/register", json=body)


def login(client, username="u1", password="p1"):
    return client.post("/admin/auth/login", json={"username": username, "password": password})


def test_full_password_reset_scenario(client, notifier):
    response = register(client)
    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"
    user_id = response.json()["data"]["id"]

    response = login(client)
    assert response.status_code == 200
    assert response.json()["data"]["id"] == user_id
    assert isinstance(response.json()["data"]["token"], str)

    response = login(client, password="wrong")
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"

    response = client.post("/admin/auth/forgot-password", json={"email": "e1"})
    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"
    otp = notifier.last_otp

    response = client.post("/admin/auth/validate-otp", json={"otp": otp})
    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"

    response = client.put("/admin/auth/reset-password", json={"code": otp, "newPassword": "p2"})
    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"

    assert login(client, password="p1").status_code == 400
    assert login(client, password="p2").status_code == 200


def test_register_with_profile_fields(client, db):
    response = register(
        client,
        username="Daija_Schuppe",
        email="Domingo.Tillman24@hotmail.com",
        name="Curtis Gutkowski",
        userType=2,
        mobileNo="(261) 490-5813",
        shippingAddress=[{
            "pincode": "Buckinghamshire",
            "address1": "drive",
            "city": "monetize",
            "isDefault": False,
            "fullName": "Investment",
            "mobile": 620,
            "addressNo": 798,
        }],
        wishlist=[{"productId": "Wooden"}],
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"id": response.json()["data"]["id"]}


def test_register_duplicate_username(client):
    assert register(client).status_code == 200
    response = register(client, email="other@example.com")
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_register_missing_email_is_validation_error(client):
    response = client.post("/admin/auth/register", json={"username": "u1", "password": "p1"})
    assert response.status_code == 422
    assert response.json()["status"] == "VALIDATION_ERROR"


def test_register_bad_user_type_is_validation_error(client):
    response = register(client, userType=511)
    assert response.status_code == 422


def test_login_with_empty_body(client):
    response = client.post("/admin/auth/login", json={})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_login_failures_share_one_message(client):
    register(client)
    unknown = login(client, username="wrong.username")
    wrong = login(client, password="wrong@password")
    assert unknown.status_code == wrong.status_code == 400
    assert unknown.json() == wrong.json()


def test_login_locked_after_repeated_failures(client):
    register(client)
    for _ in range(3):
        assert login(client, password="wrong").status_code == 400

    # Correct password, locked account: same answer as an unknown username
    response = login(client)
    assert response.status_code == 400
    assert response.json() == login(client, username="nobody").json()


def test_forgot_password_empty_email(client):
    response = client.post("/admin/auth/forgot-password", json={"email": ""})
    assert response.status_code == 422
    assert response.json()["status"] == "VALIDATION_ERROR"


def test_forgot_password_unknown_email(client):
    response = client.post("/admin/auth/forgot-password", json={"email": "unavailable.email@hotmail.com"})
    assert response.status_code == 200
    assert response.json()["status"] == "RECORD_NOT_FOUND"


def test_validate_otp_incorrect(client):
    response = client.post("/admin/auth/validate-otp", json={"otp": "12334"})
    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"
    assert response.json()["status"] == "BAD_REQUEST"


def test_validate_otp_numeric_body(client):
    response = client.post("/admin/auth/validate-otp", json={"otp": 123456})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_reset_password_numeric_code(client):
    response = client.put("/admin/auth/reset-password", json={"code": 123456, "newPassword": "p2"})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_validate_otp_empty_body(client):
    response = client.post("/admin/auth/validate-otp", json={})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_reset_password_empty_body(client):
    response = client.put("/admin/auth/reset-password", json={})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_reset_password_invalid_code(client):
    response = client.put("/admin/auth/reset-password", json={"code": "123", "newPassword": "testPassword"})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_register_password_too_long(client):
    response = register(client, username="lp", email="lp@e", password="x" * 100)
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"
    assert login(client, username="lp", password="x" * 100).status_code == 400


def test_reset_password_too_long_keeps_code(client, notifier):
    register(client)
    client.post("/admin/auth/forgot-password", json={"email": "e1"})
    otp = notifier.last_otp

    response = client.put("/admin/auth/reset-password", json={"code": otp, "newPassword": "y" * 100})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"

    response = client.put("/admin/auth/reset-password", json={"code": otp, "newPassword": "p2"})
    assert response.status_code == 200
    assert login(client, password="p2").status_code == 200


# ----------------------------------------------------------------------
# protected user lookup
# ----------------------------------------------------------------------

def test_get_user_requires_token(client, admin_login):
    response = client.get(f"/admin/user/{admin_login['id']}")
    assert response.status_code == 401
    assert response.json()["status"] == "UNAUTHORIZED"


def test_get_user_rejects_bad_token(client, admin_login):
    response = client.get(
        f"/admin/user/{admin_login['id']}",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401


def test_get_user_hides_password(client, admin_login, auth_headers, notifier):
    client.post("/admin/auth/forgot-password", json={"email": "domingo.tillman24@hotmail.com"})

    response = client.get(f"/admin/user/{admin_login['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == admin_login["id"]
    assert data["username"] == "Daija_Schuppe"
    assert data["userType"] == 2
    assert "password" not in data
    assert data["resetPasswordLink"]["code"] == notifier.last_otp


def test_get_unknown_user(client, auth_headers):
    response = client.get(f"/admin/user/{ObjectId()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["status"] == "RECORD_NOT_FOUND"
