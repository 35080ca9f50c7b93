"""
Auth flow smoke test against a running server.

Walks register -> login -> forgot-password -> validate-otp -> reset-password
-> login with the new password. The OTP is read from the email you receive
(or from the server log when SMTP is not configured).

    python scripts/auth_flow_smoke.py http://localhost:8000
"""

import json
import sys
import uuid

import requests

BASE_URL = (sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000").rstrip("/") + "/admin"


def print_section(title):
    print("\n" + "=" * 80)
    print(f"  {title}")
    print("=" * 80)


def print_response(response):
    print(f"HTTP {response.status_code}")
    print(json.dumps(response.json(), indent=2, ensure_ascii=False))


def main():
    suffix = uuid.uuid4().hex[:8]
    username = f"smoke_{suffix}"
    password = f"pw-{suffix}"

    print_section("STEP 1: Register")
    email = input("Email to receive the OTP: ").strip() or f"{username}@example.com"
    response = requests.post(f"{BASE_URL}/auth/register", json={
        "username": username,
        "password": password,
        "email": email,
        "name": "Smoke Test",
    })
    print_response(response)
    if response.status_code != 200:
        return

    print_section("STEP 2: Login")
    response = requests.post(f"{BASE_URL}/auth/login", json={"username": username, "password": password})
    print_response(response)
    if response.status_code != 200:
        return
    login = response.json()["data"]

    print_section("STEP 3: Look up the new user with the bearer token")
    response = requests.get(
        f"{BASE_URL}/user/{login['id']}",
        headers={"Authorization": f"Bearer {login['token']}"},
    )
    print_response(response)

    print_section("STEP 4: Forgot password")
    response = requests.post(f"{BASE_URL}/auth/forgot-password", json={"email": email})
    print_response(response)

    otp = input("\nEnter the OTP you received: ").strip()

    print_section("STEP 5: Validate OTP")
    response = requests.post(f"{BASE_URL}/auth/validate-otp", json={"otp": otp})
    print_response(response)
    if response.status_code != 200:
        return

    print_section("STEP 6: Reset password")
    new_password = f"new-{suffix}"
    response = requests.put(f"{BASE_URL}/auth/reset-password", json={"code": otp, "newPassword": new_password})
    print_response(response)

    print_section("STEP 7: Old password is rejected, new one works")
    old = requests.post(f"{BASE_URL}/auth/login", json={"username": username, "password": password})
    new = requests.post(f"{BASE_URL}/auth/login", json={"username": username, "password": new_password})
    print(f"old password -> HTTP {old.status_code}, new password -> HTTP {new.status_code}")


if __name__ == "__main__":
    main()
