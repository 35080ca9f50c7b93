import pytest

from app.core.exceptions import MissingParametersError, ValidationError
from app.models.route_role import RouteRole
from app.services.bulk_insert_service import build_entities, bulk_insert_route_role


def test_add_bulk_cart(client, admin_login, auth_headers):
    response = client.post("/admin/cart/addBulk", headers=auth_headers, json={"data": [
        {"userId": admin_login["id"], "items": [{"productId": "Wooden", "quantity": 2, "price": 10.5}]},
        {"userId": admin_login["id"]},
    ]})

    assert response.status_code == 200
    assert response.json()["status"] == "SUCCESS"
    assert response.json()["data"] == {"count": 2}


def test_add_bulk_order_rejects_bad_item(client, auth_headers):
    response = client.post("/admin/order/addBulk", headers=auth_headers, json={"data": [
        {"userId": "u", "items": [{"productId": "p", "price": 5}]},
        {"userId": "u", "items": [{"productId": "p", "price": -1}]},
    ]})

    assert response.status_code == 422
    assert response.json()["status"] == "VALIDATION_ERROR"
    assert "index 1" in response.json()["message"]


def test_add_bulk_route_role(client, auth_headers):
    response = client.post("/admin/routeRole/addBulk", headers=auth_headers, json={"data": [
        {"routeId": "r1", "roleId": "admin"},
        {"routeId": "r2", "roleId": "admin", "isActive": False},
    ]})

    assert response.status_code == 200
    assert response.json()["data"]["count"] == 2


def test_add_bulk_empty_data(client, auth_headers):
    response = client.post("/admin/cart/addBulk", headers=auth_headers, json={"data": []})
    assert response.status_code == 400
    assert response.json()["status"] == "BAD_REQUEST"


def test_add_bulk_requires_token(client):
    response = client.post("/admin/routeRole/addBulk", json={"data": [{"routeId": "r1", "roleId": "admin"}]})
    assert response.status_code == 401


def test_build_entities_stamps_audit_fields():
    documents = build_entities(RouteRole, [
        {"routeId": "r1", "roleId": "admin"},
        {"routeId": "r2", "roleId": "admin", "isActive": False, "addedBy": "someone"},
    ], actor_id="admin-id")

    first, second = documents
    assert first["route_id"] == "r1"
    assert first["is_active"] is True
    assert first["is_deleted"] is False
    assert first["added_by"] == "admin-id"
    assert second["is_active"] is False
    assert second["added_by"] == "someone"
    assert "updated_at" in first and "created_at" in first


def test_build_entities_skips_undefined_fields():
    (document,) = build_entities(RouteRole, [{"routeId": "r1", "roleId": "admin"}], actor_id="a")
    assert set(document) == {
        "route_id", "role_id", "is_active", "is_deleted",
        "created_at", "updated_at", "added_by", "updated_by",
    }


def test_build_entities_reports_index():
    with pytest.raises(ValidationError) as exc_info:
        build_entities(RouteRole, [{"routeId": "r1", "roleId": "x"}, {"routeId": "r2"}], actor_id="a")
    assert "index 1" in exc_info.value.message


@pytest.mark.asyncio
async def test_bulk_insert_writes_documents(db):
    result = await bulk_insert_route_role(db["route_roles"], [{"routeId": "r1", "roleId": "admin"}], "a")
    assert result == {"count": 1}
    assert await db["route_roles"].count_documents({"route_id": "r1", "is_deleted": False}) == 1


@pytest.mark.asyncio
async def test_bulk_insert_needs_items(db):
    with pytest.raises(MissingParametersError):
        await bulk_insert_route_role(db["route_roles"], [], "a")
