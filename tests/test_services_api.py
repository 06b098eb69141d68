import pytest


@pytest.fixture
def lawn_care(client):
    response = client.post("/api/admin/services", json={
        "name": "Lawn Care",
        "description": "Mowing, fertilization and aeration.",
        "shortDesc": "Keep your lawn green",
        "price": "From $80/visit",
        "featured": True,
    })
    assert response.status_code == 201
    return response.json()["service"]


def test_create_service_201(client, lawn_care):
    assert lawn_care["name"] == "Lawn Care"
    assert lawn_care["shortDesc"] == "Keep your lawn green"
    assert lawn_care["featured"] is True
    assert "createdAt" in lawn_care


def test_list_services_envelope_200(client, lawn_care):
    response = client.get("/api/services")
    assert response.status_code == 200
    assert [s["id"] for s in response.json()["services"]] == [lawn_care["id"]]


def test_featured_includes_lawn_care_200(client, lawn_care):
    client.post("/api/admin/services", json={
        "name": "Irrigation", "description": "Sprinklers", "price": "From $350",
    })
    response = client.get("/api/services/featured")
    assert response.status_code == 200
    assert [s["name"] for s in response.json()["services"]] == ["Lawn Care"]


def test_get_service_200(client, lawn_care):
    response = client.get(f"/api/services/{lawn_care['id']}")
    assert response.status_code == 200
    assert response.json()["service"]["name"] == "Lawn Care"


def test_get_service_unparseable_id_404(client, lawn_care):
    response = client.get("/api/services/not-a-valid-id")
    assert response.status_code == 404
    assert "message" in response.json()


@pytest.mark.parametrize("service_id", ["²", "1²", "١"])
def test_get_service_non_ascii_digit_id_404(client, lawn_care, service_id):
    response = client.get(f"/api/services/{service_id}")
    assert response.status_code == 404
    assert client.delete(f"/api/admin/services/{service_id}").status_code == 404


def test_get_service_unknown_id_404(client):
    response = client.get("/api/services/999")
    assert response.status_code == 404


def test_delete_service_cascades_to_portfolio_200(client, lawn_care):
    item = client.post("/api/admin/portfolio", json={
        "title": "Front lawn makeover",
        "description": "Re-seeded and edged",
        "serviceId": lawn_care["id"],
        "status": "Published",
    }).json()["portfolioItem"]
    assert item["serviceId"] == lawn_care["id"]

    response = client.delete(f"/api/admin/services/{lawn_care['id']}")
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get(f"/api/services/{lawn_care['id']}").status_code == 404
    assert client.get(f"/api/admin/portfolio/{item['id']}").status_code == 404
    remaining = client.get("/api/admin/portfolio", params={"serviceId": lawn_care["id"]})
    assert remaining.json()["portfolioItems"] == []


def test_delete_service_not_found_404(client):
    response = client.delete("/api/admin/services/42")
    assert response.status_code == 404


def test_update_service_partial_200(client, lawn_care):
    response = client.put(f"/api/admin/services/{lawn_care['id']}", json={"price": "From $90/visit"})
    assert response.status_code == 200
    service = response.json()["service"]
    assert service["price"] == "From $90/visit"
    assert service["name"] == "Lawn Care"
    assert service["shortDesc"] == "Keep your lawn green"


def test_update_service_null_required_field_400(client, lawn_care):
    response = client.put(f"/api/admin/services/{lawn_care['id']}", json={"price": None})
    assert response.status_code == 400
    assert "price" in response.json()["errors"]

    stored = client.get(f"/api/services/{lawn_care['id']}").json()["service"]
    assert stored["price"] == "From $80/visit"
    assert client.get("/api/services").status_code == 200


def test_update_service_null_optional_field_clears_it_200(client, lawn_care):
    response = client.put(f"/api/admin/services/{lawn_care['id']}", json={"shortDesc": None})
    assert response.status_code == 200
    assert response.json()["service"]["shortDesc"] is None
    assert client.get("/api/services").status_code == 200


def test_update_service_not_found_404(client):
    response = client.put("/api/admin/services/42", json={"name": "Nope"})
    assert response.status_code == 404


def test_create_service_missing_price_400(client):
    response = client.post("/api/admin/services", json={"name": "No price", "description": "d"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert "price" in body["errors"]


def test_reconcile_endpoint_200(client):
    response = client.post("/api/admin/services/reconcile")
    assert response.status_code == 200
    assert response.json() == {"success": True, "removed": 0}


def test_service_portfolio_lists_published_only_200(client, lawn_care):
    for title, status in [("Shown", "Published"), ("Hidden", "Draft")]:
        client.post("/api/admin/portfolio", json={
            "title": title, "description": "d", "serviceId": lawn_care["id"], "status": status,
        })
    response = client.get(f"/api/services/{lawn_care['id']}/portfolio")
    assert response.status_code == 200
    assert [i["title"] for i in response.json()["portfolioItems"]] == ["Shown"]
