def _create(client, name, order, rating=5):
    return client.post("/api/admin/testimonials", json={
        "name": name, "role": "Homeowner", "content": "Wonderful work", "rating": rating,
        "displayOrder": order,
    })


def test_create_and_list_in_display_order_200(client):
    _create(client, "Second", 2)
    _create(client, "First", 1)
    response = client.get("/api/testimonials")
    assert response.status_code == 200
    assert [t["name"] for t in response.json()["testimonials"]] == ["First", "Second"]


def test_rating_out_of_range_400(client):
    response = _create(client, "Too Good", 1, rating=6)
    assert response.status_code == 400
    assert "rating" in response.json()["errors"]


def test_update_and_delete_testimonial(client):
    testimonial = _create(client, "Ann", 1).json()["testimonial"]
    response = client.put(f"/api/admin/testimonials/{testimonial['id']}", json={"rating": 4})
    assert response.json()["testimonial"]["rating"] == 4
    assert response.json()["testimonial"]["content"] == "Wonderful work"
    assert client.delete(f"/api/admin/testimonials/{testimonial['id']}").status_code == 200
    assert client.get(f"/api/testimonials/{testimonial['id']}").status_code == 404
