def test_openapi_document_describes_contacts_operations(client):
    response = client.get("/swagger/v1/swagger.json")

    assert response.status_code == 200
    spec = response.json()
    assert set(spec["paths"]["/contacts"]) == {"get", "post"}
    assert set(spec["paths"]["/contacts/{identity}"]) == {"get", "put", "delete"}
    assert "BlipKey" in spec["components"]["securitySchemes"]


def test_openapi_document_lists_error_responses(client):
    spec = client.get("/swagger/v1/swagger.json").json()

    put = spec["paths"]["/contacts/{identity}"]["put"]
    assert {"200", "400", "401", "500"} <= set(put["responses"])
    assert "201" in spec["paths"]["/contacts"]["post"]["responses"]


def test_openapi_document_carries_docstring_samples(client):
    spec = client.get("/swagger/v1/swagger.json").json()

    description = spec["paths"]["/contacts"]["get"]["description"]
    assert "Sample request" in description
    assert "Authorization: Key" in description


def test_interactive_reference_is_served_at_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "swagger" in response.text.lower()
    assert "/swagger/v1/swagger.json" in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
