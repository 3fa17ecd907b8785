from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Travel Pace" in body
    assert 'href="/travel_pace/"' in body
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_request_id_is_echoed():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/travel_pace/paces", headers={"X-Request-ID": "trip-42"})
    assert response.headers["X-Request-ID"] == "trip-42"


def test_unknown_page_renders_404():
    client = create_app("TestingConfig").test_client()
    response = client.get("/nowhere")
    assert response.status_code == 404
