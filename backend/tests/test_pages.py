"""
Tests for static pages, 404 handling, static assets, health and metrics
"""


def test_home_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Home Page" in r.text
    assert 'href="/css/style.css"' in r.text


def test_product_page(client):
    r = client.get("/product")
    assert r.status_code == 200
    assert "Products" in r.text


def test_about_page_has_no_layout(client):
    r = client.get("/about")
    assert r.status_code == 200
    assert "About" in r.text
    assert 'class="navbar"' not in r.text


def test_unknown_path_is_404(client):
    r = client.get("/does/not/exist")
    assert r.status_code == 404
    assert r.text == "<h1>404</h1>"


def test_unknown_path_with_other_methods_is_404(client):
    for method in ("POST", "PUT", "DELETE"):
        r = client.request(method, "/nowhere")
        assert r.status_code == 404, method
        assert r.text == "<h1>404</h1>"


def test_static_asset_served_from_root(client):
    r = client.get("/css/style.css")
    assert r.status_code == 200
    assert "text/css" in r.headers["content-type"]


def test_request_id_header(client):
    r = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["components"]["database"]["status"] == "healthy"


def test_metrics_exposes_contact_counters(client):
    client.post("/contact", data={"name": "Alice", "email": "alice@example.com", "nohp": "081234567890"})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "http_requests_total" in r.text
    assert 'contact_operations_total{operation="insert",status="success"}' in r.text
