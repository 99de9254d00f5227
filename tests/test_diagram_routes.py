import xml.etree.ElementTree as ET

from app.routes.diagram import get_sanitize_policy

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_root_is_online(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"Network Diagram Backend": "Online"}


class TestRender:
    def test_lan_values_rendered(self, client, lan_query):
        response = client.get("/ipv4", params=lan_query)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        for value in lan_query.values():
            assert value in response.text
        ET.fromstring(response.text)

    def test_img_payload_neutralized(self, client, lan_query):
        lan_query["n"] = "<img src=x onerror=alert(1)>"
        response = client.get("/ipv4", params=lan_query)

        assert response.status_code == 200
        assert "<img" not in response.text
        assert "onerror" not in response.text

    def test_script_payload_neutralized(self, client, lan_query):
        lan_query["r"] = "<script>alert(1)</script>"
        response = client.get("/ipv4", params=lan_query)

        assert response.status_code == 200
        assert "<script" not in response.text
        root = ET.fromstring(response.text)
        assert not list(root.iter(f"{SVG_NS}script"))

    def test_unprocessable_value_is_bad_request(self, client, lan_query):
        lan_query["h1"] = "10.0.0.3\x07"
        response = client.get("/ipv4", params=lan_query)

        assert response.status_code == 400
        assert "host1" in response.json()["detail"]

    def test_encoded_control_character_is_bad_request(self, client, lan_query, history_store):
        lan_query["n"] = "10.0.0.0&#12;/24"

        assert client.get("/ipv4", params=lan_query).status_code == 400
        saved = client.get("/save", params={**lan_query, "email": "a@b.com"})
        assert saved.status_code == 400
        assert history_store.records == {}

    def test_missing_field_is_bad_request(self, client, lan_query):
        del lan_query["br"]
        response = client.get("/ipv4", params=lan_query)
        assert response.status_code == 400

    def test_address_policy_rejects_markup(self, address_policy_client, lan_query):
        lan_query["h0"] = "<b>10.0.0.2</b>"
        response = address_policy_client.get("/ipv4", params=lan_query)
        assert response.status_code == 400

    def test_address_policy_accepts_addresses(self, address_policy_client, lan_query):
        response = address_policy_client.get("/ipv4", params=lan_query)
        assert response.status_code == 200
        assert "Network: 10.0.0.0/24" in response.text


class TestSaveAndHistory:
    def test_saved_document_returned_verbatim(self, client, lan_query):
        rendered = client.get("/ipv4", params=lan_query).text

        saved = client.get("/save", params={**lan_query, "email": "a@b.com"})
        assert saved.status_code == 200
        assert saved.content == b""

        history = client.get("/history", params={"email": "a@b.com"})
        assert history.status_code == 200
        assert history.text == rendered

    def test_second_save_replaces_first(self, client, lan_query, history_store):
        other = {**lan_query, "n": "172.16.0.0/16", "br": "172.16.255.255"}
        client.get("/save", params={**lan_query, "email": "a@b.com"})
        client.get("/save", params={**other, "email": "a@b.com"})

        history = client.get("/history", params={"email": "a@b.com"})
        assert history.text == client.get("/ipv4", params=other).text
        assert "10.0.0.0/24" not in history.text
        assert list(history_store.records) == ["a@b.com"]

    def test_records_are_per_email(self, client, lan_query):
        other = {**lan_query, "n": "172.16.0.0/16"}
        client.get("/save", params={**lan_query, "email": "a@b.com"})
        client.get("/save", params={**other, "email": "c@d.com"})

        assert "10.0.0.0/24" in client.get("/history", params={"email": "a@b.com"}).text
        assert "172.16.0.0/16" in client.get("/history", params={"email": "c@d.com"}).text

    def test_unknown_email_is_no_content(self, client):
        response = client.get("/history", params={"email": "never-seen@x.com"})
        assert response.status_code == 204
        assert response.content == b""

    def test_rejected_input_is_not_saved(self, client, lan_query, history_store):
        lan_query["h0"] = "\x00"
        response = client.get("/save", params={**lan_query, "email": "a@b.com"})

        assert response.status_code == 400
        assert history_store.records == {}

    def test_missing_email_is_bad_request(self, client, lan_query):
        assert client.get("/save", params=lan_query).status_code == 400
        assert client.get("/history").status_code == 400

    def test_empty_email_is_an_ordinary_key(self, client, lan_query):
        assert client.get("/history", params={"email": ""}).status_code == 204
        assert client.get("/save", params={**lan_query, "email": ""}).status_code == 200

        history = client.get("/history", params={"email": ""})
        assert history.status_code == 200
        assert "10.0.0.0/24" in history.text

    def test_saved_payload_is_stored_sanitized(self, client, lan_query, history_store):
        lan_query["n"] = "<script>alert(1)</script>"
        client.get("/save", params={**lan_query, "email": "a@b.com"})
        assert "<script" not in history_store.records["a@b.com"]


class TestStorageFaults:
    def test_save_fault_is_server_error(self, failing_client, lan_query):
        response = failing_client.get("/save", params={**lan_query, "email": "a@b.com"})
        assert response.status_code == 500

    def test_history_fault_is_server_error(self, failing_client):
        response = failing_client.get("/history", params={"email": "a@b.com"})
        assert response.status_code == 500

    def test_bad_input_rejected_before_storage(self, failing_client, lan_query):
        lan_query["r"] = "\x01"
        response = failing_client.get("/save", params={**lan_query, "email": "a@b.com"})
        assert response.status_code == 400

    def test_render_needs_no_storage(self, failing_client, lan_query):
        assert failing_client.get("/ipv4", params=lan_query).status_code == 200


def test_cors_preflight_allows_any_origin(client):
    response = client.options(
        "/ipv4",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-max-age"] == "86400"


def test_sanitize_policy_from_env(monkeypatch):
    monkeypatch.setenv("SANITIZE_POLICY", "ADDRESS")
    assert get_sanitize_policy() == "address"

    monkeypatch.setenv("SANITIZE_POLICY", "bogus")
    assert get_sanitize_policy() == "markup"

    monkeypatch.delenv("SANITIZE_POLICY")
    assert get_sanitize_policy() == "markup"
