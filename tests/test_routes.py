import yaml

from paramhub import param_settings as ps


class TestSystemRoutes:
    def test_health_no_auth(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["status"] == "healthy"
        assert data["endpoint_count"] == len(ps.PARAM_SETTINGS)

    def test_verify_token(self, client, auth_headers):
        resp = client.post("/api/auth/verify", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.get_json()["valid"] is True

    def test_list_endpoints(self, client, auth_headers):
        resp = client.get("/api/endpoints", headers=auth_headers)
        data = resp.get_json()
        assert data["total"] == len(ps.PARAM_SETTINGS)
        assert [e["key"] for e in data["endpoints"]] == ps.list_endpoint_keys()
        assert all(e["has_columns"] for e in data["endpoints"])

    def test_security_headers(self, client):
        resp = client.get("/api/health")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"


class TestAuth:
    def test_missing_token(self, client):
        resp = client.get("/api/param-settings/openAI")
        assert resp.status_code == 401
        assert resp.get_json()["error"]["code"] == "MISSING_TOKEN"

    def test_bad_format(self, client):
        resp = client.get("/api/param-settings/openAI", headers={"Authorization": "Token abc"})
        assert resp.status_code == 401
        assert resp.get_json()["error"]["code"] == "INVALID_FORMAT"

    def test_wrong_token(self, client):
        resp = client.get("/api/param-settings/openAI", headers={"Authorization": "Bearer wrong"})
        assert resp.status_code == 401
        assert resp.get_json()["error"]["code"] == "INVALID_TOKEN"


class TestParamSettingsRoutes:
    def test_flat_settings(self, client, auth_headers):
        resp = client.get("/api/param-settings/openAI", headers=auth_headers)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["endpoint"] == "openAI"
        assert data["settings"] == [d.to_dict() for d in ps.get_param_settings("openAI")]

    def test_flat_settings_preserve_field_order(self, client, auth_headers):
        resp = client.get("/api/param-settings/openAI", headers=auth_headers)
        first = resp.get_json()["settings"][0]
        assert first["key"] == "modelLabel"

    def test_composite_key(self, client, auth_headers):
        resp = client.get("/api/param-settings/bedrock-anthropic", headers=auth_headers)
        assert resp.status_code == 200
        top_k = next(s for s in resp.get_json()["settings"] if s["key"] == "topK")
        assert top_k["range"] == {"min": 0, "max": 500, "step": 1}

    def test_preset_settings(self, client, auth_headers):
        resp = client.get("/api/preset-settings/anthropic", headers=auth_headers)
        assert resp.status_code == 200
        data = resp.get_json()
        assert [d["key"] for d in data["col1"]] == ["model", "modelLabel", "promptPrefix"]
        assert data["col2"] == [d.to_dict() for d in ps.get_preset_settings("anthropic").col2]

    def test_agent_settings_match_column_two(self, client, auth_headers):
        agent = client.get("/api/agent-param-settings/google", headers=auth_headers).get_json()
        preset = client.get("/api/preset-settings/google", headers=auth_headers).get_json()
        assert agent["settings"] == preset["col2"]

    def test_unregistered_key_is_404_everywhere(self, client, auth_headers):
        for path in (
            "/api/param-settings/bedrock-moonshot",
            "/api/preset-settings/bedrock-moonshot",
            "/api/agent-param-settings/bedrock-moonshot",
            "/api/param-settings/bedrock-moonshot/defaults",
        ):
            resp = client.get(path, headers=auth_headers)
            assert resp.status_code == 404, path
            assert resp.get_json()["error"]["code"] == "ENDPOINT_NOT_FOUND"

    def test_malformed_key(self, client, auth_headers):
        resp = client.get("/api/param-settings/a-b-c", headers=auth_headers)
        assert resp.status_code == 400
        assert resp.get_json()["error"]["code"] == "INVALID_ENDPOINT"

    def test_defaults(self, client, auth_headers):
        resp = client.get("/api/param-settings/google/defaults", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.get_json()["defaults"] == ps.get_default_values(ps.get_param_settings("google"))

    def test_yaml_format(self, client, auth_headers):
        resp = client.get("/api/param-settings/bedrock-cohere?format=yaml", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.mimetype == "application/x-yaml"
        data = yaml.safe_load(resp.get_data(as_text=True))
        assert data["settings"] == [d.to_dict() for d in ps.get_param_settings("bedrock-cohere")]

    def test_unknown_format(self, client, auth_headers):
        resp = client.get("/api/param-settings/openAI?format=xml", headers=auth_headers)
        assert resp.status_code == 400
        assert resp.get_json()["error"]["code"] == "INVALID_FORMAT"


class TestValidateRoute:
    def test_valid_values(self, client, auth_headers):
        resp = client.post(
            "/api/param-settings/openAI/validate",
            json={"temperature": 0.2, "reasoning_effort": "high", "stop": ["END"]},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["valid"] is True
        assert data["errors"] == []

    def test_invalid_values(self, client, auth_headers):
        resp = client.post(
            "/api/param-settings/anthropic/validate",
            json={"topK": 250, "bogus": 1},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["valid"] is False
        assert len(data["errors"]) == 2

    def test_non_finite_numbers_rejected(self, client, auth_headers):
        resp = client.post(
            "/api/param-settings/openAI/validate",
            data='{"max_tokens": NaN, "maxContextTokens": -Infinity}',
            content_type="application/json",
            headers=auth_headers,
        )
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["valid"] is False
        assert len(data["errors"]) == 2

    def test_fractional_top_k_rejected(self, client, auth_headers):
        resp = client.post(
            "/api/param-settings/anthropic/validate",
            json={"topK": 2.5, "thinkingBudget": 1025.5},
            headers=auth_headers,
        )
        data = resp.get_json()
        assert data["valid"] is False
        assert len(data["errors"]) == 2

    def test_missing_body(self, client, auth_headers):
        resp = client.post(
            "/api/param-settings/openAI/validate",
            content_type="application/json",
            headers=auth_headers,
        )
        assert resp.status_code == 400

    def test_unregistered(self, client, auth_headers):
        resp = client.post("/api/param-settings/agents/validate", json={}, headers=auth_headers)
        assert resp.status_code == 404
