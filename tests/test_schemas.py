import json

from api_spec_overlay.schemas import generate_schemas, generate_schemas_json


class TestGenerateSchemas:
    def test_models_covered(self):
        assert set(generate_schemas()) == {
            "Service",
            "Enum",
            "Object",
            "Resource",
            "Field",
            "ResourceField",
            "Endpoint",
            "EndpointRequest",
            "EndpointResponse",
        }

    def test_field_schema(self):
        schema = generate_schemas()["Field"]
        assert schema["required"] == ["name"]
        assert schema["additionalProperties"] is False
        assert "modifiers" in schema["properties"]

    def test_security_scheme_uses_document_keys(self):
        service = generate_schemas()["Service"]
        scheme = service["$defs"]["SecurityScheme"]["properties"]
        assert "in" in scheme
        assert "bearerFormat" in scheme

    def test_json_rendering(self):
        assert json.loads(generate_schemas_json()) == generate_schemas()
