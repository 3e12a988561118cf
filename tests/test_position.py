from api_spec_overlay.errors import ValidationError
from api_spec_overlay.parser.position import enhance_error, locate

DOCUMENT = """name: Shop
resources:
  - name: Orders
    operations: [create]
    fields:
      - name: total
        type: Int
"""


class TestLocate:
    def test_first_key_position(self):
        assert locate(DOCUMENT, "operations") == (4, 5)
        assert locate(DOCUMENT, "type") == (7, 9)

    def test_missing_key(self):
        assert locate(DOCUMENT, "modifiers") is None

    def test_json_document(self):
        text = '{\n  "name": "Shop",\n  "retry": {"strategy": "linear"}\n}\n'
        assert locate(text, "retry") == (3, 3)


class TestEnhanceError:
    def test_attaches_position(self):
        error = enhance_error(ValidationError("invalid operation 'create'", path="operations"), DOCUMENT)
        assert (error.line, error.column) == (4, 5)
        assert str(error) == "line 4, column 5: invalid operation 'create'"

    def test_unknown_key_leaves_error_unchanged(self):
        error = ValidationError("invalid modifier 'Optional'", path="modifiers")
        assert enhance_error(error, DOCUMENT) is error

    def test_unparseable_document_leaves_error_unchanged(self):
        error = ValidationError("invalid operation 'x'", path="operations")
        enhanced = enhance_error(error, "key: [unclosed\n")
        assert enhanced.line is None
        assert str(enhanced) == "invalid operation 'x'"

    def test_wrap_keeps_position(self):
        error = ValidationError("bad", path="type", line=2, column=3).wrap("validation failed")
        assert str(error) == "line 2, column 3: validation failed: bad"
