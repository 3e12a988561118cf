from api_spec_overlay.generator.defaults import inject_defaults
from api_spec_overlay.parser.base import Enum, Field, Object, Service


class TestInjectDefaults:
    def test_adds_catalog_to_empty_service(self):
        result = inject_defaults(Service(name="Empty"))
        assert [e.name for e in result.enums] == ["ErrorCode", "ErrorFieldCode"]
        assert [o.name for o in result.objects] == ["Error", "ErrorField", "Pagination", "Meta"]

    def test_error_code_values(self):
        result = inject_defaults(Service())
        codes = [v.name for v in result.enums[0].values]
        assert codes == [
            "BadRequest",
            "Unauthorized",
            "Forbidden",
            "NotFound",
            "Conflict",
            "UnprocessableEntity",
            "RateLimited",
            "Internal",
        ]
        assert result.enums[0].description == "Standard error codes used in API responses"

    def test_error_objects_reference_enums(self):
        result = inject_defaults(Service())
        assert [f.type for f in result.get_object("Error").fields] == ["ErrorCode", "String"]
        assert [f.type for f in result.get_object("ErrorField").fields] == ["ErrorFieldCode", "String"]

    def test_meta_by_columns_nullable(self):
        meta = inject_defaults(Service()).get_object("Meta")
        assert [f.name for f in meta.fields] == ["CreatedAt", "CreatedBy", "UpdatedAt", "UpdatedBy"]
        assert meta.get_field("CreatedBy").modifiers == ["Nullable"]

    def test_existing_pagination_not_duplicated(self):
        custom = Object(name="Pagination", description="custom", fields=[Field(name="cursor", type="String")])
        result = inject_defaults(Service(objects=[custom]))
        paginations = [o for o in result.objects if o.name == "Pagination"]
        assert len(paginations) == 1
        assert paginations[0].description == "custom"
        assert result.objects[0].name == "Pagination"

    def test_existing_enum_kept_in_place(self):
        result = inject_defaults(Service(enums=[Enum(name="ErrorCode", description="mine")]))
        assert [e.name for e in result.enums] == ["ErrorCode", "ErrorFieldCode"]
        assert result.enums[0].description == "mine"

    def test_input_not_mutated(self):
        service = Service()
        inject_defaults(service)
        assert service.enums == []
        assert service.objects == []
