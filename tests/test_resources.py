from api_spec_overlay.generator.resources import materialize_resources
from api_spec_overlay.parser.base import Object, Resource, ResourceField, Service


def _users(**kwargs) -> Resource:
    return Resource(
        name="Users",
        description="Registered users",
        operations=["Read"],
        fields=[
            ResourceField(name="name", type="String", operations=["Read"]),
            ResourceField(name="password", type="String", operations=["Create"]),
        ],
        **kwargs,
    )


class TestMaterializeResources:
    def test_auto_columns_then_read_fields(self):
        result = materialize_resources(Service(resources=[_users()]))
        users = result.get_object("Users")
        assert users.description == "Registered users"
        assert [(f.name, f.type, f.modifiers) for f in users.fields] == [
            ("ID", "UUID", []),
            ("CreatedAt", "Timestamp", []),
            ("CreatedBy", "UUID", ["Nullable"]),
            ("UpdatedAt", "Timestamp", []),
            ("UpdatedBy", "UUID", ["Nullable"]),
            ("name", "String", []),
        ]

    def test_skip_auto_columns_uses_meta(self):
        result = materialize_resources(Service(resources=[_users(skip_auto_columns=True)]))
        assert [(f.name, f.type) for f in result.get_object("Users").fields] == [
            ("Meta", "Meta"),
            ("name", "String"),
        ]

    def test_examples_derived_for_primitives(self):
        resource = Resource(
            name="Events",
            operations=["Read"],
            fields=[
                ResourceField(name="day", type="Date", operations=["Read"]),
                ResourceField(name="title", type="String", example="Launch", operations=["Read"]),
            ],
        )
        events = materialize_resources(Service(resources=[resource])).get_object("Events")
        assert events.get_field("ID").example == "123e4567-e89b-12d3-a456-426614174000"
        assert events.get_field("day").example == "2024-01-15"
        assert events.get_field("title").example == "Launch"

    def test_resource_without_read_skipped(self):
        resource = Resource(name="Audit", operations=["Create"])
        assert materialize_resources(Service(resources=[resource])).objects == []

    def test_existing_object_kept(self):
        existing = Object(name="Users", description="hand written")
        result = materialize_resources(Service(objects=[existing], resources=[_users()]))
        assert len(result.objects) == 1
        assert result.objects[0].description == "hand written"
