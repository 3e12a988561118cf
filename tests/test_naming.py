from api_spec_overlay.naming import camel_case, pluralize, to_kebab_case


class TestToKebabCase:
    def test_lowercases_without_splitting_words(self):
        assert to_kebab_case("UserProfiles") == "userprofiles"

    def test_underscores_and_spaces(self):
        assert to_kebab_case("user_profile") == "user-profile"
        assert to_kebab_case("User Profile") == "user-profile"

    def test_empty(self):
        assert to_kebab_case("") == ""


class TestCamelCase:
    def test_snake_case(self):
        assert camel_case("api_key") == "apiKey"

    def test_initialisms_after_first_word(self):
        assert camel_case("user_id") == "userID"
        assert camel_case("id") == "id"

    def test_empty_segments_dropped(self):
        assert camel_case("__created__at") == "createdAt"


class TestPluralize:
    def test_regular(self):
        assert pluralize("Person") == "Persons"
        assert pluralize("Child") == "Childs"

    def test_consonant_y(self):
        assert pluralize("Category") == "Categories"
        assert pluralize("Key") == "Keys"

    def test_sibilant_endings(self):
        assert pluralize("Box") == "Boxes"
        assert pluralize("Address") == "Addresses"
        assert pluralize("Match") == "Matches"

    def test_already_plural(self):
        assert pluralize("Users") == "Users"

    def test_empty(self):
        assert pluralize("") == ""
