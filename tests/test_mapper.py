from ism_transform.deriver.mapper import field_id_for, map_fields, string_hash


class TestStringHash:
    def test_known_values(self):
        assert string_hash("") == 0
        assert string_hash("ab") == 97 * 31 + 98
        assert string_hash("hello") == 99162322

    def test_stays_within_32_bits(self):
        assert 0 <= string_hash("x" * 500) < 2**32

    def test_field_id_format(self):
        field_id = field_id_for("page", "query.page")
        assert field_id.startswith("field-")
        assert len(field_id) == len("field-") + 8
        assert field_id == field_id_for("page", "query.page")
        assert field_id != field_id_for("page", "response.data.page")


class TestMapFields:
    def test_splits_by_expression_role(self):
        result = map_fields([
            {"name": "用户ID", "expression": "query.userId", "data_type": "string", "required": True},
            {"name": "价格", "expression": "response.data.items[].price", "data_type": "float64"},
        ])
        assert [f.name for f in result.request_fields] == ["用户ID"]
        assert [f.name for f in result.response_fields] == ["价格"]
        assert result.request_fields[0].required is True
        assert result.response_fields[0].type == "number"

    def test_ambiguous_expression_goes_to_request(self):
        result = map_fields([{"name": "邮箱", "expression": "email"}])
        assert len(result.request_fields) == 1
        assert result.response_fields == []

    def test_response_description_defaults_to_empty(self):
        result = map_fields([{"name": "total", "expression": "response.data.total"}])
        assert result.response_fields[0].description == ""

    def test_request_description_kept(self):
        result = map_fields([{"name": "id", "expression": "query.id", "description": "主键"}])
        assert result.request_fields[0].description == "主键"

    def test_type_alias_and_unknown_type(self):
        result = map_fields([
            {"name": "flag", "expression": "query.flag", "type": "boolean"},
            {"name": "when", "expression": "query.when", "data_type": "timestamp"},
        ])
        assert [f.type for f in result.request_fields] == ["boolean", "string"]

    def test_ids_are_deterministic(self):
        fields = [{"name": "page", "expression": "query.page"}]
        assert map_fields(fields) == map_fields(fields)
        assert map_fields(fields).request_fields[0].id == field_id_for("page", "query.page")

    def test_colliding_ids_get_positional_suffix(self):
        result = map_fields([
            {"name": "page", "expression": "query.page"},
            {"name": "page", "expression": "query.page"},
        ])
        first, second = result.request_fields
        assert second.id == f"{first.id}-1"

    def test_empty_and_malformed_input(self):
        assert map_fields(None).request_fields == []
        result = map_fields(["oops", None, {"expression": "query.x"}])
        assert len(result.request_fields) == 1
        assert result.request_fields[0].name == ""
