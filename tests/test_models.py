from ism_transform.models import APIInterface, DocumentSection, RequestField, ResponseField


class TestFields:
    def test_request_field_defaults(self):
        f = RequestField(id="req-1", name="page", expression="query.page")
        assert f.required is False
        assert f.type == "string"
        assert f.description is None

    def test_response_field_always_has_description(self):
        f = ResponseField(id="resp-1", name="total", expression="response.data.total")
        assert f.description == ""


class TestApiInterface:
    def test_serializes_with_ui_aliases(self):
        api = APIInterface(
            id="api-1",
            name="用户列表",
            method="GET",
            endpoint="/api/v1/data",
            source_section="section-1",
            request_fields=[RequestField(id="req-page", name="page", expression="query.page")],
        )
        data = api.model_dump(by_alias=True)
        assert data["sourceSection"] == "section-1"
        assert data["requestFields"][0]["name"] == "page"
        assert data["responseFields"] == []

    def test_roundtrip_from_aliases(self):
        api = APIInterface(
            id="api-1", name="x", method="POST", endpoint="/api/v1/data", source_section="section-1",
        )
        api2 = APIInterface(**api.model_dump(by_alias=True))
        assert api2 == api


class TestDocumentSection:
    def test_api_flag_alias(self):
        section = DocumentSection(id="section-interface-1", title="t", content="c", is_api=True)
        data = section.model_dump(by_alias=True)
        assert data["isAPI"] is True
        assert data["chunkId"] is None
