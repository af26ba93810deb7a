import pytest

from ism_transform.payload.validator import (
    extract_backend_data,
    is_valid_backend_payload,
    payload_error_message,
)


class TestIsValidBackendPayload:
    @pytest.mark.parametrize("data", [
        None,
        {},
        {"ism": {}},
        {"ism": {"doc_meta": {}}},
        {"ism": {"doc_meta": {"title": "t"}, "interfaces": {}}},
        {"ism": {"interfaces": []}},
        "ism",
        [],
    ])
    def test_rejects(self, data):
        assert is_valid_backend_payload(data) is False

    def test_accepts_minimal(self):
        assert is_valid_backend_payload({"ism": {"doc_meta": {"title": "t"}, "interfaces": []}}) is True

    def test_accepts_any_set_doc_meta(self):
        assert is_valid_backend_payload({"ism": {"doc_meta": "t", "interfaces": []}}) is True
        assert is_valid_backend_payload({"ism": {"doc_meta": {}, "interfaces": []}}) is True

    @pytest.mark.parametrize("doc_meta", [None, "", 0, False])
    def test_rejects_unset_doc_meta(self, doc_meta):
        assert is_valid_backend_payload({"ism": {"doc_meta": doc_meta, "interfaces": []}}) is False

    def test_accepts_full_fixture(self, sample_payload):
        assert is_valid_backend_payload(sample_payload) is True


class TestExtractBackendData:
    def test_direct_payload(self, sample_payload):
        assert extract_backend_data(sample_payload) is sample_payload

    def test_values_envelope(self, sample_payload):
        assert extract_backend_data({"values": sample_payload}) is sample_payload

    def test_result_envelope(self, sample_payload):
        assert extract_backend_data({"result": sample_payload}) is sample_payload

    def test_no_ism_anywhere(self):
        assert extract_backend_data({"values": {"raw_docs": []}}) is None
        assert extract_backend_data(None) is None


class TestPayloadErrorMessage:
    def test_backend_error_message(self):
        assert payload_error_message({"__error__": {"message": "boom"}}) == "boom"
        assert payload_error_message({"__error__": {"error": "bad run"}}) == "bad run"
        assert payload_error_message({"__error__": {"code": 1}}) == "未知错误"

    def test_missing_parts(self):
        assert payload_error_message({}) == "后端未返回有效的ISM数据"
        assert payload_error_message({"ism": {"interfaces": []}}) == "后端返回的ISM数据缺少文档元信息"
        assert payload_error_message({"ism": {"doc_meta": {}}}) == "后端返回的ISM数据缺少接口信息"

    def test_not_an_object(self):
        assert payload_error_message(None) == "后端返回的数据不是有效的对象"
