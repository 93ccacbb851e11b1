import pytest

from har_to_openapi.engine.classifier import classify


class TestClassify:
    @pytest.mark.parametrize("segment", [
        "0f8fad5b-d9cb-469f-a165-70867728950e",
        "0F8FAD5B-D9CB-469F-A165-70867728950E",
    ])
    def test_uuid(self, segment):
        assert classify(segment).kind == "uuid"

    def test_integer(self):
        result = classify("42")
        assert result.kind == "integer"
        assert result.value == "42"

    def test_float(self):
        assert classify("3.14").kind == "float"

    @pytest.mark.parametrize("segment", ["users", "", "v2", "1.2.3", "12abc", "-5", "0f8fad5b-d9cb"])
    def test_literal(self, segment):
        result = classify(segment)
        assert result.kind == "none"
        assert result.is_dynamic is False

    def test_integer_wins_over_float(self):
        assert classify("007").kind == "integer"
