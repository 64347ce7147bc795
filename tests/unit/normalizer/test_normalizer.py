import pytest

from json_shape.models import Detection, Format, ParsedValue, RawInput, Segment
from json_shape.normalizer import (
    extract_single_key_array,
    find_single_key_array,
    format_for_value,
    normalize,
)
from json_shape.orchestrator import classify


def value_at(value: object, start: int, end: int) -> ParsedValue:
    segment = Segment(start=start, end=end, text="x" * (end - start))
    return ParsedValue(value=value, segment=segment)


class TestNormalize:
    def test_orders_values_by_offset(self) -> None:
        detection = Detection(
            format=Format.JSON_LINES,
            values=[value_at({"b": 2}, 10, 17), value_at({"a": 1}, 0, 7)],
        )

        document = normalize(detection, RawInput("x" * 17))

        assert document.items() == [{"a": 1}, {"b": 2}]

    def test_merges_details_into_metadata(self) -> None:
        detection = Detection(
            format=Format.MULTI_OBJECT,
            values=[value_at(1, 0, 1), value_at(2, 2, 3)],
            details={"merged_segments": 0},
        )

        document = normalize(detection, RawInput("1 2"))

        assert document.metadata == {"input_length": 3, "merged_segments": 0}

    def test_empty_detection_raises(self) -> None:
        with pytest.raises(ValueError, match="without values"):
            normalize(Detection(format=Format.JSON_LINES, values=[]), RawInput(""))

    def test_single_value_with_many_values_raises(self) -> None:
        detection = Detection(
            format=Format.SINGLE_VALUE, values=[value_at(1, 0, 1), value_at(2, 2, 3)]
        )

        with pytest.raises(ValueError, match="exactly one value"):
            normalize(detection, RawInput("1 2"))

    @pytest.mark.parametrize("fmt", [Format.JSON_LINES, Format.MULTI_OBJECT])
    def test_multi_value_format_with_one_value_raises(self, fmt: Format) -> None:
        detection = Detection(format=fmt, values=[value_at({"a": 1}, 0, 7)])

        with pytest.raises(ValueError, match="at least two values"):
            normalize(detection, RawInput('{"a":1}'))

    def test_format_for_value(self) -> None:
        assert format_for_value([1]) is Format.ARRAY
        assert format_for_value({"a": 1}) is Format.SINGLE_VALUE
        assert format_for_value(None) is Format.SINGLE_VALUE


class TestDocumentViews:
    def test_array_rows_are_clamped(self) -> None:
        document = classify('[{"a": 1}, {"a": 2}]')

        assert document.row_count == 2
        assert document.row(-5) == '{\n  "a": 1\n}'
        assert document.row(99) == '{\n  "a": 2\n}'

    def test_multi_value_documents_read_as_arrays(self) -> None:
        document = classify('{"a":1}\n{"b":2}')

        assert document.to_json_text(indent=None) == '[{"a": 1}, {"b": 2}]'
        assert document.row(1, indent=None) == '{"b": 2}'

    def test_single_value_has_one_row(self) -> None:
        document = classify('{"a": 1}')

        assert document.row_count == 1
        assert document.row(3, indent=None) == '{"a": 1}'
        assert document.size_warning() is None

    def test_large_array_thresholds(self) -> None:
        assert not classify(str(list(range(10)))).is_large
        assert classify(str(list(range(11)))).is_large
        assert classify(str(list(range(100)))).size_warning() is None

    def test_very_large_array_warning(self) -> None:
        document = classify(str(list(range(1500))))

        assert document.size_warning() == (
            "Warning: This array contains 1,500 items. "
            "Consider using Row Mode for better performance."
        )

    def test_non_ascii_is_preserved(self) -> None:
        document = classify('{"name": "café"}')

        assert document.to_json_text(indent=None) == '{"name": "café"}'


class TestSingleKeyArray:
    def test_finds_wrapped_array(self) -> None:
        assert find_single_key_array({"data": [1, 2]}) == ("data", [1, 2])

    @pytest.mark.parametrize(
        "value",
        [{"data": []}, {"data": [1], "more": 2}, {"data": {"x": 1}}, [1, 2], "data"],
    )
    def test_ignores_other_shapes(self, value: object) -> None:
        assert find_single_key_array(value) is None

    def test_extracts_array_document(self) -> None:
        document = classify('{"items": [{"id": 1}, {"id": 2}]}')

        extracted = extract_single_key_array(document)

        assert extracted is not None
        assert extracted.format is Format.ARRAY
        assert extracted.value == [{"id": 1}, {"id": 2}]
        assert extracted.metadata["extracted_key"] == "items"
        assert extracted.values[0].segment == document.values[0].segment

    def test_extract_skips_multi_value_documents(self) -> None:
        document = classify('{"items": [1]}\n{"items": [2]}')

        assert extract_single_key_array(document) is None


class TestDocumentIdentity:
    def test_documents_are_hashable(self) -> None:
        """Hashing uses format and segments; values and metadata are left out."""
        first = classify('{"a": [1]}\n{"b": {"c": 2}}')
        second = classify('{"a": [1]}\n{"b": {"c": 2}}')

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_documents_are_frozen(self) -> None:
        document = classify("[1]")

        with pytest.raises(AttributeError):
            document.format = Format.SINGLE_VALUE  # type: ignore
