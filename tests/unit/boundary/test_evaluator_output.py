import pytest

from json_shape.evaluator_output import parse_evaluator_output


class TestParseEvaluatorOutput:
    def test_single_object(self) -> None:
        assert parse_evaluator_output('{"name": "a", "email": "b"}\n') == {
            "name": "a",
            "email": "b",
        }

    def test_single_array(self) -> None:
        assert parse_evaluator_output("[1, 2]") == [1, 2]

    def test_object_per_line(self) -> None:
        """jq emits one result per line."""
        text = '{"name": "a"}\n{"name": "b"}\n'

        assert parse_evaluator_output(text) == [{"name": "a"}, {"name": "b"}]

    def test_mixed_lines_are_left_alone(self) -> None:
        text = '"a"\n{"name": "b"}'

        assert parse_evaluator_output(text) == text

    def test_lines_with_unparseable_line(self) -> None:
        text = '[1]\n{"b": }\n'

        assert parse_evaluator_output(text) == text

    @pytest.mark.parametrize("value", ["plain text", "42", None, 3, {"a": 1}])
    def test_other_results_pass_through(self, value: object) -> None:
        assert parse_evaluator_output(value) == value
