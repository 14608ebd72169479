# tests\core\test_requests.py
import pytest

from gaudi.core.domain.parameters import Parameter
from gaudi.core.domain.requests import InvalidRequest, ValidRequest, build_request

PARAMETERS = (
    Parameter("repository"),
    Parameter("price"),
    Parameter("filters", default=dict),
)


class TestBuildRequest:
    def test_complete_input_builds_a_valid_request(self):
        request = build_request(PARAMETERS, {"repository": "repo", "price": 10})

        assert isinstance(request, ValidRequest)
        assert bool(request) is True
        assert request.price == 10
        assert request["repository"] == "repo"
        assert request.filters == {}

    def test_given_value_wins_over_default(self):
        request = build_request(PARAMETERS, {"repository": "r", "price": 1, "filters": {"a": 1}})
        assert request.filters == {"a": 1}

    def test_empty_schema_and_empty_input(self):
        request = build_request((), {})

        assert request
        assert len(request) == 0

    def test_none_input_is_treated_as_empty(self):
        assert build_request((), None)

    @pytest.mark.parametrize("missing", [["repository"], ["price"], ["repository", "price"]])
    def test_every_missing_parameter_is_reported(self, missing):
        raw = {"repository": "r", "price": 1}
        for name in missing:
            del raw[name]

        request = build_request(PARAMETERS, raw)

        assert isinstance(request, InvalidRequest)
        assert request.errors == tuple((name, "is missing") for name in missing)

    def test_undeclared_key_is_rejected_even_when_input_is_complete(self):
        request = build_request(PARAMETERS, {"repository": "r", "price": 1, "colour": "red"})

        assert not request
        assert request.errors == (("colour", "is undeclared"),)

    def test_all_problems_are_collected(self):
        request = build_request(PARAMETERS, {"colour": "red", "size": 3})

        assert request.errors == (
            ("colour", "is undeclared"),
            ("size", "is undeclared"),
            ("repository", "is missing"),
            ("price", "is missing"),
        )

    def test_default_isolation_between_requests(self):
        """
        Scenario: Two requests rely on the same mutable default.
        Expected: Mutating one never shows up in the other.
        """
        first = build_request(PARAMETERS, {"repository": "r", "price": 1})
        second = build_request(PARAMETERS, {"repository": "r", "price": 1})

        first.filters["price__lt"] = 50

        assert second.filters == {}


class TestValidRequest:
    def test_is_immutable(self):
        request = ValidRequest({"price": 1})

        with pytest.raises(AttributeError):
            request.price = 2
        with pytest.raises(TypeError):
            request["price"] = 2

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            ValidRequest({}).price

    def test_empty_request_is_truthy(self):
        assert bool(ValidRequest()) is True


class TestInvalidRequest:
    def test_is_falsy(self):
        assert bool(InvalidRequest()) is False
        assert bool(InvalidRequest([("a", "is missing")])) is False

    def test_describe_joins_errors_in_order(self):
        request = InvalidRequest([("a", "is missing"), ("b", "is undeclared")])
        assert request.describe() == "a: is missing\nb: is undeclared"

    def test_add_error(self):
        request = InvalidRequest()
        assert not request.has_errors()

        request.add_error("price", "is missing")

        assert request.has_errors()
        assert request.errors == (("price", "is missing"),)
