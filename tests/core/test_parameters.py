# tests\core\test_parameters.py
import threading

import pytest

from gaudi.core.domain.exceptions import ParameterDeclarationError
from gaudi.core.domain.parameters import MISSING, Parameter, normalize_parameters
from gaudi.core.use_cases.base import UseCase


class TestParameter:
    def test_parameter_without_default_is_required(self):
        parameter = Parameter("price")
        assert parameter.required is True
        assert parameter.default is MISSING

    def test_parameter_with_default_is_optional(self):
        assert Parameter("filters", default=None).required is False
        assert Parameter("filters", default=dict).required is False

    def test_producer_default_is_called(self):
        parameter = Parameter("filters", default=dict)
        first = parameter.produce_default()
        second = parameter.produce_default()

        assert first == {}
        assert first is not second

    def test_container_default_is_copied(self):
        """A literal mutable default must never be handed out twice."""
        parameter = Parameter("tags", default=["a"])
        first = parameter.produce_default()
        first.append("b")

        assert parameter.produce_default() == ["a"]

    def test_required_parameter_has_no_default_to_produce(self):
        with pytest.raises(ParameterDeclarationError):
            Parameter("price").produce_default()

    def test_other_defaults_are_handed_out_as_is(self):
        """
        Scenario: The default is a shared collaborator, not a container.
        Expected: Every request receives that very object.
        """
        lock = threading.Lock()
        parameter = Parameter("lock", default=lock)

        assert parameter.produce_default() is lock
        assert parameter.produce_default() is lock


class TestNormalizeParameters:
    def test_strings_become_required_parameters(self):
        parameters = normalize_parameters("Owner", ["price", Parameter("size", default=0)])

        assert isinstance(parameters, tuple)
        assert [p.name for p in parameters] == ["price", "size"]
        assert parameters[0].required
        assert not parameters[1].required

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(ParameterDeclarationError) as excinfo:
            normalize_parameters("Owner", ["price", Parameter("price", default=1)])

        assert "duplicate parameter 'price'" in str(excinfo.value)

    def test_unsupported_entries_are_rejected(self):
        with pytest.raises(ParameterDeclarationError):
            normalize_parameters("Owner", [{"name": "price"}])

    def test_a_bare_string_is_not_a_parameter_list(self):
        with pytest.raises(ParameterDeclarationError):
            normalize_parameters("Owner", "price")


class TestClassDefinition:
    def test_parameters_are_checked_when_the_class_is_defined(self):
        """
        Scenario: A use case declares the same parameter twice.
        Expected: The class statement itself fails.
        """
        with pytest.raises(ParameterDeclarationError):
            class Broken(UseCase):
                parameters = ["a", "a"]

    def test_parameters_are_frozen_after_definition(self):
        class Quote(UseCase):
            parameters = ["price"]

        assert Quote.parameters == (Parameter("price"),)
        assert Quote.name == "Quote"

    def test_declared_name_is_kept(self):
        class Quote(UseCase):
            name = "price_quote"

        assert Quote.name == "price_quote"
