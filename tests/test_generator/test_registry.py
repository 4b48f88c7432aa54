"""Tests for model registries and dispatch."""

import pytest

from generator import (
    DIRECTED_MODELS,
    UNDIRECTED_MODELS,
    BarabasiAlbertModel,
    describe_models,
    directed_generator_from_str,
    find_model,
    generator_from_spec,
    generator_from_str,
    iter_directed_models,
    iter_undirected_models,
    undirected_generator_from_str,
)
from models import (
    ArityMismatchError,
    EdgeDirection,
    GraphSpec,
    ParameterParseError,
    ParameterRangeError,
    UnknownModelError,
)

MODEL_NAMES = ["barabasi_albert", "chain", "erdos_renyi", "tree", "watts_strogatz"]


class TestRegistries:
    """Tests for the fixed model collections."""

    def test_same_models_for_both_directions(self):
        """Test both registries list the five models in the same order."""
        assert [m.name for m in iter_directed_models()] == MODEL_NAMES
        assert [m.name for m in iter_undirected_models()] == MODEL_NAMES

    def test_models_carry_their_direction(self):
        """Test each registry holds models of its direction."""
        assert all(model.directed for model in DIRECTED_MODELS)
        assert not any(model.directed for model in UNDIRECTED_MODELS)

    def test_registries_are_immutable(self):
        """Test registries are tuples built once."""
        assert isinstance(DIRECTED_MODELS, tuple)
        assert tuple(iter_directed_models()) == DIRECTED_MODELS

    def test_names_are_unique(self):
        """Test no name or alias is shared by two models."""
        names = [name for model in DIRECTED_MODELS for name in model.names]
        assert len(names) == len(set(names))


class TestFindModel:
    """Tests for name lookup."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ba", "barabasi_albert"),
            ("er", "erdos_renyi"),
            ("ws", "watts_strogatz"),
            ("tree", "tree"),
            ("chain", "chain"),
        ],
    )
    def test_alias_lookup(self, name, expected, direction):
        """Test names and aliases resolve to the canonical model."""
        model = find_model(name, direction)
        assert model.name == expected
        assert model.direction is direction

    def test_returns_registered_instance(self):
        """Test lookup hands out the registry's own descriptors."""
        model = find_model("barabasi_albert", EdgeDirection.DIRECTED)
        assert isinstance(model, BarabasiAlbertModel)
        assert model is DIRECTED_MODELS[0]

    @pytest.mark.parametrize("name", ["foo", "Chain", "", "erdos-renyi"])
    def test_unknown_name(self, name):
        """Test lookup is exact and unknown names raise UnknownModelError."""
        with pytest.raises(UnknownModelError) as exc_info:
            find_model(name, EdgeDirection.UNDIRECTED)
        assert "chain" in exc_info.value.available
        assert "ba" in exc_info.value.available


class TestGeneratorFromStr:
    """Tests for specification string dispatch."""

    def test_valid_specs(self):
        """Test every documented form builds a generator."""
        for text in ["chain/3", "er/10,0.5", "ba/10,2", "tree/5", "ws/10,2,0.1"]:
            assert directed_generator_from_str(text).directed
            assert not undirected_generator_from_str(text).directed

    def test_unknown_model(self):
        """Test foo/3 raises UnknownModelError."""
        with pytest.raises(UnknownModelError):
            directed_generator_from_str("foo/3")

    def test_missing_parameters(self):
        """Test chain without parameters raises ArityMismatchError."""
        with pytest.raises(ArityMismatchError):
            directed_generator_from_str("chain")

    def test_wrong_parameter_count(self):
        """Test chain/1,2,3 raises ArityMismatchError."""
        with pytest.raises(ArityMismatchError):
            undirected_generator_from_str("chain/1,2,3")

    def test_bad_token(self):
        """Test unparsable tokens raise ParameterParseError."""
        with pytest.raises(ParameterParseError):
            undirected_generator_from_str("tree/many")

    def test_oversized_count(self):
        """Test huge digit strings stay within the error hierarchy."""
        with pytest.raises(ParameterParseError):
            undirected_generator_from_str("chain/" + "1" * 5000)

    def test_attachment_count_too_large(self):
        """Test barabasi_albert/5,10 raises ParameterRangeError."""
        with pytest.raises(ParameterRangeError):
            directed_generator_from_str("barabasi_albert/5,10")

    def test_unknown_name_checked_first(self):
        """Test an unknown name is reported even with bad tokens."""
        with pytest.raises(UnknownModelError):
            generator_from_str("foo/x,y,z")

    def test_from_spec(self):
        """Test prebuilt GraphSpec values dispatch too."""
        generator = generator_from_spec(GraphSpec("er", ("5", "1")), EdgeDirection.UNDIRECTED)
        assert generator.name == "erdos_renyi"
        assert generator.params.p == 1.0


class TestDescribeModels:
    """Tests for model listings."""

    def test_one_line_per_model(self):
        """Test listing covers every model with usage and aliases."""
        lines = describe_models(EdgeDirection.UNDIRECTED)

        assert len(lines) == 5
        assert lines[0].startswith("barabasi_albert/n,m (alias: ba): ")
        assert any(line.startswith("watts_strogatz/n,k,p (alias: ws)") for line in lines)
        assert any(line.startswith("chain/n: ") for line in lines)
