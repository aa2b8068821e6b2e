import pytest

from openapi_to_models.pipeline.errors import UnionResolutionError
from openapi_to_models.pipeline.spec_source import ALTERNATIVE_REF_KEY, MODEL_DEF_KEY
from openapi_to_models.pipeline.union_resolver import resolve_one_of


def branch(name, ref_key=ALTERNATIVE_REF_KEY):
    return {
        MODEL_DEF_KEY: name,
        ref_key: f"#/components/schemas/{name}",
        "properties": {"id": {"type": "integer"}},
    }


class TestResolveOneOf:
    """Test discriminator mapping resolution"""

    def test_identity_mapping(self):
        union = resolve_one_of({"oneOf": [branch("Cat"), branch("Dog")], "discriminator": {"propertyName": "type"}})
        assert union.property_name == "type"
        assert union.mapping == {"Cat": "CatSchema", "Dog": "DogSchema"}
        assert list(union.mapping) == ["Cat", "Dog"]
        assert union.key is None

    def test_explicit_mapping(self):
        union = resolve_one_of(
            {
                "oneOf": [branch("Cat"), branch("Dog")],
                "discriminator": {
                    "propertyName": "petType",
                    "mapping": {"dog": "#/components/schemas/Dog", "cat": "#/components/schemas/Cat"},
                },
            }
        )
        assert union.mapping == {"dog": "DogSchema", "cat": "CatSchema"}

    def test_explicit_mapping_with_swagger_client_refs(self):
        union = resolve_one_of(
            {
                "oneOf": [branch("Cat", "$$ref")],
                "discriminator": {"propertyName": "type", "mapping": {"c": "#/components/schemas/Cat"}},
            }
        )
        assert union.mapping == {"c": "CatSchema"}

    def test_mapping_matches_raw_reference_not_name(self):
        with pytest.raises(UnionResolutionError, match="matches no branch"):
            resolve_one_of(
                {
                    "oneOf": [branch("Cat")],
                    "discriminator": {"propertyName": "type", "mapping": {"cat": "Cat"}},
                }
            )

    def test_unmatched_mapping_fails(self):
        with pytest.raises(UnionResolutionError, match="'bird'"):
            resolve_one_of(
                {
                    "oneOf": [branch("Cat"), branch("Dog")],
                    "discriminator": {"propertyName": "type", "mapping": {"bird": "#/components/schemas/Bird"}},
                }
            )

    def test_ambiguous_mapping_fails(self):
        with pytest.raises(UnionResolutionError, match="2 branches"):
            resolve_one_of(
                {
                    "oneOf": [branch("Cat"), branch("Cat")],
                    "discriminator": {"propertyName": "type", "mapping": {"cat": "#/components/schemas/Cat"}},
                }
            )

    def test_unnamed_branch_fails(self):
        with pytest.raises(UnionResolutionError, match="not a named model"):
            resolve_one_of({"oneOf": [{"type": "object"}], "discriminator": {"propertyName": "type"}})

    def test_branch_without_identity_fails(self):
        cat = {MODEL_DEF_KEY: "Cat", ALTERNATIVE_REF_KEY: "#/components/schemas/Cat", "properties": {"indoor": {"type": "boolean"}}}
        with pytest.raises(UnionResolutionError, match="Cat of discriminator 'type' has no identity attribute"):
            resolve_one_of({"oneOf": [cat], "discriminator": {"propertyName": "type"}})

    def test_branch_with_custom_identity(self):
        cat = {MODEL_DEF_KEY: "Cat", "x-id-attribute": "uuid", "properties": {"uuid": {"type": "string"}}}
        union = resolve_one_of({"oneOf": [cat], "discriminator": {"propertyName": "type"}})
        assert union.mapping == {"Cat": "CatSchema"}

    @pytest.mark.parametrize("discriminator", ["type", ["type"], True])
    def test_discriminator_must_be_an_object(self, discriminator):
        with pytest.raises(UnionResolutionError, match="Discriminator must be an object"):
            resolve_one_of({"oneOf": [branch("Cat")], "discriminator": discriminator})

    def test_branches_recorded(self):
        cat = branch("Cat")
        union = resolve_one_of({"oneOf": [cat], "discriminator": {"propertyName": "type"}})
        assert union.branches[0].name == "Cat"
        assert union.branches[0].schema_name == "CatSchema"
        assert union.branches[0].ref == "#/components/schemas/Cat"
        assert union.branches[0].schema is cat
        assert union.model_names == ["Cat"]
