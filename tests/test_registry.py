"""Tests for the generator registry."""

import pytest

from schema2class.codegen import (
    GenerationOptions,
    GeneratorRegistry,
    JavaGenerator,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)


def test_java_is_registered():
    assert list_supported_languages() == ["java"]


@pytest.mark.parametrize("name", ["java", "JAVA", "jdk"])
def test_get_generator_by_name_or_alias(name):
    options = GenerationOptions(package_name="app")
    generator = get_generator(name, options)

    assert isinstance(generator, JavaGenerator)
    assert generator.options is options


def test_unknown_language():
    with pytest.raises(RegistryError, match="Available: java"):
        get_generator("cobol")


def test_language_info():
    info = get_language_info("jdk")
    assert info["name"] == "java"
    assert info["file_extension"] == ".java"
    assert info["aliases"] == ["jdk"]
    assert info["class"] == "JavaGenerator"


def test_register_rejects_non_generators():
    registry = GeneratorRegistry()
    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator, aliases=["jdk"])

    with pytest.raises(RegistryError, match="already points to"):
        registry.register("other", JavaGenerator, aliases=["jdk"])
    with pytest.raises(RegistryError, match="primary language"):
        registry.register("third", JavaGenerator, aliases=["java"])


def test_register_without_replace_keeps_first():
    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator, aliases=["jdk"])
    registry.register("java", JavaGenerator, aliases=["j"])

    assert registry.get_aliases_for_language("java") == ["jdk"]
    assert registry.is_supported("jdk")
    assert not registry.is_supported("j")
