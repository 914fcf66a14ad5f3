import pytest

from iockit.definition import (
    BeanDefinition,
    Dependency,
    DependencyKind,
    InvalidDefinitionError,
    Resolver,
    SourceInfo,
    define,
)
from iockit.scope import Scope


class Greeter:
    def message(self):
        raise NotImplementedError


class Alpha(Greeter):
    def __init__(self, ident=1):
        self.ident = ident

    def message(self):
        return "alpha"


class FakeResolver:
    def resolve(self, bean_type, name=None):
        return Alpha(ident=42)

    def resolve_all(self, bean_type):
        return [Alpha(ident=1), Alpha(ident=2)]


def test_define_applies_defaults():
    definition = define("alpha", Alpha, lambda resolver: Alpha())
    assert definition.scope is Scope.SINGLETON
    assert definition.exposed_types == [Alpha]
    assert definition.primary is False
    assert definition.lazy is False
    assert definition.dependencies == []
    assert definition.source == SourceInfo()


def test_define_deduplicates_exposed_types_and_drops_none():
    definition = define("alpha", Alpha, lambda r: Alpha(), exposed_types=(Greeter, Alpha, None, Greeter))
    assert definition.exposed_types == [Alpha, Greeter]


def test_define_passes_options_through():
    def injector(resolver, bean):
        bean.ident = 5

    def init_hook(bean):
        bean.ident += 1

    def destroy_hook(bean):
        bean.ident = 0

    dep = Dependency(name="repo", type=Greeter)
    source = SourceInfo(package="pkg", file="a.py", symbol="Alpha")
    definition = define(
        "alpha",
        Alpha,
        lambda r: Alpha(),
        scope=Scope.PROTOTYPE,
        primary=True,
        lazy=True,
        dependencies=[dep],
        injector=injector,
        init_hook=init_hook,
        destroy_hook=destroy_hook,
        source=source,
    )
    assert definition.scope is Scope.PROTOTYPE
    assert definition.primary and definition.lazy
    assert definition.dependencies == [dep]
    assert definition.injector is injector
    assert definition.init_hook is init_hook
    assert definition.destroy_hook is destroy_hook
    assert definition.source is source


def test_factory_receives_resolver():
    definition = define("alpha", Alpha, lambda resolver: resolver.resolve(Alpha))
    resolver = FakeResolver()
    assert isinstance(resolver, Resolver)
    bean = definition.factory(resolver)
    assert bean.message() == "alpha"
    assert bean.ident == 42


def test_exposes():
    definition = define("alpha", Alpha, lambda r: Alpha(), exposed_types=[Greeter])
    assert definition.exposes(Alpha)
    assert definition.exposes(Greeter)
    assert not definition.exposes(FakeResolver)
    assert not definition.exposes(None)


def test_description_without_source():
    definition = define("svc", Alpha, lambda r: Alpha())
    assert definition.description() == "svc|singleton"


def test_description_with_source():
    definition = define(
        "svc", Alpha, lambda r: Alpha(), scope=Scope.PROTOTYPE, source=SourceInfo(package="pkg", symbol="Sym")
    )
    assert definition.description() == "svc|prototype|pkg:Sym"


def test_description_with_invalid_scope():
    definition = BeanDefinition(name="svc", scope="weird")
    assert definition.description() == "svc|unknown"


def test_validate_requires_name():
    with pytest.raises(InvalidDefinitionError, match="requires a name"):
        define("", Alpha, lambda r: Alpha()).validate()


def test_validate_rejects_invalid_scope():
    definition = BeanDefinition(name="svc", scope="weird", exposed_types=[Alpha], factory=lambda r: Alpha())
    with pytest.raises(InvalidDefinitionError, match="invalid scope"):
        definition.validate()


def test_validate_requires_exposed_type():
    definition = BeanDefinition(name="svc", factory=lambda r: Alpha())
    with pytest.raises(InvalidDefinitionError, match="at least one type"):
        definition.validate()


def test_validate_requires_factory():
    definition = BeanDefinition(name="svc", exposed_types=[Alpha])
    with pytest.raises(InvalidDefinitionError, match="requires a factory"):
        definition.validate()


def test_validate_rejects_none_exposed_type():
    definition = BeanDefinition(name="svc", exposed_types=[Alpha, None], factory=lambda r: Alpha())
    with pytest.raises(InvalidDefinitionError, match="None exposed type"):
        definition.validate()


def test_invalid_definition_error_is_value_error():
    with pytest.raises(ValueError):
        BeanDefinition(name="").validate()


def test_dependency_defaults():
    dep = Dependency(name="repo", type=Greeter)
    assert dep.kind is DependencyKind.DIRECT
    assert dep.optional is False
    assert dep.bean_name == ""