"""
Unit tests for the AutoMapper engine

Tests:
- Basic mapping: public members, existing objects, callbacks, sequences
- Construction: skipping constructors, argument-requiring constructors
- Nested mapping: explicit map_to, declared member types, sequences
- Naming conventions and reverse mapping
- Dynamic sources (dict, SimpleNamespace) and restricted members
- Failure policy: unknown pairs, strict from_property, unwritable members
"""

import logging
from types import SimpleNamespace

import pytest

from automapper import AutoMapper
from automapper.exceptions import (
    MappingNotRegistered,
    SourceMemberMissing,
    UnsupportedConstruction,
)
from automapper.mapping import MappingRegistry, Operation
from automapper.naming import CamelCaseNamingConvention, SnakeCaseNamingConvention
from automapper.settings import MapperSettings

from sample_models import (
    Address,
    AddressDto,
    Article,
    ArticleDto,
    CamelCaseSource,
    ChildClass,
    ChildClassDto,
    ConstructorDestination,
    ConstructorSource,
    CreatePostViewModel,
    Customer,
    Destination,
    FrozenPoint,
    Money,
    Order,
    OrderDto,
    OrderLine,
    OrderLineDto,
    ParentClass,
    ParentClassDto,
    Person,
    PersonDto,
    Post,
    SlottedPoint,
    SnakeCaseSource,
    Source,
    Temperature,
    Unbuildable,
    Visibility,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def settings():
    return MapperSettings()


@pytest.fixture
def registry():
    return MappingRegistry()


@pytest.fixture
def mapper(registry, settings):
    return AutoMapper(registry, settings=settings)


# ============================================================================
# TEST: Basic mapping
# ============================================================================


class TestBasicMapping:
    """Tests for straightforward member copying"""

    def test_initialize_with_callback(self, settings):
        mapper = AutoMapper.initialize(
            lambda registry: registry.register(Source, Destination),
            settings=settings,
        )

        destination = mapper.map(Source(), Destination)
        assert isinstance(destination, Destination)

    def test_maps_a_public_member(self, registry, mapper):
        registry.register(Source, Destination)

        destination = mapper.map(Source(name="Hello"), Destination)

        assert isinstance(destination, Destination)
        assert destination.name == "Hello"

    def test_map_onto_existing_object(self, registry, mapper):
        registry.register(Source, Destination)
        destination = Destination()

        result = mapper.map_onto(Source(name="Hello"), destination)

        assert result is destination
        assert destination.name == "Hello"

    def test_map_to_object_alias(self, registry, mapper):
        registry.register(Source, Destination)
        destination = mapper.map_to_object(Source(name="Hi"), Destination())
        assert destination.name == "Hi"

    def test_maps_with_a_callback(self, registry, mapper):
        registry.register(Source, Destination) \
            .for_member("name", lambda source: "NewName")

        destination = mapper.map(Source(), Destination)

        assert destination.name == "NewName"

    def test_map_from_receives_source(self, registry, mapper):
        registry.register(Source, Destination) \
            .for_member("name", Operation.map_from(lambda source: source.name.upper()))

        assert mapper.map(Source(name="loud"), Destination).name == "LOUD"

    def test_set_to(self, registry, mapper):
        registry.register(Source, Destination).for_member("name", Operation.set_to(42))
        assert mapper.map(Source(name="ignored"), Destination).name == 42

    def test_ignore_leaves_default(self, registry, mapper):
        registry.register(Source, Destination).for_member("name", Operation.ignore())
        assert mapper.map(Source(name="Hello"), Destination).name is None

    def test_registry_can_be_retrieved(self, registry, mapper):
        assert mapper.get_registry() is registry
        assert mapper.registry is registry

    def test_default_registry_is_per_mapper(self, settings):
        assert AutoMapper(settings=settings).registry is not AutoMapper(settings=settings).registry

    def test_maps_multiple(self, registry, mapper):
        registry.register(Source, Destination)

        result = mapper.map_multiple([Source("One"), Source("Two"), Source("Three")], Destination)

        assert result == [Destination("One"), Destination("Two"), Destination("Three")]

    def test_map_sequence_preserves_order_and_length(self, registry, mapper):
        registry.register(Source, Destination)
        sources = [Source(str(i)) for i in range(5)]

        result = mapper.map_sequence(sources, Destination)

        assert len(result) == 5
        assert result == [mapper.map(source, Destination) for source in sources]

    def test_map_sequence_empty(self, registry, mapper):
        registry.register(Source, Destination)
        assert mapper.map_sequence([], Destination) == []

    def test_map_none(self, registry, mapper):
        registry.register(Source, Destination)
        assert mapper.map(None, Destination) is None

    def test_mapping_is_idempotent(self, registry, mapper):
        registry.register(Source, Destination)
        source = Source(name="same")

        assert mapper.map(source, Destination) == mapper.map(source, Destination)

    def test_maps_to_an_object_with_less_members(self, registry, mapper):
        registry.register(CreatePostViewModel, Post)

        post = mapper.map(CreatePostViewModel(title="Im a title", body="Im a body"), Post)

        assert isinstance(post, Post)
        assert post.title == "Im a title"
        assert post.body == "Im a body"
        assert getattr(post, "id", None) is None


# ============================================================================
# TEST: Construction
# ============================================================================


class TestConstruction:
    """Tests for destination construction policy"""

    def test_can_skip_the_constructor(self, registry, mapper):
        registry.register(ConstructorSource, ConstructorDestination).skip_constructor()

        result = mapper.map(ConstructorSource(), ConstructorDestination)

        assert result.constructor_ran is False
        assert result.value == "from source"

    def test_runs_the_constructor_by_default(self, registry, mapper):
        registry.register(ConstructorSource, ConstructorDestination)

        result = mapper.map(ConstructorSource(), ConstructorDestination)

        assert result.constructor_ran is True

    def test_settings_skip_constructor(self, registry):
        registry.register(ConstructorSource, ConstructorDestination)
        mapper = AutoMapper(registry, settings=MapperSettings(skip_constructor=True))

        assert mapper.map(ConstructorSource(), ConstructorDestination).constructor_ran is False

    def test_definition_overrides_settings(self, registry):
        registry.register(ConstructorSource, ConstructorDestination).dont_skip_constructor()
        mapper = AutoMapper(registry, settings=MapperSettings(skip_constructor=True))

        assert mapper.map(ConstructorSource(), ConstructorDestination).constructor_ran is True

    def test_constructor_with_invariants_is_skipped(self, registry, mapper):
        registry.register(dict, Money)

        money = mapper.map({"amount": 10, "currency": "EUR"}, Money)

        assert money.amount == 10
        assert money.currency == "EUR"

    def test_init_only_members_are_filled(self, registry, mapper):
        registry.register(dict, Customer)

        customer = mapper.map({"name": "Ada", "city": "London"}, Customer)

        assert isinstance(customer, Customer)
        assert vars(customer) == {"name": "Ada", "city": "London"}

    def test_frozen_dataclass_destination(self, registry, mapper):
        registry.register(dict, FrozenPoint)

        point = mapper.map({"x": 1, "y": 2}, FrozenPoint)

        assert point == FrozenPoint(1, 2)

    def test_slotted_destination(self, registry, mapper):
        registry.register(dict, SlottedPoint)

        point = mapper.map({"x": 3, "y": 4}, SlottedPoint)

        assert (point.x, point.y) == (3, 4)

    def test_unsupported_construction(self, registry, mapper):
        registry.register(dict, Unbuildable)

        with pytest.raises(UnsupportedConstruction):
            mapper.map({"handle": 1}, Unbuildable)


# ============================================================================
# TEST: Nested mapping
# ============================================================================


class TestNestedMapping:
    """Tests for map_to and declared-type nesting"""

    def test_maps_nested_members(self, registry, mapper):
        registry.register(ChildClass, ChildClassDto)
        registry.register(ParentClass, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto))

        result = mapper.map(ParentClass(child=ChildClass(name="ChildName")), ParentClassDto)

        assert isinstance(result.child, ChildClassDto)
        assert result.child.name == "ChildName"

    def test_nested_none_stays_none(self, registry, mapper):
        registry.register(ChildClass, ChildClassDto)
        registry.register(ParentClass, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto))

        assert mapper.map(ParentClass(), ParentClassDto).child is None

    def test_map_to_unregistered_pair_fails(self, registry, mapper):
        registry.register(ParentClass, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto))

        with pytest.raises(MappingNotRegistered):
            mapper.map(ParentClass(child=ChildClass(name="x")), ParentClassDto)

    def test_map_to_passes_through_instances(self, registry, mapper):
        registry.register(ParentClassDto, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto))
        child = ChildClassDto(name="kept")

        result = mapper.map(ParentClassDto(child=child), ParentClassDto)

        assert result.child is child

    def test_map_to_sequence_keeps_container(self, registry, mapper):
        registry.register(OrderLine, OrderLineDto)
        registry.register(Order, OrderDto).for_member("lines", Operation.map_to(OrderLineDto))

        order = Order(reference="A1", lines=(OrderLine("p1", 1), OrderLine("p2", 2)))
        result = mapper.map(order, OrderDto)

        assert result.lines == (OrderLineDto("p1", 1), OrderLineDto("p2", 2))

    def test_map_to_with_from_property(self, registry, mapper):
        registry.register(ChildClass, ChildClassDto)
        registry.register(dict, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto, from_property="kid"))

        result = mapper.map({"kid": ChildClass(name="k")}, ParentClassDto)

        assert result.child == ChildClassDto(name="k")

    def test_declared_member_type_is_mapped(self, registry, mapper):
        registry.register(Address, AddressDto)
        registry.register(Person, PersonDto)

        person = Person(
            name="Ada",
            address=Address("Main St", "London"),
            previous_addresses=[Address("Old St", "Paris"), Address("Elm St", "Rome")],
        )
        result = mapper.map(person, PersonDto)

        assert result.address == AddressDto("Main St", "London")
        assert result.previous_addresses == [
            AddressDto("Old St", "Paris"),
            AddressDto("Elm St", "Rome"),
        ]

    def test_declared_member_type_without_mapping_is_copied(self, registry, mapper):
        registry.register(Person, PersonDto)
        address = Address("Main St", "London")

        result = mapper.map(Person(address=address), PersonDto)

        assert result.address is address


# ============================================================================
# TEST: Naming conventions and reverse mapping
# ============================================================================


class TestNamingConventionsAndReverse:
    """Tests for convention translation and reverse mapping"""

    def test_resolves_naming_conventions(self, registry, mapper):
        registry.register(CamelCaseSource, SnakeCaseSource) \
            .with_naming_conventions(CamelCaseNamingConvention(), SnakeCaseNamingConvention()) \
            .for_member("some_other_property", Operation.from_property("anotherProperty")) \
            .reverse_map()

        snake = mapper.map(
            CamelCaseSource(propertyName="camel", anotherProperty="someOther"),
            SnakeCaseSource,
        )

        assert snake.property_name == "camel"
        assert snake.some_other_property == "someOther"

        snake.property_name = "snake"
        snake.some_other_property = "snakeprop"
        camel = mapper.map(snake, CamelCaseSource)

        assert camel.propertyName == "snake"
        assert camel.anotherProperty == "snakeprop"

    def test_reverse_map_with_private_members(self, registry, mapper):
        registry.register(Source, Visibility) \
            .for_member("__private_property", Operation.from_property("name")) \
            .reverse_map()

        result = mapper.map(Source(name="Hello"), Visibility)
        assert result.get_private_property() == "Hello"

        result = mapper.map(Visibility(), Source)
        assert result.name is True

    def test_reverse_nested_mapping(self, registry, mapper):
        registry.register(ChildClass, ChildClassDto).reverse_map()
        registry.register(ParentClass, ParentClassDto) \
            .for_member("child", Operation.map_to(ChildClassDto)) \
            .reverse_map()

        result = mapper.map(ParentClassDto(child=ChildClassDto(name="back")), ParentClass)

        assert result.child == ChildClass(name="back")

    def test_custom_operation_is_not_reversed(self, registry, mapper):
        registry.register(Source, Destination) \
            .for_member("name", lambda source: "computed") \
            .reverse_map()

        assert mapper.map(Source(name="x"), Destination).name == "computed"
        assert mapper.map(Destination(name="plain"), Source).name == "plain"

    def test_unregistered_pair(self, registry, mapper):
        registry.register(Source, Destination)

        with pytest.raises(MappingNotRegistered):
            mapper.map(Destination(name="x"), Source)


# ============================================================================
# TEST: Dynamic sources and restricted members
# ============================================================================


class TestDynamicSourcesAndVisibility:
    """Tests for dict/namespace sources and protected/private members"""

    def test_maps_from_a_dict(self, registry, mapper):
        registry.register(dict, Destination)

        assert mapper.map({"name": "sourceName"}, Destination).name == "sourceName"

    def test_maps_from_a_namespace(self, registry, mapper):
        registry.register(SimpleNamespace, Destination)

        assert mapper.map(SimpleNamespace(name="sourceName"), Destination).name == "sourceName"

    def test_source_methods_are_not_copied(self, registry, mapper):
        registry.register(Article, ArticleDto)

        result = mapper.map(Article(headline="hello"), ArticleDto)

        assert result == ArticleDto(title=None, summary=None, headline="hello")

    def test_maps_from_a_private_member(self, registry, mapper):
        registry.register(Visibility, Destination) \
            .for_member("name", Operation.from_property("__private_property"))

        assert mapper.map(Visibility(), Destination).name is True

    def test_sets_restricted_members(self, registry, mapper):
        registry.register(dict, Visibility)

        result = mapper.map(
            {"_protected_property": "protected", "__private_property": "private"},
            Visibility,
        )

        assert result.get_protected_property() == "protected"
        assert result.get_private_property() == "private"

    def test_writes_through_property_setter(self, registry, mapper, caplog):
        registry.register(dict, Temperature)

        with caplog.at_level(logging.WARNING, logger="automapper.engine.auto_mapper"):
            result = mapper.map({"celsius": 10, "fahrenheit": 99}, Temperature)

        assert result.celsius == 10
        assert result.fahrenheit == 50
        assert "fahrenheit" in caplog.text


# ============================================================================
# TEST: Failure policy
# ============================================================================


class TestFailurePolicy:
    """Tests for lenient and strict member resolution"""

    def test_missing_default_member_is_unset(self, registry, mapper):
        registry.register(dict, Destination)
        assert mapper.map({}, Destination).name is None

    def test_missing_from_property_is_lenient_by_default(self, registry, mapper):
        registry.register(Source, Destination) \
            .for_member("name", Operation.from_property("missing"))

        assert mapper.map(Source(name="x"), Destination).name is None

    def test_missing_from_property_is_fatal_when_strict(self, registry):
        registry.register(Source, Destination) \
            .for_member("name", Operation.from_property("missing"))
        mapper = AutoMapper(registry, settings=MapperSettings(strict_from_property=True))

        with pytest.raises(SourceMemberMissing) as exc_info:
            mapper.map(Source(name="x"), Destination)

        assert exc_info.value.name == "missing"
        assert exc_info.value.source_type is Source

    def test_strict_policy_ignores_default_members(self, registry):
        registry.register(dict, Destination)
        mapper = AutoMapper(registry, settings=MapperSettings(strict_from_property=True))

        assert mapper.map({}, Destination).name is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
