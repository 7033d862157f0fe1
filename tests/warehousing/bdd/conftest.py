"""Shared BDD fixtures and step definitions for the Warehousing domain."""

from protean import current_domain
from pytest_bdd import given, parsers, then

from warehousing.errors import ErrorKind, kind_of
from warehousing.location import Location, set_location_resolver
from warehousing.location.directory import StaticLocationDirectory
from warehousing.warehouse.operations import archive_warehouse, create_warehouse
from warehousing.warehouse.warehouse import Warehouse


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.parse('a location "{identifier}" allowing {slots:d} warehouse with a maximum capacity of {capacity:d}'),
)
def _(identifier, slots, capacity):
    set_location_resolver(StaticLocationDirectory([Location(identifier, slots, capacity)]))


@given(
    parsers.parse('warehouse "{code}" exists at "{location}" with capacity {capacity:d} and stock {stock:d}'),
)
def _(code, location, capacity, stock):
    create_warehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock)


@given(parsers.parse('warehouse "{code}" has been archived'))
def _(code):
    archive_warehouse(business_unit_code=code)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the operation succeeds")
def _(outcome):
    assert outcome.error is None, outcome.error


@then("the operation fails with a conflict")
def _(outcome):
    assert kind_of(outcome.error) == ErrorKind.CONFLICT


@then("the operation fails with a validation error")
def _(outcome):
    assert kind_of(outcome.error) == ErrorKind.VALIDATION


@then("the operation fails with not found")
def _(outcome):
    assert kind_of(outcome.error) == ErrorKind.NOT_FOUND


@then(parsers.parse('warehouse "{code}" is active at "{location}" with capacity {capacity:d} and stock {stock:d}'))
def _(code, location, capacity, stock):
    warehouse = current_domain.repository_for(Warehouse).find_by_business_unit_code(code)
    assert warehouse.is_active
    assert warehouse.location == location
    assert warehouse.capacity == capacity
    assert warehouse.stock == stock


@then(parsers.parse('warehouse "{code}" has {count:d} archived record'))
def _(code, count):
    records = current_domain.repository_for(Warehouse).get_all()
    archived = [w for w in records if w.business_unit_code == code and not w.is_active]
    assert len(archived) == count
