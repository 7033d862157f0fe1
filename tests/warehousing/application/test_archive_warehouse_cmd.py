"""Application tests for the ArchiveWarehouse command."""

import pytest
from protean import current_domain
from protean.exceptions import InvalidOperationError, ObjectNotFoundError

from warehousing.warehouse.archival import ArchiveWarehouse
from warehousing.warehouse.creation import CreateWarehouse
from warehousing.warehouse.warehouse import Warehouse


def _create_warehouse(code="MWH.001", location="ZWOLLE-001", capacity=40, stock=10):
    return current_domain.process(
        CreateWarehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock),
        asynchronous=False,
    )


def _archive(code="MWH.001"):
    current_domain.process(ArchiveWarehouse(business_unit_code=code), asynchronous=False)


class TestArchiveWarehouse:
    def test_archive_stamps_archived_at(self):
        wh_id = _create_warehouse()
        _archive()
        warehouse = current_domain.repository_for(Warehouse).get(wh_id)
        assert warehouse.archived_at is not None

    def test_archive_keeps_the_record(self):
        wh_id = _create_warehouse()
        _archive()
        warehouse = current_domain.repository_for(Warehouse).get(wh_id)
        assert warehouse.business_unit_code == "MWH.001"
        assert warehouse.capacity == 40
        assert warehouse.stock == 10

    def test_unknown_code_is_not_found(self):
        with pytest.raises(ObjectNotFoundError) as exc:
            _archive("MWH.999")
        assert "does not exist" in exc.value.messages["business_unit_code"][0]

    def test_archiving_twice_is_a_conflict(self):
        _create_warehouse()
        _archive()
        with pytest.raises(InvalidOperationError) as exc:
            _archive()
        assert "already archived" in exc.value.messages["business_unit_code"][0]

    def test_second_archive_leaves_archived_at_unchanged(self):
        wh_id = _create_warehouse()
        _archive()
        archived_at = current_domain.repository_for(Warehouse).get(wh_id).archived_at

        with pytest.raises(InvalidOperationError):
            _archive()

        assert current_domain.repository_for(Warehouse).get(wh_id).archived_at == archived_at

    def test_archive_frees_the_slot(self):
        _create_warehouse()
        _archive()
        active = current_domain.repository_for(Warehouse).find_active_at("ZWOLLE-001")
        assert active == []
