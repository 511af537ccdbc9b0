import dataclasses
import logging
import time
import uuid

import pytest

from model_repository.api.responses import Operation, translate
from model_repository.db import schemas
from model_repository.db.converters import VendorConverter
from model_repository.services import (
    ASSET_CATEGORY_PROFILE,
    SYSTEM_PROFILE,
    VENDOR_PROFILE,
    EntityService,
    ResponseCode,
)
from model_repository.services.error_codes import (
    AssetCategoryErrorCode,
    SystemErrorCode,
    VendorErrorCode,
)


def _system(name="Sys1", **overrides):
    fields = dict(
        name=name,
        description="primary system",
        location=schemas.Location(virtual_location="https://sys.example.com"),
        organization="Org",
    )
    fields.update(overrides)
    return schemas.SystemRequest(**fields)


# profile, request factory, error enum
ENTITIES = [
    pytest.param(VENDOR_PROFILE, lambda name: schemas.VendorRequest(name=name, description="d"), VendorErrorCode, id="vendor"),
    pytest.param(ASSET_CATEGORY_PROFILE, lambda name: schemas.AssetCategoryRequest(name=name, description="d"), AssetCategoryErrorCode, id="asset_category"),
    pytest.param(SYSTEM_PROFILE, _system, SystemErrorCode, id="system"),
]


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_create_then_retrieve_by_id_and_name(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    created = service.create(make("First"))
    assert created.code is ResponseCode.SUCCESS
    record = created.response
    uuid.UUID(record.id)
    assert record.creation_date <= record.latest_update_date

    by_id = service.retrieve_by_id(record.id)
    assert by_id.code is ResponseCode.SUCCESS
    assert (by_id.response.id, by_id.response.name) == (record.id, "First")
    assert by_id.response.description == record.description
    assert by_id.response.creation_date.replace(microsecond=0) == record.creation_date.replace(microsecond=0)

    by_name = service.retrieve_by_name("First")
    assert by_name.code is ResponseCode.SUCCESS
    assert by_name.response.id == record.id


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_unknown_identifier_and_name_are_not_found(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    missing = str(uuid.uuid4())

    by_id = service.retrieve_by_id(missing)
    assert by_id.code is ResponseCode.NOT_FOUND
    assert by_id.error_code is profile.not_found_by_id
    assert f"'{missing}'" in by_id.message

    by_name = service.retrieve_by_name("Nobody")
    assert by_name.code is ResponseCode.NOT_FOUND
    assert by_name.error_code is profile.not_found_by_name


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_duplicate_name_on_create_is_conflict(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    first = service.create(make("Same")).response

    result = service.create(make("Same"))
    assert result.code is ResponseCode.CONFLICT
    assert result.error_code is profile.duplicate
    assert first.id in result.message
    assert service.store.count() == 1


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_rename_onto_taken_name_is_conflict(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    first = service.create(make("One")).response
    second = service.create(make("Two")).response

    result = service.update(make("One"), second.id)
    assert result.code is ResponseCode.CONFLICT
    assert result.error_code is profile.duplicate

    unchanged = service.retrieve_by_id(second.id).response
    assert unchanged.name == "Two"
    assert unchanged.latest_update_date == second.latest_update_date
    assert service.retrieve_by_id(first.id).response.name == "One"


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_update_preserves_identity_and_creation(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    original = service.create(make("Before")).response
    time.sleep(0.01)

    # Keeping the same name is not a conflict
    same = service.update(make("Before"), original.id)
    assert same.code is ResponseCode.SUCCESS

    time.sleep(0.01)
    renamed = service.update(make("After"), original.id)
    assert renamed.code is ResponseCode.SUCCESS
    assert renamed.response.id == original.id
    assert renamed.response.name == "After"
    assert renamed.response.creation_date == original.creation_date
    assert renamed.response.latest_update_date > same.response.latest_update_date > original.latest_update_date
    assert service.store.count() == 1


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_update_unknown_record_is_not_found(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    result = service.update(make("Ghost"), str(uuid.uuid4()))
    assert result.code is ResponseCode.NOT_FOUND
    assert result.error_code is profile.not_found_by_id


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_pagination_window(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    a = service.create(make("A")).response
    time.sleep(0.01)
    b = service.create(make("B")).response

    first = service.retrieve_all(0, 1)
    assert first.code is ResponseCode.SUCCESS
    assert [r.id for r in first.list_of_responses] == [a.id]
    assert (first.pagination_info.total_items, first.pagination_info.total_pages) == (2, 2)

    second = service.retrieve_all(1, 1)
    assert [r.id for r in second.list_of_responses] == [b.id]
    assert second.pagination_info.current_page == 1

    beyond = service.retrieve_all(2, 1)
    assert beyond.code is ResponseCode.NOT_FOUND
    assert beyond.error_code is errors.EXCEEDED_PAGE_LIMIT
    assert beyond.message.endswith("Total Pages: 2")


def test_pagination_with_values_past_any_row_count(db_session):
    service = EntityService(db_session, VENDOR_PROFILE)
    service.create(schemas.VendorRequest(name="A", description="d"))
    service.create(schemas.VendorRequest(name="B", description="d"))

    far = service.retrieve_all(10**19, 1)
    assert far.code is ResponseCode.NOT_FOUND
    assert far.error_code is VendorErrorCode.EXCEEDED_PAGE_LIMIT

    wide = service.retrieve_all(0, 10**19)
    assert wide.code is ResponseCode.SUCCESS
    assert len(wide.list_of_responses) == 2
    assert (wide.pagination_info.total_items, wide.pagination_info.total_pages) == (2, 1)


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_empty_store_listing_and_bad_pagination(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    empty = service.retrieve_all(0, 10)
    assert empty.code is ResponseCode.NOT_FOUND
    assert empty.error_code is profile.none_found

    bad = service.retrieve_all(-1, 10)
    assert bad.code is ResponseCode.BAD_REQUEST
    assert bad.error_code is errors.INVALID_PARAMETERS


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_delete_returns_deleted_record(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    record = service.create(make("Doomed")).response

    deleted = service.delete(record.id)
    assert deleted.code is ResponseCode.SUCCESS
    assert deleted.response.id == record.id
    assert deleted.response.name == "Doomed"

    again = service.delete(record.id)
    assert again.code is ResponseCode.NOT_FOUND
    assert again.error_code is profile.not_found_by_id


@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_delete_all(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    empty = service.delete_all()
    assert empty.code is ResponseCode.NOT_FOUND
    assert empty.error_code is profile.none_found

    service.create(make("X"))
    service.create(make("Y"))
    result = service.delete_all()
    assert result.code is ResponseCode.SUCCESS
    assert result.message == "Database transaction successfully concluded."
    assert service.store.count() == 0


def test_delete_all_logs_each_removed_record(db_session, caplog):
    service = EntityService(db_session, VENDOR_PROFILE)
    ids = {service.create(schemas.VendorRequest(name=name, description="d")).response.id for name in ("X", "Y")}
    caplog.set_level(logging.INFO, logger="model_repository.db.models.base")

    assert service.delete_all().code is ResponseCode.SUCCESS
    deleted = [r.getMessage() for r in caplog.records if r.getMessage().endswith("has been deleted.")]
    assert len(deleted) == 2
    assert all(any(identifier in line for line in deleted) for identifier in ids)

@pytest.mark.parametrize("profile,make,errors", ENTITIES)
def test_invalid_requests_are_bad_requests(db_session, profile, make, errors):
    service = EntityService(db_session, profile)
    assert service.retrieve_by_id(None).error_code is errors.IDENTIFIER_MISSING
    assert service.retrieve_by_id("abc").error_code is errors.IDENTIFIER_NOT_UUID
    assert service.delete(" ").error_code is errors.IDENTIFIER_MISSING
    assert service.create(None).error_code is errors.MISSING_DATA_INPUT
    assert service.update(None, str(uuid.uuid4())).error_code is errors.MISSING_DATA_INPUT
    assert service.update(make("Fine"), "abc").error_code is errors.IDENTIFIER_NOT_UUID

    blank = service.create(make("  "))
    assert blank.code is ResponseCode.BAD_REQUEST
    assert blank.error_code is errors.MANDATORY_FIELDS_MISSING
    assert service.store.count() == 0


def test_system_requires_description(db_session):
    service = EntityService(db_session, SYSTEM_PROFILE)
    result = service.create(_system(description=""))
    assert result.code is ResponseCode.BAD_REQUEST
    assert result.error_code is SystemErrorCode.MANDATORY_FIELDS_MISSING
    assert result.message.endswith("Field(s): description")


def test_system_with_zero_latitude_is_rejected(db_session):
    service = EntityService(db_session, SYSTEM_PROFILE)
    location = schemas.Location(
        geo_location=schemas.GeoLocation(latitude=0.0, longitude=22.8),
        virtual_location="",
    )
    result = service.create(_system(location=location))
    assert result.code is ResponseCode.BAD_REQUEST
    assert result.error_code is SystemErrorCode.INVALID_LOCATION_STRUCTURE
    assert service.store.count() == 0


def test_system_location_checked_on_update(db_session):
    service = EntityService(db_session, SYSTEM_PROFILE)
    record = service.create(_system()).response
    both = schemas.Location(
        geo_location=schemas.GeoLocation(latitude=37.9, longitude=23.7),
        virtual_location="https://sys.example.com",
    )
    result = service.update(_system(location=both), record.id)
    assert result.error_code is SystemErrorCode.INVALID_LOCATION_STRUCTURE


def test_system_additional_information_is_deduplicated(db_session):
    service = EntityService(db_session, SYSTEM_PROFILE)
    created = service.create(_system(additional_information=["rack-4", "rack-4", {"tier": 2}, {"tier": 2}]))
    stored = service.retrieve_by_id(created.response.id).response
    assert stored.additional_information == ["rack-4", {"tier": 2}]


def test_unique_index_catches_duplicate_that_slips_past_the_check(db_session, monkeypatch):
    service = EntityService(db_session, VENDOR_PROFILE)
    first = service.create(schemas.VendorRequest(name="Racer")).response

    # Only the pre-check misses; the lookup for the conflict message sees the stored row
    calls = []
    real_lookup = service.store.repository.find_first_by_name

    def first_lookup_misses(name):
        calls.append(name)
        return None if len(calls) == 1 else real_lookup(name)

    monkeypatch.setattr(service.store.repository, "find_first_by_name", first_lookup_misses)
    result = service.create(schemas.VendorRequest(name="Racer"))
    assert result.code is ResponseCode.CONFLICT
    assert result.error_code is VendorErrorCode.DUPLICATE_VENDOR
    assert first.id in result.message
    assert service.store.count() == 1


class FailingVendorConverter(VendorConverter):
    def to_response(self, entity):
        raise ValueError("cannot render entity")


def test_conversion_failures_are_internal_errors(db_session):
    record = EntityService(db_session, VENDOR_PROFILE).create(schemas.VendorRequest(name="V", description="d")).response
    service = EntityService(db_session, dataclasses.replace(VENDOR_PROFILE, converter=FailingVendorConverter()))

    one = service.retrieve_by_id(record.id)
    assert one.code is ResponseCode.ERROR
    assert one.error_code is VendorErrorCode.INTERNAL_SERVER_ERROR
    assert translate(Operation.RETRIEVE, one).status_code == 500

    many = service.retrieve_all(0, 10)
    assert many.code is ResponseCode.ERROR
    assert many.error_code is VendorErrorCode.INTERNAL_SERVER_ERROR
    assert translate(Operation.RETRIEVE_ALL, many).status_code == 500
