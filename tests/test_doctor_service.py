import pytest

from models.doctor import DoctorCreate, DoctorFilters, DoctorUpdate
from services.doctor_service import (
    DoctorService,
    build_document,
    missing_required_fields,
    update_fields,
)
from utils.exceptions import DoctorNotFound, DoctorServerError, DoctorValidationError
from fake_mongo import UnreachableCollection


def test_missing_fields_treat_zero_and_blank_as_absent(doctor_payload):
    payload = DoctorCreate(**{**doctor_payload, "experience": 0, "name": "   "})
    assert missing_required_fields(payload) == ["name", "experience"]


def test_missing_fields_lists_everything_for_empty_payload():
    assert missing_required_fields(DoctorCreate()) == [
        "name", "specialty", "qualification", "experience", "location", "consultationFee",
    ]


def test_build_document_applies_defaults(doctor_payload):
    document = build_document(DoctorCreate(**doctor_payload))
    assert document["hospital"] == "Apollo 24|7 Virtual Clinic"
    assert document["languages"] == ["English"]
    assert document["availability"] == {}
    assert document["isDoctor"] is False
    assert document["profileImage"] is None
    assert document["availableForOnlineConsult"] is True
    assert document["availableForHospitalVisit"] is True
    assert document["createdAt"] is not None


def test_build_document_keeps_explicit_false_flags(doctor_payload):
    document = build_document(DoctorCreate(
        **doctor_payload,
        availableForOnlineConsult=False,
        availableForHospitalVisit=False,
        languages=["Tamil"],
    ))
    assert document["availableForOnlineConsult"] is False
    assert document["availableForHospitalVisit"] is False
    assert document["languages"] == ["Tamil"]


def test_update_fields_mixes_truthiness_and_presence():
    payload = DoctorUpdate(name="", languages=[], profileImage="", isDoctor=False, experience=0)
    assert update_fields(payload) == {"isDoctor": False, "experience": 0}


def test_update_fields_ignores_unsent_and_null_fields():
    assert update_fields(DoctorUpdate()) == {}
    assert update_fields(DoctorUpdate(isDoctor=None, availability=None)) == {}


def test_update_fields_applies_sent_values():
    payload = DoctorUpdate(consultationFee=500, hospital="  City Care  ", availability={"Mon": "9-5"})
    assert update_fields(payload) == {
        "consultationFee": 500,
        "hospital": "City Care",
        "availability": {"Mon": "9-5"},
    }


@pytest.mark.asyncio
async def test_create_then_get_returns_same_record(collection, doctor_payload):
    created = await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    fetched = await DoctorService.get_doctor(collection, created["_id"])
    assert fetched == created
    assert isinstance(created["_id"], str)


@pytest.mark.asyncio
async def test_create_without_required_fields_persists_nothing(collection):
    with pytest.raises(DoctorValidationError) as exc_info:
        await DoctorService.create_doctor(collection, None)
    assert exc_info.value.message == "Missing required fields"
    assert collection.docs == []


@pytest.mark.asyncio
async def test_update_changes_only_sent_fields(collection, doctor_payload):
    created = await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    updated = await DoctorService.update_doctor(collection, created["_id"], DoctorUpdate(consultationFee=500))
    assert updated == {**created, "consultationFee": 500}


@pytest.mark.asyncio
async def test_update_with_nothing_to_apply_returns_record(collection, doctor_payload):
    created = await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    unchanged = await DoctorService.update_doctor(collection, created["_id"], DoctorUpdate(name=""))
    assert unchanged == created


@pytest.mark.asyncio
async def test_update_unknown_doctor_is_not_found(collection):
    with pytest.raises(DoctorNotFound):
        await DoctorService.update_doctor(collection, "64b7f0c2a1b2c3d4e5f60718", DoctorUpdate(name="X"))
    with pytest.raises(DoctorNotFound):
        await DoctorService.update_doctor(collection, "64b7f0c2a1b2c3d4e5f60718", DoctorUpdate())


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(collection, doctor_payload):
    created = await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    await DoctorService.delete_doctor(collection, created["_id"])
    with pytest.raises(DoctorNotFound):
        await DoctorService.get_doctor(collection, created["_id"])
    with pytest.raises(DoctorNotFound):
        await DoctorService.delete_doctor(collection, created["_id"])


@pytest.mark.asyncio
async def test_seed_replaces_existing_records(collection, doctor_payload):
    await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    inserted = await DoctorService.seed_doctors(collection)
    doctors = await DoctorService.list_doctors(collection, DoctorFilters())
    assert inserted == 5
    assert len(doctors) == 5
    assert "Asha Rao" not in [d["name"] for d in doctors]


@pytest.mark.asyncio
async def test_list_sorts_verified_then_experienced(collection):
    await DoctorService.seed_doctors(collection)
    doctors = await DoctorService.list_doctors(collection, DoctorFilters())
    assert [d["name"] for d in doctors] == [
        "Liritha C",
        "Lakshmi Sindhura Kakani",
        "Rahul Sharma",
        "Priya Patel",
        "Chandra Sekhar P",
    ]


@pytest.mark.asyncio
async def test_store_failures_become_server_errors():
    collection = UnreachableCollection()
    with pytest.raises(DoctorServerError) as exc_info:
        await DoctorService.list_doctors(collection, DoctorFilters())
    assert exc_info.value.error == "connection refused"
    with pytest.raises(DoctorServerError):
        await DoctorService.get_doctor(collection, "64b7f0c2a1b2c3d4e5f60718")
    with pytest.raises(DoctorServerError):
        await DoctorService.seed_doctors(collection)


def test_created_at_is_utc_at_millisecond_precision(doctor_payload):
    created_at = build_document(DoctorCreate(**doctor_payload))["createdAt"]
    assert created_at.tzinfo is not None
    assert created_at.utcoffset().total_seconds() == 0
    assert created_at.microsecond % 1000 == 0


@pytest.mark.asyncio
async def test_created_at_survives_storage_unchanged(collection, doctor_payload):
    created = await DoctorService.create_doctor(collection, DoctorCreate(**doctor_payload))
    fetched = await DoctorService.get_doctor(collection, created["_id"])
    assert fetched["createdAt"] == created["createdAt"]
