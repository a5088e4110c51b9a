import logging
from datetime import datetime, timezone
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from constants.doctor_status import DEFAULT_HOSPITAL, DEFAULT_LANGUAGES, REQUIRED_FIELDS
from constants.seed_doctors import SAMPLE_DOCTORS
from models.doctor import DoctorCreate, DoctorFilters, DoctorUpdate
from utils.exceptions import DoctorNotFound, DoctorServerError, DoctorValidationError
from utils.querybuilders import DoctorQuery

logger = logging.getLogger("doctors")

# Applied on update only when the value sent is non-empty
TRUTHY_UPDATE_FIELDS = (
    "name",
    "specialty",
    "qualification",
    "hospital",
    "location",
    "profileImage",
    "languages",
)

# Applied on update whenever the key is sent, so false and 0 are honored
PRESENT_UPDATE_FIELDS = (
    "experience",
    "consultationFee",
    "availability",
    "isDoctor",
    "availableForOnlineConsult",
    "availableForHospitalVisit",
)


def _serialize(doctor: dict) -> dict:
    doctor["_id"] = str(doctor["_id"])
    return doctor


def missing_required_fields(payload: DoctorCreate) -> List[str]:
    """Required fields that are absent or falsy (zero and blank strings included)."""
    return [field for field in REQUIRED_FIELDS if not getattr(payload, field)]


def _now() -> datetime:
    """Current UTC time at the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def build_document(payload: DoctorCreate) -> dict:
    """Turn a validated create payload into a stored document with defaults applied."""
    return {
        "name": payload.name,
        "specialty": payload.specialty,
        "qualification": payload.qualification,
        "experience": payload.experience,
        "hospital": payload.hospital or DEFAULT_HOSPITAL,
        "location": payload.location,
        "consultationFee": payload.consultationFee,
        "availability": payload.availability or {},
        "isDoctor": payload.isDoctor or False,
        "profileImage": payload.profileImage or None,
        "languages": payload.languages or list(DEFAULT_LANGUAGES),
        "availableForOnlineConsult": payload.availableForOnlineConsult is not False,
        "availableForHospitalVisit": payload.availableForHospitalVisit is not False,
        "createdAt": _now(),
    }


def update_fields(payload: DoctorUpdate) -> dict:
    """Pick the fields of a partial update that should overwrite the stored record."""
    sent = payload.model_dump(include=payload.model_fields_set)
    changes = {field: sent[field] for field in TRUTHY_UPDATE_FIELDS if sent.get(field)}
    for field in PRESENT_UPDATE_FIELDS:
        # null cannot replace a typed value
        if field in sent and sent[field] is not None:
            changes[field] = sent[field]
    return changes


class DoctorService:
    """All database logic related to doctors."""

    @staticmethod
    async def list_doctors(collection: AsyncIOMotorCollection, filters: DoctorFilters):
        """Get every doctor matching the filters, verified and senior doctors first."""
        query = DoctorQuery.list_filter(filters)
        try:
            cursor = collection.find(query).sort(DoctorQuery.SORT)
            doctors = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        return [_serialize(doctor) for doctor in doctors]

    @staticmethod
    async def get_doctor(collection: AsyncIOMotorCollection, doctor_id: str):
        """Get a single doctor by its ID."""
        query = DoctorQuery.by_id(doctor_id)
        try:
            doctor = await collection.find_one(query)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        if not doctor:
            raise DoctorNotFound(doctor_id)
        return _serialize(doctor)

    @staticmethod
    async def create_doctor(collection: AsyncIOMotorCollection, payload: Optional[DoctorCreate]):
        """Validate required fields, apply defaults and insert a new doctor."""
        payload = payload or DoctorCreate()
        missing = missing_required_fields(payload)
        if missing:
            raise DoctorValidationError(", ".join(missing), kind="MISSING_FIELDS")

        document = build_document(payload)
        try:
            result = await collection.insert_one(document)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        document["_id"] = result.inserted_id
        return _serialize(document)

    @staticmethod
    async def update_doctor(collection: AsyncIOMotorCollection, doctor_id: str, payload: Optional[DoctorUpdate]):
        """Apply a partial update and return the stored result."""
        query = DoctorQuery.by_id(doctor_id)
        changes = update_fields(payload or DoctorUpdate())
        try:
            if changes:
                doctor = await collection.find_one_and_update(
                    query,
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                doctor = await collection.find_one(query)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        if not doctor:
            raise DoctorNotFound(doctor_id)
        return _serialize(doctor)

    @staticmethod
    async def delete_doctor(collection: AsyncIOMotorCollection, doctor_id: str):
        """Delete a doctor by its ID."""
        query = DoctorQuery.by_id(doctor_id)
        try:
            result = await collection.delete_one(query)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        if result.deleted_count == 0:
            raise DoctorNotFound(doctor_id)

    @staticmethod
    async def seed_doctors(collection: AsyncIOMotorCollection):
        """Drop every doctor and insert the sample profiles. Returns the number inserted."""
        documents = [build_document(DoctorCreate(**sample)) for sample in SAMPLE_DOCTORS]
        try:
            await collection.delete_many({})
            result = await collection.insert_many(documents)
        except PyMongoError as e:
            raise DoctorServerError(str(e)) from e
        return len(result.inserted_ids)
