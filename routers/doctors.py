from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorCollection
from typing import Optional
import logging
from database import get_collection
from constants.doctor_status import MESSAGES
from models.doctor import (
    Doctor,
    DoctorCreate,
    DoctorFilters,
    DoctorList,
    DoctorUpdate,
    ErrorResponse,
    MessageResponse,
)
from services.doctor_service import DoctorService
from utils.querybuilders import DoctorQuery
from utils.exceptions import DoctorError, DoctorNotFound, DoctorServerError, DoctorValidationError
from utils.responses import message_response

router = APIRouter(
    prefix="/api",
    responses={500: {"model": ErrorResponse}},
)
logger = logging.getLogger("doctors")

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


#---------------- List doctors ----------------#
@router.get("/doctors", response_model=DoctorList, responses=BAD_REQUEST)
async def list_doctors(
    specialty: Optional[str] = Query(default=None, description="Case-insensitive substring of the specialty"),
    minExperience: Optional[str] = Query(default=None, description="Minimum years of experience"),
    maxFee: Optional[str] = Query(default=None, description="Maximum consultation fee"),
    language: Optional[str] = Query(default=None, description="Language the doctor speaks"),
    onlineConsult: Optional[str] = Query(default=None, description="'true' to keep online consults only"),
    hospitalVisit: Optional[str] = Query(default=None, description="'true' to keep hospital visits only"),
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    try:
        min_experience = DoctorQuery.parse_int("minExperience", minExperience)
        max_fee = DoctorQuery.parse_int("maxFee", maxFee)
    except DoctorValidationError as e:
        logger.warning("Rejected doctor filters: %s", e.error)
        raise
    filters = DoctorFilters(
        specialty=specialty,
        minExperience=min_experience,
        maxFee=max_fee,
        language=language,
        onlineConsult=onlineConsult,
        hospitalVisit=hospitalVisit,
    )
    try:
        doctors = await DoctorService.list_doctors(collection, filters)
    except DoctorError:
        logger.exception("Error fetching doctors")
        raise
    except Exception as e:
        logger.exception("Error fetching doctors: %s", e)
        raise DoctorServerError(str(e))
    logger.info("Fetched %s doctors", len(doctors))
    return {"doctors": doctors}


#---------------- Get doctor by ID ----------------#
@router.get("/doctors/{doctor_id}", response_model=Doctor, responses=NOT_FOUND)
async def get_doctor(
    doctor_id: str,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    try:
        return await DoctorService.get_doctor(collection, doctor_id)
    except DoctorNotFound:
        logger.warning("Doctor not found with id: %s", doctor_id)
        raise
    except DoctorError:
        logger.exception("Error fetching doctor %s", doctor_id)
        raise
    except Exception as e:
        logger.exception("Error fetching doctor: %s", e)
        raise DoctorServerError(str(e))


#---------------- Add new doctor ----------------#
@router.post("/doctors", response_model=Doctor, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
async def add_doctor(
    doctor: Optional[DoctorCreate] = None,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    try:
        created = await DoctorService.create_doctor(collection, doctor)
    except DoctorValidationError as e:
        logger.warning("Rejected doctor, missing fields: %s", e.error)
        raise
    except DoctorError:
        logger.exception("Error adding doctor")
        raise
    except Exception as e:
        logger.exception("Error adding doctor: %s", e)
        raise DoctorServerError(str(e))
    logger.info("Created doctor with id: %s", created["_id"])
    return created


#---------------- Update doctor ----------------#
@router.put("/doctors/{doctor_id}", response_model=Doctor, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_doctor(
    doctor_id: str,
    doctor: Optional[DoctorUpdate] = None,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    try:
        updated = await DoctorService.update_doctor(collection, doctor_id, doctor)
    except DoctorNotFound:
        logger.warning("Doctor not found for update with id: %s", doctor_id)
        raise
    except DoctorError:
        logger.exception("Error updating doctor %s", doctor_id)
        raise
    except Exception as e:
        logger.exception("Error updating doctor: %s", e)
        raise DoctorServerError(str(e))
    logger.info("Updated doctor with id: %s", doctor_id)
    return updated


#---------------- Delete doctor ----------------#
@router.delete("/doctors/{doctor_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_doctor(
    doctor_id: str,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    try:
        await DoctorService.delete_doctor(collection, doctor_id)
    except DoctorNotFound:
        logger.warning("Doctor not found for deletion with id: %s", doctor_id)
        raise
    except DoctorError:
        logger.exception("Error deleting doctor %s", doctor_id)
        raise
    except Exception as e:
        logger.exception("Error deleting doctor: %s", e)
        raise DoctorServerError(str(e))
    logger.info("Deleted doctor with id: %s", doctor_id)
    return message_response(MESSAGES["DOCTOR_DELETED"])


#---------------- Seed sample data (development only) ----------------#
@router.post("/seed-doctors", response_model=MessageResponse)
async def seed_doctors(collection: AsyncIOMotorCollection = Depends(get_collection)):
    try:
        inserted = await DoctorService.seed_doctors(collection)
    except DoctorError:
        logger.exception("Error seeding doctors data")
        raise
    except Exception as e:
        logger.exception("Error seeding doctors data: %s", e)
        raise DoctorServerError(str(e))
    logger.warning("Doctors collection reset with %s sample doctors", inserted)
    return message_response(MESSAGES["DOCTORS_SEEDED"])
