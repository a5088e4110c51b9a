import re
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from models.doctor import DoctorFilters
from utils.exceptions import DoctorNotFound, DoctorValidationError

# Leading integer of a query value, read the way parseInt does ("400.5" -> 400)
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DoctorQuery:
    """Builds the MongoDB filters used by the doctor endpoints."""

    # Verified doctors first, then the most experienced
    SORT = [("isDoctor", DESCENDING), ("experience", DESCENDING)]

    @staticmethod
    def by_id(doctor_id: str):
        """Query to get a doctor by its ID. A malformed id can match nothing."""
        try:
            return {"_id": ObjectId(doctor_id)}
        except (InvalidId, TypeError):
            raise DoctorNotFound(doctor_id)

    @staticmethod
    def parse_int(name: str, raw: Optional[str]) -> Optional[int]:
        """Integer bound from a query value. Blank means no bound."""
        if raw is None or not raw.strip():
            return None
        match = LEADING_INT.match(raw)
        if not match:
            raise DoctorValidationError(f"{name}: expected an integer, got {raw!r}")
        return int(match.group(1))

    @staticmethod
    def list_filter(filters: DoctorFilters) -> dict:
        """Combine the listing filters with AND. Absent filters impose nothing."""
        query = {}
        if filters.specialty:
            query["specialty"] = {"$regex": re.escape(filters.specialty), "$options": "i"}
        if filters.minExperience is not None:
            query["experience"] = {"$gte": filters.minExperience}
        if filters.maxFee is not None:
            query["consultationFee"] = {"$lte": filters.maxFee}
        if filters.language:
            query["languages"] = {"$in": [filters.language]}
        if filters.onlineConsult == "true":
            query["availableForOnlineConsult"] = True
        if filters.hospitalVisit == "true":
            query["availableForHospitalVisit"] = True
        return query
