# constants/doctor_status.py
from fastapi import status

DEFAULT_HOSPITAL = "Apollo 24|7 Virtual Clinic"
DEFAULT_LANGUAGES = ["English"]

REQUIRED_FIELDS = (
    "name",
    "specialty",
    "qualification",
    "experience",
    "location",
    "consultationFee",
)

MESSAGES = {
    "ROOT": "Backend is working on Vercel!",
    "DOCTOR_DELETED": "Doctor removed successfully",
    "DOCTORS_SEEDED": "Sample doctors data seeded successfully",
}

ERRORS = {
    "MISSING_FIELDS": {"status_code": status.HTTP_400_BAD_REQUEST, "message": "Missing required fields"},
    "INVALID_REQUEST": {"status_code": status.HTTP_400_BAD_REQUEST, "message": "Invalid request"},
    "DOCTOR_NOT_FOUND": {"status_code": status.HTTP_404_NOT_FOUND, "message": "Doctor not found"},
    "SERVER_ERROR": {"status_code": status.HTTP_500_INTERNAL_SERVER_ERROR, "message": "Server error"},
}
