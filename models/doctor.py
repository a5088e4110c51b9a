from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union
from datetime import datetime

Number = Union[int, float]


class DoctorPayload(BaseModel):
    """Doctor fields as sent by a client. Every field may be omitted."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = None
    specialty: Optional[str] = None
    qualification: Optional[str] = None
    experience: Optional[int] = Field(default=None, description="Years of practice")
    hospital: Optional[str] = None
    location: Optional[str] = None
    consultationFee: Optional[Number] = None
    availability: Optional[Dict[str, str]] = Field(default=None, description="Day or slot name -> hours")
    isDoctor: Optional[bool] = None
    profileImage: Optional[str] = None
    languages: Optional[List[str]] = None
    availableForOnlineConsult: Optional[bool] = None
    availableForHospitalVisit: Optional[bool] = None


class DoctorCreate(DoctorPayload):
    """Body of POST /api/doctors. Required fields are checked by the service."""


class DoctorUpdate(DoctorPayload):
    """Body of PUT /api/doctors/{id}. Only the fields sent are applied."""


class DoctorFilters(BaseModel):
    specialty: Optional[str] = None
    minExperience: Optional[int] = None
    maxFee: Optional[int] = None
    language: Optional[str] = None
    onlineConsult: Optional[str] = None
    hospitalVisit: Optional[str] = None


class Doctor(BaseModel):
    """Doctor record as stored in MongoDB."""
    id: str = Field(alias="_id")
    name: str
    specialty: str
    qualification: str
    experience: int
    hospital: Optional[str] = None
    location: str
    consultationFee: Number
    availability: Dict[str, str] = Field(default_factory=dict)
    isDoctor: bool = False
    profileImage: Optional[str] = None
    languages: List[str] = Field(default_factory=lambda: ["English"])
    availableForOnlineConsult: bool = True
    availableForHospitalVisit: bool = True
    createdAt: datetime

    model_config = ConfigDict(populate_by_name=True)


class DoctorList(BaseModel):
    doctors: List[Doctor]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    message: str
    error: str
