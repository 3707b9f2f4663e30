# backend/modules/participants/schemas/participant_schemas.py

from datetime import date
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class InstituteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    short_name: str


class HostelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hostel_name: str
    institute_id: int


class MessOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mess_name: str
    institute_id: int


class ParticipantLookup(BaseModel):
    """Dropdown data for the participant form"""

    institutes: List[InstituteOut] = []
    hostels: List[HostelOut] = []
    messes: List[MessOut] = []


class ParticipantBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=255)
    date_of_birth: Optional[date] = Field(
        None, validation_alias=AliasChoices("date_of_birth", "dob")
    )
    gender: Optional[str] = Field(None, max_length=20)
    institute_id: int = Field(
        ..., validation_alias=AliasChoices("institute_id", "instituteId")
    )
    hostel_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("hostel_id", "hostelId")
    )
    mess_id: Optional[int] = Field(None, validation_alias=AliasChoices("mess_id", "messId"))


class ParticipantCreate(ParticipantBase):
    pass


class ParticipantUpdate(ParticipantBase):
    """The edit form resubmits every field"""

    date_of_birth: date = Field(..., validation_alias=AliasChoices("date_of_birth", "dob"))
    gender: str = Field(..., min_length=1, max_length=20)
    hostel_id: int = Field(..., validation_alias=AliasChoices("hostel_id", "hostelId"))
    mess_id: int = Field(..., validation_alias=AliasChoices("mess_id", "messId"))


class ParticipantOut(BaseModel):
    """Participant row with display names and the ids the edit form needs"""

    id: int
    name: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    email: str
    institute: str
    hostel: Optional[str] = None
    mess: Optional[str] = None
    institute_id: int
    hostel_id: Optional[int] = None
    mess_id: Optional[int] = None


class ParticipantOption(BaseModel):
    """Participant entry for logistics dropdowns"""

    id: int
    name: str
    institute: str
