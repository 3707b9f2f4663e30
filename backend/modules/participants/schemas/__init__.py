"""Participant schemas module"""

from .participant_schemas import (
    HostelOut,
    InstituteOut,
    MessOut,
    ParticipantCreate,
    ParticipantLookup,
    ParticipantOption,
    ParticipantOut,
    ParticipantUpdate,
)

__all__ = [
    "HostelOut",
    "InstituteOut",
    "MessOut",
    "ParticipantCreate",
    "ParticipantLookup",
    "ParticipantOption",
    "ParticipantOut",
    "ParticipantUpdate",
]
