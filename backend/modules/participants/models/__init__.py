"""Participant models module"""

from .participant_models import Hostel, Institute, Mess, Participant

__all__ = ["Hostel", "Institute", "Mess", "Participant"]
