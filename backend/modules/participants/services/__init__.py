from .participant_service import ParticipantService

__all__ = ["ParticipantService"]
