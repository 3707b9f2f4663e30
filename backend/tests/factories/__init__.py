# backend/tests/factories/__init__.py

"""
Shared test factories for the sports meet backend.

Factories persist through the session of the running test; request the
``db_session`` fixture before using them.
"""

from .base import BaseFactory, bind_factory_session
from .equipment import EquipmentItemFactory, EquipmentTypeFactory
from .participants import (
    EventFactory,
    FinancialTransactionFactory,
    HostelFactory,
    IncidentReportFactory,
    InstituteFactory,
    MessFactory,
    ParticipantFactory,
)
from .staff import RoleFactory, StaffMemberFactory
from .teams import MatchFactory, MatchTeamFactory, TeamFactory, TeamMemberFactory
from .transport import (
    TransportRouteFactory,
    TransportScheduleFactory,
    TransportVehicleFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "bind_factory_session",
    # Staff
    "RoleFactory",
    "StaffMemberFactory",
    # Equipment
    "EquipmentTypeFactory",
    "EquipmentItemFactory",
    # Transport
    "TransportRouteFactory",
    "TransportVehicleFactory",
    "TransportScheduleFactory",
    # Registration
    "InstituteFactory",
    "HostelFactory",
    "MessFactory",
    "ParticipantFactory",
    "EventFactory",
    # Teams and matches
    "TeamFactory",
    "TeamMemberFactory",
    "MatchFactory",
    "MatchTeamFactory",
    # Financials
    "FinancialTransactionFactory",
    "IncidentReportFactory",
]
