# backend/modules/participants/models/participant_models.py

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.database import Base


class Institute(Base):
    __tablename__ = "institutes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True)
    short_name = Column(String(20), nullable=False, unique=True)

    hostels = relationship("Hostel", back_populates="institute", passive_deletes="all")
    messes = relationship("Mess", back_populates="institute", passive_deletes="all")


class Hostel(Base):
    """Accommodation block provided by a host institute"""

    __tablename__ = "hostels"

    id = Column(Integer, primary_key=True, index=True)
    hostel_name = Column(String(150), nullable=False)
    institute_id = Column(Integer, ForeignKey("institutes.id"), nullable=False)

    institute = relationship("Institute", back_populates="hostels")


class Mess(Base):
    """Dining hall provided by a host institute"""

    __tablename__ = "messes"

    id = Column(Integer, primary_key=True, index=True)
    mess_name = Column(String(150), nullable=False)
    institute_id = Column(Integer, ForeignKey("institutes.id"), nullable=False)

    institute = relationship("Institute", back_populates="messes")


class Participant(Base):
    """Athlete registered for the meet by an institute"""

    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    date_of_birth = Column(Date)
    gender = Column(String(20))
    email = Column(String(255), nullable=False, unique=True)
    institute_id = Column(Integer, ForeignKey("institutes.id"), nullable=False, index=True)
    hostel_id = Column(Integer, ForeignKey("hostels.id"))
    mess_id = Column(Integer, ForeignKey("messes.id"))

    institute = relationship("Institute")
    hostel = relationship("Hostel")
    mess = relationship("Mess")
