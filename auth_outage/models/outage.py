from sqlalchemy import Column, Integer, String, Text, Index
from ..database import Base

class OutageRecord(Base):
    __tablename__ = "auth_outage"
    __table_args__ = (
        Index("ix_auth_outage_window", "starttime", "stoptime", "title"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    starttime = Column(Integer, nullable=False)  # unix timestamp
    stoptime = Column(Integer, nullable=False)  # unix timestamp
    warntime = Column(Integer, nullable=True)  # users are warned from this time on
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    createdby = Column(Integer, nullable=True)  # actor id, written once
    modifiedby = Column(Integer, nullable=True)  # actor id of the last write
    lastmodified = Column(Integer, nullable=True)  # unix timestamp of the last write
