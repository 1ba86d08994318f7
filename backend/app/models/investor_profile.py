"""Investor profile model.

Rows are append-only: a new questionnaire submission creates a new profile
and the most recent one is the current profile.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, Uuid

from app.models import Base


class InvestorProfile(Base):
    __tablename__ = "investor_profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    risk_tolerance = Column(String(30), nullable=False)
    investment_horizon = Column(String(30), nullable=False)
    experience = Column(String(30), nullable=False)
    objectives = Column(Text, default="", nullable=False)
    score = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False, index=True)
