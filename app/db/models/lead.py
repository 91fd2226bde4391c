## Lead table
import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Lead(Base):
    __tablename__ = "leads"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    job_role: Mapped[str] = mapped_column(String(200), nullable=False)
    experience_level: Mapped[str | None] = mapped_column(String(100), nullable=True)
    career_goals: Mapped[str] = mapped_column(Text, nullable=False)
    preferred_tech_stack: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    ai_career_roadmap: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    recommended_masterclasses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    conversion_stage: Mapped[str] = mapped_column(String(30), nullable=False, default="Cold")  # Cold/Warm/Hot

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "job_role": self.job_role,
            "experience_level": self.experience_level,
            "career_goals": self.career_goals,
            "preferred_tech_stack": self.preferred_tech_stack,
            "ai_career_roadmap": self.ai_career_roadmap,
            "recommended_masterclasses": self.recommended_masterclasses,
            "conversion_stage": self.conversion_stage,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
