## Masterclass and registration tables
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Masterclass(Base):
    __tablename__ = "masterclasses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    instructor: Mapped[str | None] = mapped_column(String(200), nullable=True)
    scheduled_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=60)

    max_attendees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    current_attendees: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "instructor": self.instructor,
            "scheduled_date": self.scheduled_date.isoformat(),
            "duration_minutes": self.duration_minutes,
            "max_attendees": self.max_attendees,
            "current_attendees": self.current_attendees,
            "is_active": self.is_active,
        }


class MasterclassRegistration(Base):
    __tablename__ = "masterclass_registrations"
    __table_args__ = (UniqueConstraint("lead_id", "masterclass_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    lead_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("leads.id", ondelete="CASCADE"), index=True)
    masterclass_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("masterclasses.id", ondelete="CASCADE"), index=True)

    registered_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "lead_id": str(self.lead_id),
            "masterclass_id": str(self.masterclass_id),
            "registered_at": self.registered_at.isoformat() if self.registered_at else None,
        }
