## Course enrollment table
import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Numeric, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class CourseEnrollment(Base):
    __tablename__ = "course_enrollments"
    __table_args__ = (UniqueConstraint("lead_id", "course_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    lead_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("leads.id", ondelete="CASCADE"), index=True)

    # Catalog ids are free-form ("course_1", "custom-course-...")
    course_id: Mapped[str] = mapped_column(String(200), nullable=False)
    payment_amount: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
    enrollment_status: Mapped[str] = mapped_column(String(30), nullable=False, default="enrolled")

    enrolled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "lead_id": str(self.lead_id),
            "course_id": self.course_id,
            "payment_amount": self.payment_amount,
            "enrollment_status": self.enrollment_status,
            "enrolled_at": self.enrolled_at.isoformat() if self.enrolled_at else None,
        }
