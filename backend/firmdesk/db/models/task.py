from sqlalchemy import BigInteger, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.db.base import Base
from firmdesk.db.models._mixins import TimestampMixin

class Task(Base, TimestampMixin):
    __tablename__ = "task"

    id: Mapped[int] = mapped_column(primary_key=True)
    client_name: Mapped[str] = mapped_column(String(256), index=True)
    task_category: Mapped[str] = mapped_column(String(128), index=True)
    sub_category: Mapped[str] = mapped_column(String(128))
    status: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    assigned_name: Mapped[str | None] = mapped_column(String(256), nullable=True)

    # epoch nanoseconds
    due_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    assignment_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    completion_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    bill: Mapped[float | None] = mapped_column(Float, nullable=True)
    advance_received: Mapped[float | None] = mapped_column(Float, nullable=True)
    outstanding_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    payment_status: Mapped[str | None] = mapped_column(String(64), nullable=True)
