from sqlalchemy import BigInteger, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.db.base import Base
from firmdesk.db.models._mixins import TimestampMixin

class Todo(Base, TimestampMixin):
    __tablename__ = "todo"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(512))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    due_date: Mapped[int | None] = mapped_column(BigInteger, nullable=True)  # epoch milliseconds
