from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.db.base import Base
from firmdesk.db.models._mixins import TimestampMixin

class Client(Base, TimestampMixin):
    __tablename__ = "client"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), index=True)
    gstin: Mapped[str | None] = mapped_column(String(32), nullable=True)
    pan: Mapped[str | None] = mapped_column(String(16), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
