from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.db.base import Base
from firmdesk.db.models._mixins import TimestampMixin

class Assignee(Base, TimestampMixin):
    __tablename__ = "assignee"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), index=True)
    captain: Mapped[str | None] = mapped_column(String(256), nullable=True)
