from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from firmdesk.db.base import Base
from firmdesk.db.models._mixins import TimestampMixin

class ImportRowError(Base, TimestampMixin):
    """One problem found in an upload, either while parsing or while submitting."""

    __tablename__ = "import_error"

    id: Mapped[int] = mapped_column(primary_key=True)
    import_run_id: Mapped[int] = mapped_column(ForeignKey("import_run.id", ondelete="CASCADE"), index=True)
    stage: Mapped[str] = mapped_column(String(16), default="parse")  # parse|submit
    # 0 for file-level problems, otherwise the 1-based line with the header as 1
    row_num: Mapped[int | None] = mapped_column(Integer, nullable=True)
    column: Mapped[str | None] = mapped_column(String(128), nullable=True)
    message: Mapped[str] = mapped_column(Text)

    import_run = relationship("ImportRun", back_populates="errors")
