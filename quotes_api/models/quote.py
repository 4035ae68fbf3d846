from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from quotes_api.db.session import Base

class Quote(Base):
    __tablename__ = "quotes"
    # Deleted ids are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    # Character count of text at creation; not recomputed on update.
    length: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
