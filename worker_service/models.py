# worker_service/models.py
# Only the columns the notifier reads; the API owns the schema.

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from worker_service.database import Base


class User(Base):
    __tablename__ = 'users'
    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    username: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)
