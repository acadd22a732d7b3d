import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from database import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    STANDARD = "standard"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(50), nullable=False, unique=True)
    role = Column(String(10), nullable=False, default=Role.STANDARD.value)
    token = Column(String(50), nullable=True)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


class Parking(Base):
    __tablename__ = "parkings"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column("created_by_user", Integer, ForeignKey("users.id"))
    parking_id = Column("parking_spot", Integer, ForeignKey("parkings.id"))
    start_date = Column("start_date_time", DateTime, nullable=False)
    end_date = Column("end_date_time", DateTime, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship(User)
    parking = relationship(Parking)
