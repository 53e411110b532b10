# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents an account allowed to log in to the asset register
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    # Salted hash, never the plain password
    password = Column(String, nullable=False)
    role = Column(String, nullable=False)
