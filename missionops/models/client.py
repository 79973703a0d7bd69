# missionops/models/client.py
from sqlalchemy import Column, Integer, String
from missionops.db import Base

class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False, unique=True)
    logo = Column(String, nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
