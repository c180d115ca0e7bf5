from sqlalchemy import Column, Integer, String, Text

from isupipe.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    display_name = Column(String(255), nullable=True)
    password = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
