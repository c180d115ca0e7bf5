from sqlalchemy import Boolean, Column, ForeignKey, Integer

from isupipe.core.database import Base

class Theme(Base):
    __tablename__ = "themes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    dark_mode = Column(Boolean, nullable=False, default=False)
