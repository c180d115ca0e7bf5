from sqlalchemy import Column, ForeignKey, Integer, LargeBinary, String

from isupipe.core.database import Base

class Icon(Base):
    __tablename__ = "icons"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    image = Column(LargeBinary, nullable=False)


class IconHash(Base):
    __tablename__ = "icon_hashes"

    id = Column(Integer, primary_key=True, index=True)
    icon_id = Column(Integer, ForeignKey("icons.id"), nullable=False, index=True)
    # sha256 hex digest of icons.image
    hash = Column(String(64), nullable=False)
