from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Text

from isupipe.core.database import Base

class Livestream(Base):
    __tablename__ = "livestreams"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    playlist_url = Column(String(255), nullable=False)
    thumbnail_url = Column(String(255), nullable=False)

    # Epoch seconds
    start_at = Column(BigInteger, nullable=False)
    end_at = Column(BigInteger, nullable=False)
