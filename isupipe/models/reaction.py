from sqlalchemy import BigInteger, Column, ForeignKey, Index, Integer, String

from isupipe.core.database import Base

class Reaction(Base):
    __tablename__ = "reactions"

    id = Column(Integer, primary_key=True, index=True)

    # Free text, stored verbatim (e.g. ":tada:", "👍")
    emoji_name = Column(String(255), nullable=False)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    livestream_id = Column(Integer, ForeignKey("livestreams.id"), nullable=False)

    # Epoch seconds
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        Index("livestream_id_idx", "livestream_id"),
    )
