"""Similar creator model — directed similarity edges, recomputed wholesale per creator."""

from sqlalchemy import Column, Numeric, DateTime, ForeignKey, Index, Uuid, func

from creatorrec.models.base import Base, JSONType, UUIDMixin


class SimilarCreator(UUIDMixin, Base):
    __tablename__ = "similar_creators"

    creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False)
    similar_creator_id = Column(Uuid(as_uuid=True), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False)
    similarity_score = Column(Numeric(5, 2, asdecimal=False), nullable=False)  # 0-100
    similarity_factors = Column(JSONType, default=list)
    calculated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_similar_creators_creator_score", "creator_id", "similarity_score"),
    )
