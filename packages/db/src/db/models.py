# This project was developed with assistance from AI tools.
"""
Affordability engine -- persisted state

The only thing stored is the flat key -> string snapshot of a profile's
calculator inputs. Derived results are never persisted; they are recomputed.
"""

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint, func

from .database import Base


class SavedInput(Base):
    """One calculator input value of a saved profile."""

    __tablename__ = "saved_inputs"
    __table_args__ = (
        UniqueConstraint("profile_id", "key", name="uq_saved_inputs_profile_key"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(String(255), nullable=False, index=True)
    key = Column(String(64), nullable=False)
    value = Column(String(64), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False,
    )

    def __repr__(self):
        return f"<SavedInput(profile_id='{self.profile_id}', key='{self.key}')>"
