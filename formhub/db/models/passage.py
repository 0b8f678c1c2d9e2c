# db/models/passage.py
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Text, Integer, DateTime, ForeignKey, func
from formhub.db import Base


class FormPassage(Base):
    __tablename__ = "form_passages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    form_id: Mapped[int] = mapped_column(Integer, ForeignKey("forms.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())

    form = relationship("Form", back_populates="passages")
    respondent = relationship("User", back_populates="passages")
    answers = relationship("PassageAnswer", back_populates="passage", cascade="all, delete-orphan")


class PassageAnswer(Base):
    __tablename__ = "passage_answers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    form_passage_id: Mapped[int] = mapped_column(Integer, ForeignKey("form_passages.id", ondelete="CASCADE"), nullable=False, index=True)
    # no FK: answers outlive deleted questions and are reported as integrity errors
    question_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    answer_text: Mapped[str] = mapped_column(Text, nullable=False)

    passage = relationship("FormPassage", back_populates="answers")
