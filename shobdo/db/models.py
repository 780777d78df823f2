"""
SQLAlchemy ORM models for the Shobdo dictionary database.

Three small tables back the suggestion engine:
- words: romanized stem -> Bengali word, ordered by ord within a stem
- autocorrect: exact token -> preferred replacement (words and symbols)
- suffixes: romanized suffix -> Bengali rendering
"""

from sqlalchemy import Integer, String, UniqueConstraint, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Word(Base):
    __tablename__ = "words"
    __table_args__ = (
        Index("ix_words_romanized_ord", "romanized", "ord"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    romanized: Mapped[str] = mapped_column(String, nullable=False)
    text: Mapped[str] = mapped_column(String, nullable=False)
    ord: Mapped[int] = mapped_column(Integer, default=0)

    def __repr__(self) -> str:
        return f"<Word {self.romanized!r} -> {self.text!r}>"


class AutoCorrect(Base):
    __tablename__ = "autocorrect"
    __table_args__ = (UniqueConstraint("term"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    term: Mapped[str] = mapped_column(String, nullable=False)
    replacement: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<AutoCorrect {self.term!r} -> {self.replacement!r}>"


class Suffix(Base):
    __tablename__ = "suffixes"
    __table_args__ = (UniqueConstraint("romanized"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    romanized: Mapped[str] = mapped_column(String, nullable=False)
    text: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Suffix {self.romanized!r} -> {self.text!r}>"
