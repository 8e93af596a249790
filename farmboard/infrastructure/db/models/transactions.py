from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from farmboard.infrastructure.db.engine import Base


class WalletUserModel(Base):
    __tablename__ = "wallet_users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    wallet_address: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    transactions: Mapped[list[TransactionModel]] = relationship(back_populates="user")


class TransactionModel(Base):
    __tablename__ = "transactions"
    __table_args__ = (Index("ix_transactions_user_created", "user_id", "created_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("wallet_users.id"), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    pool_id: Mapped[str] = mapped_column(Text, nullable=False)
    pool_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    token_a: Mapped[str | None] = mapped_column(Text, nullable=True)
    token_b: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount_a: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount_b: Mapped[str | None] = mapped_column(Text, nullable=True)
    lp_token_amount: Mapped[str | None] = mapped_column(Text, nullable=True)
    signature: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="PENDING")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user: Mapped[WalletUserModel] = relationship(back_populates="transactions")
