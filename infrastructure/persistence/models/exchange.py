from decimal import Decimal

from sqlalchemy import DECIMAL, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class ExchangeEdgeDB(Base):
	__tablename__ = 'exchange_edges'

	id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
	position: Mapped[int] = mapped_column(Integer, nullable=False)
	from_currency: Mapped[str] = mapped_column(String(10), nullable=False)
	to_currency: Mapped[str] = mapped_column(String(10), nullable=False)
	rate: Mapped[Decimal] = mapped_column(DECIMAL(precision=18, scale=6), nullable=False)

	__table_args__ = (
		Index('idx_exchange_position', 'position'),
		Index('idx_exchange_from_currency', 'from_currency'),
	)
