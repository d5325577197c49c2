from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from driver_registry.infrastructure.db.base import Base

class FormulaOneDriver(Base):
    __tablename__ = "formula_one_driver"

    driver_number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    full_name: Mapped[str] = mapped_column(String(120), index=True)
    team: Mapped[str | None] = mapped_column(String(120), nullable=True)

    def __repr__(self) -> str:
        return f"FormulaOneDriver(driver_number={self.driver_number}, full_name={self.full_name}, team={self.team})"
