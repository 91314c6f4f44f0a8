"""SQLAlchemy models exposed by the backend."""
from .base import Base
from .budget_item import BudgetItem
from .employee import Employee
from .holiday import Holiday
from .ledger import OvertimeItem, OvertimeYear, SpecialAssistItem
from .master_rate import MasterRate

__all__ = [
    "Base",
    "BudgetItem",
    "Employee",
    "Holiday",
    "MasterRate",
    "OvertimeItem",
    "OvertimeYear",
    "SpecialAssistItem",
]
