from sqlalchemy import Column, Index, String, Text
from sqlalchemy.sql import func
from department_api.db.base import BaseModel

class Department(BaseModel):
    __tablename__ = 'departments'
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row
    __table_args__ = {'sqlite_autoincrement': True}

    name = Column(String(255), nullable=False)
    address = Column(Text)
    code = Column(String(100))

    def __repr__(self):
        return f"<Department id={self.id} name={self.name!r}>"


# Backs case-insensitive lookups by name
Index('ix_departments_name_lower', func.lower(Department.name))
