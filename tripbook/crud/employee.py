from typing import List, Optional
from sqlalchemy.orm import Session
from ..models.employee import Employee


def get(db: Session, employee_id: int) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_by_username(db: Session, username: str) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.username == username).first()


def list_employees(db: Session, skip: int = 0, limit: int = 100) -> List[Employee]:
    return db.query(Employee).order_by(Employee.id.asc()).offset(skip).limit(limit).all()
