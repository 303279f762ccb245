from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from recuerdamed.db.base import get_db
from recuerdamed.models.model_user import User


class UserRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.user_id == user_id).first()

    def create(self, user_data: User, commit: bool = True) -> User:
        """Persist a user; with commit=False it is only flushed so a caller can finish the transaction."""
        self.db.add(user_data)
        if not commit:
            self.db.flush()
            return user_data
        self.db.commit()
        self.db.refresh(user_data)
        return user_data
